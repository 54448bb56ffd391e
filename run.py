#!/usr/bin/env python3
"""
Run the morsewave development server.
"""

import sys
import os

# add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from morsewave.web import create_app

if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='127.0.0.1', port=5000)

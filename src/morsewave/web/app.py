"""
morsewave Flask application
"""

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS


def create_app(config: Optional[Mapping[str, Any]] = None):
    app = Flask(__name__)
    # 8 MB covers several minutes of 16-bit Morse audio
    app.config['MAX_CONTENT_LENGTH'] = 8 * 1024 * 1024
    if config:
        app.config.update(config)
    CORS(app)

    # register blueprints
    from .routes import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    return app

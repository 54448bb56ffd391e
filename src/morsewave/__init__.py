"""
morsewave: text <-> Morse code <-> PCM WAV audio
"""

__version__ = '1.0.0'

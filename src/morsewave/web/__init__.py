# HTTP API for the Morse codec
from .app import create_app

__all__ = ['create_app']

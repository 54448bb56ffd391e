"""
Morse codec exceptions

File open/read/write failures are not wrapped; they surface as OSError.
"""

from typing import Optional


class MorseError(Exception):
    """Base class for all codec failures."""


class UnsupportedCharacter(MorseError, ValueError):
    """Raised when text contains a character with no Morse pattern."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Character '{character}' cannot be encoded in Morse.")


class UnsupportedSampleWidth(MorseError, ValueError):
    """Raised when a WAV sample width does not match the expected one."""

    def __init__(self, found: int, expected: Optional[int] = None):
        self.found = found
        self.expected = expected
        if expected is None:
            message = f"Unsupported sample width: {found} bits"
        else:
            message = f"Unsupported sample width in WAV file: {found} bits (expected {expected})"
        super().__init__(message)


class InvalidContainer(MorseError, ValueError):
    """Raised when input bytes are not a readable PCM WAV stream."""

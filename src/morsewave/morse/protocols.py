"""
Capability interfaces for the two codec roles.

Concrete classes satisfy these structurally; nothing inherits from them.
"""

from typing import Protocol

import numpy as np


class TextTranscoder(Protocol):
    """Converts between plain text and Morse strings."""

    def encode(self, text: str) -> str: ...

    def decode(self, morse: str) -> str: ...


class AudioCodec(Protocol):
    """Converts between Morse strings and PCM samples."""

    def render(self, morse: str) -> np.ndarray: ...

    def detect(self, samples: np.ndarray, sample_rate: int) -> str: ...

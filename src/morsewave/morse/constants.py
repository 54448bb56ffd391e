"""
Morse audio timing and format constants

Timings follow the PARIS convention scaled to a 0.1 s dot (12 WPM):
dot = 1 unit, dash = 3 units, symbol gap = 1 unit, letter gap = 3 units.
"""

from enum import Enum

import numpy as np

from .errors import UnsupportedSampleWidth

# PCM container parameters
SAMPLE_RATE = 44100  # Hz, mono
NUM_CHANNELS = 1

# tone
TONE_FREQ = 800.0  # Hz

# element durations (seconds)
DOT_DURATION = 0.1
DASH_DURATION = 0.3
SYMBOL_SPACE = 0.1
LETTER_SPACE = SYMBOL_SPACE * 3
WORD_SPACE = 0.7

# detector
DEBOUNCE_DURATION = 0.001  # ~44 samples at 44.1 kHz
DOT_DASH_SPLIT = (DOT_DURATION + DASH_DURATION) / 2
# measured gaps include the symbol space appended after every element
WORD_GAP_MIN = 0.79
LETTER_GAP_MIN = 0.39
THRESHOLD_DIVISOR = 100  # active above 1% of full scale

# Morse string markers
DOT = '.'
DASH = '-'
LETTER_GAP = ' '
WORD_GAP = '   '


class SampleWidth(Enum):
    """Supported signed PCM sample widths, in bits."""
    INT8 = 8
    INT16 = 16
    INT32 = 32

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(f'int{self.value}')

    @property
    def bytes_per_sample(self) -> int:
        return self.value // 8

    @property
    def max_amplitude(self) -> int:
        return int(np.iinfo(self.dtype).max)

    @property
    def threshold(self) -> int:
        return self.max_amplitude // THRESHOLD_DIVISOR

    @classmethod
    def from_bits(cls, bits: int) -> 'SampleWidth':
        """Look up a width by bit count, raising UnsupportedSampleWidth."""
        try:
            return cls(int(bits))
        except (TypeError, ValueError):
            raise UnsupportedSampleWidth(found=bits) from None


DEFAULT_SAMPLE_WIDTH = SampleWidth.INT16

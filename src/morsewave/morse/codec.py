"""
Morse string <-> PCM sample codec
"""

import numpy as np

from .constants import SAMPLE_RATE, TONE_FREQ, DEFAULT_SAMPLE_WIDTH, SampleWidth
from .detector import detect
from .renderer import ToneRenderer


class ToneCodec:
    """Pairs ToneRenderer and ToneDetector at one sample width."""

    def __init__(
        self,
        sample_width: SampleWidth = DEFAULT_SAMPLE_WIDTH,
        sample_rate: int = SAMPLE_RATE,
        frequency: float = TONE_FREQ
    ):
        self.sample_width = sample_width
        self.sample_rate = sample_rate
        self.renderer = ToneRenderer(sample_width, sample_rate, frequency)

    def render(self, morse: str) -> np.ndarray:
        return self.renderer.render(morse)

    def detect(self, samples: np.ndarray, sample_rate: int = SAMPLE_RATE) -> str:
        return detect(samples, sample_rate=sample_rate, sample_width=self.sample_width)

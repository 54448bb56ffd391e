"""
Morse string -> PCM tone renderer

Generates keyed sine bursts at a fixed frequency with silences between
elements, letters and words.
"""

import logging
from typing import List

import numpy as np

from .constants import (
    SAMPLE_RATE, TONE_FREQ,
    DOT_DURATION, DASH_DURATION, SYMBOL_SPACE, LETTER_SPACE, WORD_SPACE,
    DOT, DASH, DEFAULT_SAMPLE_WIDTH, SampleWidth
)

logger = logging.getLogger(__name__)


class ToneRenderer:
    """
    Renders Morse strings to integer PCM samples.

    Every element is followed by one symbol space. A single space adds a
    letter gap, a run of three or more spaces adds a word gap. A run of
    exactly two spaces adds nothing, which keeps the output in step with
    what ToneDetector can classify.
    """

    def __init__(
        self,
        sample_width: SampleWidth = DEFAULT_SAMPLE_WIDTH,
        sample_rate: int = SAMPLE_RATE,
        frequency: float = TONE_FREQ
    ):
        self.sample_width = sample_width
        self.sample_rate = sample_rate
        self.frequency = frequency
        self.amplitude = sample_width.max_amplitude

    def _n_samples(self, duration: float) -> int:
        return int(duration * self.sample_rate)

    def _generate_tone(self, duration: float) -> np.ndarray:
        """Generate a sine burst starting at zero phase."""
        t = np.arange(self._n_samples(duration)) / self.sample_rate
        signal = np.rint(self.amplitude * np.sin(2 * np.pi * self.frequency * t))
        return signal.astype(self.sample_width.dtype)

    def _generate_silence(self, duration: float) -> np.ndarray:
        return np.zeros(self._n_samples(duration), dtype=self.sample_width.dtype)

    def _gap_for_run(self, run: int) -> float:
        """Silence added for a run of spaces, in seconds."""
        if run == 1:
            return LETTER_SPACE
        if run >= 3:
            return WORD_SPACE
        return 0.0

    def _segments(self, morse: str) -> List[tuple]:
        """
        Split a Morse string into ('tone' | 'silence', duration) segments.
        Characters other than '.', '-' and ' ' are ignored.
        """
        segments = []
        i = 0
        while i < len(morse):
            char = morse[i]
            if char == DOT or char == DASH:
                duration = DOT_DURATION if char == DOT else DASH_DURATION
                segments.append(('tone', duration))
                segments.append(('silence', SYMBOL_SPACE))
                i += 1
            elif char == ' ':
                run = 0
                while i < len(morse) and morse[i] == ' ':
                    run += 1
                    i += 1
                gap = self._gap_for_run(run)
                if gap:
                    segments.append(('silence', gap))
            else:
                i += 1
        return segments

    def render(self, morse: str) -> np.ndarray:
        """
        Render a Morse string to PCM samples.

        Args:
            morse: Morse string ('.', '-', spaces)

        Returns:
            1-D numpy array with the renderer's sample width dtype
        """
        # bursts are identical, generate each duration once
        tones = {}
        chunks = []
        for kind, duration in self._segments(morse):
            if kind == 'tone':
                if duration not in tones:
                    tones[duration] = self._generate_tone(duration)
                chunks.append(tones[duration])
            else:
                chunks.append(self._generate_silence(duration))

        if not chunks:
            return np.zeros(0, dtype=self.sample_width.dtype)

        samples = np.concatenate(chunks)
        logger.debug("Rendered %d samples (%.2f s) from %d Morse characters",
                     len(samples), len(samples) / self.sample_rate, len(morse))
        return samples

    def duration(self, morse: str) -> float:
        """Length in seconds of the audio a Morse string renders to."""
        n_samples = sum(self._n_samples(d) for _, d in self._segments(morse))
        return n_samples / self.sample_rate

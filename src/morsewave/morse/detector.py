"""
PCM -> Morse string tone detector

Envelope thresholding with debounce, followed by duration classification
of the confirmed tone and silence intervals.
"""

from enum import Enum
from typing import List, Optional

import numpy as np

from .constants import (
    SAMPLE_RATE, DEBOUNCE_DURATION, DOT_DASH_SPLIT,
    WORD_GAP_MIN, LETTER_GAP_MIN,
    DOT, DASH, LETTER_GAP, WORD_GAP,
    DEFAULT_SAMPLE_WIDTH, SampleWidth
)


class DetectorState(Enum):
    IN_SILENCE = 'silence'
    IN_TONE = 'tone'


class ToneDetector:
    """
    Sample-by-sample tone/silence state machine.

    A sample is active when its magnitude exceeds 1% of full scale. A change
    of classification only becomes a state transition after it has held for
    the debounce length (0.001 s); shorter blips reset the counter. On each
    committed transition the interval that just ended is classified:

    - tone shorter than 0.2 s -> '.', otherwise '-'
    - silence >= 0.79 s -> word gap, >= 0.39 s -> letter gap, else nothing

    Transitions are timestamped at the sample that confirms them, so both
    edges carry the same debounce delay and durations are unaffected.
    """

    def __init__(
        self,
        sample_rate: int = SAMPLE_RATE,
        sample_width: SampleWidth = DEFAULT_SAMPLE_WIDTH
    ):
        self.sample_rate = sample_rate
        self.sample_width = sample_width
        self.threshold = sample_width.threshold
        self.debounce_samples = max(1, int(sample_rate * DEBOUNCE_DURATION))
        self.reset()

    def reset(self):
        """Return to the initial state, discarding any output."""
        self.state = DetectorState.IN_SILENCE
        self.debounce_counter = 0
        self.tone_start = 0
        self.silence_start: Optional[int] = None
        self.index = 0
        self._output: List[str] = []

    @property
    def morse(self) -> str:
        """Morse string accumulated so far."""
        return ''.join(self._output)

    def is_active(self, sample) -> bool:
        return abs(int(sample)) > self.threshold

    def step(self, sample) -> str:
        """Advance by one sample. Returns whatever this sample emitted."""
        return self.advance(self.is_active(sample))

    def advance(self, active: bool) -> str:
        """
        Advance by one already-classified sample.

        Returns:
            Morse characters emitted by this sample (usually '')
        """
        emitted = ''
        i = self.index
        in_tone = self.state is DetectorState.IN_TONE

        if active != in_tone:
            self.debounce_counter += 1
            if self.debounce_counter >= self.debounce_samples:
                self.debounce_counter = 0
                if active:
                    emitted = self._enter_tone(i)
                else:
                    emitted = self._enter_silence(i)
        else:
            self.debounce_counter = 0

        self.index += 1
        if emitted:
            self._output.append(emitted)
        return emitted

    def _enter_tone(self, i: int) -> str:
        self.state = DetectorState.IN_TONE
        emitted = ''
        if self.silence_start is not None:
            emitted = self.classify_silence((i - self.silence_start) / self.sample_rate)
            self.silence_start = None
        self.tone_start = i
        return emitted

    def _enter_silence(self, i: int) -> str:
        self.state = DetectorState.IN_SILENCE
        self.silence_start = i
        return self.classify_tone((i - self.tone_start) / self.sample_rate)

    @staticmethod
    def classify_tone(duration: float) -> str:
        return DOT if duration < DOT_DASH_SPLIT else DASH

    @staticmethod
    def classify_silence(duration: float) -> str:
        if duration >= WORD_GAP_MIN:
            return WORD_GAP
        if duration >= LETTER_GAP_MIN:
            return LETTER_GAP
        # inter-element gap, nothing to emit
        return ''

    def feed(self, samples: np.ndarray) -> str:
        """
        Advance over a block of samples.

        Returns:
            Morse characters emitted by the block
        """
        # widen first so abs() of the most negative sample cannot overflow
        active = np.abs(np.asarray(samples, dtype=np.int64)) > self.threshold
        emitted = [self.advance(flag) for flag in active.tolist()]
        return ''.join(emitted)


def detect(
    samples: np.ndarray,
    sample_rate: int = SAMPLE_RATE,
    sample_width: SampleWidth = DEFAULT_SAMPLE_WIDTH
) -> str:
    """
    Reconstruct a Morse string from PCM samples.

    A tone still unconfirmed at the end of the stream is dropped, and
    trailing silence emits nothing.
    """
    detector = ToneDetector(sample_rate=sample_rate, sample_width=sample_width)
    detector.feed(samples)
    return detector.morse

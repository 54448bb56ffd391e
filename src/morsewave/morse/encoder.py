"""
Text -> Morse WAV encoder

Chains MorseTranscoder, ToneRenderer and WaveformContainer.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .codec import ToneCodec
from .constants import SAMPLE_RATE, DEFAULT_SAMPLE_WIDTH, SampleWidth
from .container import WaveformContainer, Sink
from .protocols import AudioCodec, TextTranscoder
from .text import MorseTranscoder

logger = logging.getLogger(__name__)


class MorseEncoder:
    """
    Encodes text to Morse audio.

    The audio structure per letter is: element bursts (0.1 s dot, 0.3 s
    dash) each followed by 0.1 s silence, then 0.3 s before the next
    letter or 0.7 s before the next word.
    """

    def __init__(
        self,
        sample_width: SampleWidth = DEFAULT_SAMPLE_WIDTH,
        sample_rate: int = SAMPLE_RATE,
        transcoder: Optional[TextTranscoder] = None,
        codec: Optional[AudioCodec] = None
    ):
        self.sample_width = sample_width
        self.sample_rate = sample_rate
        self.transcoder = transcoder or MorseTranscoder()
        self.codec = codec or ToneCodec(sample_width, sample_rate)
        self.container = WaveformContainer(sample_width, sample_rate)

    def to_morse(self, text: str) -> str:
        """Encode text to a Morse string."""
        return self.transcoder.encode(text)

    def encode(self, text: str) -> np.ndarray:
        """
        Encode text to PCM samples.

        Raises:
            UnsupportedCharacter: if text has a character outside the alphabet
        """
        morse = self.to_morse(text)
        logger.debug("Generated Morse: %s", morse)
        return self.codec.render(morse)

    def to_wav(self, samples: np.ndarray, sink: Sink):
        """Export audio samples to a WAV file."""
        self.container.write(sink, samples)

    def to_bytes(self, samples: np.ndarray) -> bytes:
        """Convert audio samples to WAV bytes (for web streaming)."""
        return self.container.to_bytes(samples)

    def encode_file(self, input_path: Union[str, Path], output_path: Union[str, Path]):
        """
        Encode a plain-text file to a WAV file.

        A trailing line break in the input is ignored.
        """
        try:
            text = Path(input_path).read_text(encoding='utf-8').rstrip('\r\n')
        except UnicodeDecodeError as e:
            raise OSError(f"Cannot read {input_path}: not UTF-8 text ({e.reason})") from e
        # encode fully before touching the output
        samples = self.encode(text)
        self.to_wav(samples, output_path)
        logger.debug("Wrote %d samples to %s", len(samples), output_path)

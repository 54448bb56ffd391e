"""
Morse WAV -> text decoder

Chains WaveformContainer, ToneDetector and MorseTranscoder.
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


class MorseDecoder:
    """
    Decodes Morse audio back to text.

    Detection is plain amplitude thresholding, so input is expected to be
    clean keyed audio such as MorseEncoder produces.
    """

    def __init__(
        self,
        sample_width: SampleWidth = DEFAULT_SAMPLE_WIDTH,
        transcoder: Optional[TextTranscoder] = None,
        codec: Optional[AudioCodec] = None
    ):
        self.sample_width = sample_width
        self.transcoder = transcoder or MorseTranscoder()
        self.codec = codec or ToneCodec(sample_width)
        self.container = WaveformContainer(sample_width)

    def to_morse(self, samples: np.ndarray, sample_rate: int = SAMPLE_RATE) -> str:
        """Recover the Morse string from PCM samples."""
        morse = self.codec.detect(samples, sample_rate)
        logger.debug("Decoded Morse: %s", morse)
        return morse

    def decode(self, samples: np.ndarray, sample_rate: int = SAMPLE_RATE) -> str:
        """Decode PCM samples to text."""
        return self.transcoder.decode(self.to_morse(samples, sample_rate))

    def decode_wav(self, source: Sink) -> str:
        """
        Decode a WAV file or binary file object to text.

        Raises:
            OSError: if the source cannot be opened
            UnsupportedSampleWidth: if the file's sample width differs
            InvalidContainer: if the data is not a mono PCM WAV stream
        """
        samples, sample_rate = self.container.read_with_rate(source)
        logger.debug("Read %d samples at %d Hz", len(samples), sample_rate)
        return self.decode(samples, sample_rate)

    def decode_bytes(self, audio_bytes: bytes) -> str:
        """Decode WAV bytes to text."""
        samples, sample_rate = self.container.from_bytes(audio_bytes)
        return self.decode(samples, sample_rate)

    def decode_file(self, input_path: Union[str, Path], output_path: Union[str, Path]):
        """Decode a WAV file and write the text to a plain-text file."""
        text = self.decode_wav(input_path)
        Path(output_path).write_text(text, encoding='utf-8')

"""
PCM WAV container for Morse audio

Layout written (all little-endian, 44-byte header):

    "RIFF" riffSize(u32) "WAVE"
    "fmt " 16(u32) format=1(u16) channels=1(u16) rate(u32)
           byteRate(u32) blockAlign(u16) bitsPerSample(u16)
    "data" dataSize(u32) <signed PCM samples>
"""

import io
import os
import wave
from typing import BinaryIO, Tuple, Union

import numpy as np

from .constants import SAMPLE_RATE, NUM_CHANNELS, DEFAULT_SAMPLE_WIDTH, SampleWidth
from .errors import UnsupportedSampleWidth, InvalidContainer

Sink = Union[str, os.PathLike, BinaryIO]


class WaveformContainer:
    """
    Reads and writes mono signed PCM WAV data at a fixed sample width.

    Writer and reader must agree on the width; a file written at 8 bits
    cannot be read by a 16-bit container.
    """

    def __init__(
        self,
        sample_width: SampleWidth = DEFAULT_SAMPLE_WIDTH,
        sample_rate: int = SAMPLE_RATE
    ):
        self.sample_width = sample_width
        self.sample_rate = sample_rate

    def _to_pcm(self, samples: np.ndarray) -> np.ndarray:
        samples = np.asarray(samples)
        dtype = self.sample_width.dtype
        if samples.dtype == dtype:
            return samples
        info = np.iinfo(dtype)
        return np.clip(np.rint(samples), info.min, info.max).astype(dtype)

    def write(self, sink: Sink, samples: np.ndarray):
        """
        Write samples to a path or writable binary file object.

        Raises:
            OSError: if the sink cannot be opened for writing
        """
        pcm = self._to_pcm(samples)
        sink = os.fspath(sink) if isinstance(sink, os.PathLike) else sink

        with wave.open(sink, 'wb') as wav:
            wav.setnchannels(NUM_CHANNELS)
            wav.setsampwidth(self.sample_width.bytes_per_sample)
            wav.setframerate(self.sample_rate)
            wav.writeframes(pcm.tobytes())

    def to_bytes(self, samples: np.ndarray) -> bytes:
        """Serialize samples to WAV bytes (for web responses)."""
        buffer = io.BytesIO()
        self.write(buffer, samples)
        return buffer.getvalue()

    def read_with_rate(self, source: Sink) -> Tuple[np.ndarray, int]:
        """
        Read a WAV file and return (samples, sample_rate).

        Raises:
            OSError: if the source cannot be opened
            UnsupportedSampleWidth: if the file's bits per sample differ
            InvalidContainer: if the data is not a mono PCM WAV stream
        """
        source = os.fspath(source) if isinstance(source, os.PathLike) else source

        try:
            with wave.open(source, 'rb') as wav:
                n_channels = wav.getnchannels()
                sample_width = wav.getsampwidth()
                framerate = wav.getframerate()
                raw = wav.readframes(wav.getnframes())
        except (wave.Error, EOFError) as e:
            raise InvalidContainer(f"Not a PCM WAV stream: {e}") from e

        bits = sample_width * 8
        if bits != self.sample_width.value:
            raise UnsupportedSampleWidth(found=bits, expected=self.sample_width.value)
        if n_channels != NUM_CHANNELS:
            raise InvalidContainer(f"Expected mono audio, got {n_channels} channels")

        # drop a trailing partial sample rather than fail in frombuffer
        usable = len(raw) - len(raw) % self.sample_width.bytes_per_sample
        samples = np.frombuffer(raw[:usable], dtype=self.sample_width.dtype).copy()
        return samples, framerate

    def read(self, source: Sink) -> np.ndarray:
        """Read a WAV file and return its samples."""
        samples, _ = self.read_with_rate(source)
        return samples

    def from_bytes(self, data: bytes) -> Tuple[np.ndarray, int]:
        """Parse WAV bytes, returning (samples, sample_rate)."""
        return self.read_with_rate(io.BytesIO(data))

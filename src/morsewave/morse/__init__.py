# Morse code text and audio codec
from .constants import SampleWidth
from .errors import MorseError, UnsupportedCharacter, UnsupportedSampleWidth, InvalidContainer
from .text import MorseTranscoder
from .renderer import ToneRenderer
from .detector import ToneDetector, DetectorState, detect
from .container import WaveformContainer
from .codec import ToneCodec
from .encoder import MorseEncoder
from .decoder import MorseDecoder

__all__ = [
    'SampleWidth',
    'MorseError', 'UnsupportedCharacter', 'UnsupportedSampleWidth', 'InvalidContainer',
    'MorseTranscoder', 'ToneRenderer', 'ToneDetector', 'DetectorState', 'detect',
    'WaveformContainer', 'ToneCodec', 'MorseEncoder', 'MorseDecoder'
]

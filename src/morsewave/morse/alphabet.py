"""
International Morse code table for the supported alphabet

A-Z, 0-9, '.', ',', '?' and the word separator. Both directions are
read-only mappings built once at import.
"""

from types import MappingProxyType
from typing import Optional

from .constants import WORD_GAP
from .errors import UnsupportedCharacter

MORSE_CODE = MappingProxyType({
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.',
    'F': '..-.', 'G': '--.', 'H': '....', 'I': '..', 'J': '.---',
    'K': '-.-', 'L': '.-..', 'M': '--', 'N': '-.', 'O': '---',
    'P': '.--.', 'Q': '--.-', 'R': '.-.', 'S': '...', 'T': '-',
    'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-', 'Y': '-.--',
    'Z': '--..',
    '0': '-----', '1': '.----', '2': '..---', '3': '...--', '4': '....-',
    '5': '.....', '6': '-....', '7': '--...', '8': '---..', '9': '----.',
    '.': '.-.-.-', ',': '--..--', '?': '..--..',
    ' ': WORD_GAP,
})

REVERSE_CODE = MappingProxyType({pattern: char for char, pattern in MORSE_CODE.items()})


def to_morse(char: str) -> str:
    """
    Look up the Morse pattern for a single character.

    Letters are case-folded. Space maps to the word gap.

    Raises:
        UnsupportedCharacter: if the character is outside the alphabet
    """
    pattern = MORSE_CODE.get(char.upper())
    if pattern is None:
        raise UnsupportedCharacter(char)
    return pattern


def to_char(pattern: str) -> Optional[str]:
    """Look up the character for a Morse pattern, or None if unknown."""
    return REVERSE_CODE.get(pattern)
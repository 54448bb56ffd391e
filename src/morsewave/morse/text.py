"""
Text <-> Morse string transcoding

Morse string format: '.' and '-' for elements, one space between letters,
exactly three spaces between words.
"""

from typing import List

from . import alphabet
from .constants import LETTER_GAP, WORD_GAP


class MorseTranscoder:
    """
    Encodes text to Morse strings and decodes them back.

    Encoding is strict (unknown characters raise), decoding is lossy
    (unknown tokens are dropped).
    """

    def encode(self, text: str) -> str:
        """
        Encode text to a Morse string.

        Args:
            text: Input text, any case

        Returns:
            Morse string

        Raises:
            UnsupportedCharacter: on the first character outside the alphabet
        """
        parts: List[str] = []
        prev_was_space = False

        for char in text:
            if char == ' ':
                parts.append(WORD_GAP)
                prev_was_space = True
                continue

            pattern = alphabet.to_morse(char)
            # a word gap already separates us from the previous letter
            if parts and not prev_was_space:
                parts.append(LETTER_GAP)
            parts.append(pattern)
            prev_was_space = False

        return ''.join(parts)

    def decode(self, morse: str) -> str:
        """
        Decode a Morse string to uppercase text.

        Unknown tokens are skipped. Words are joined with single spaces,
        so runs of word gaps come back as runs of spaces.
        """
        words = []
        for segment in morse.split(WORD_GAP):
            letters = []
            for token in segment.split():
                char = alphabet.to_char(token)
                if char is not None:
                    letters.append(char)
            words.append(''.join(letters))

        return ' '.join(words)

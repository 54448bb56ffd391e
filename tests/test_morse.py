"""
Tests for the Morse alphabet and text transcoder
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from morsewave.morse import MorseTranscoder, UnsupportedCharacter, MorseError
from morsewave.morse import alphabet


class TestAlphabet:
    """Tests for the character/pattern table."""

    def test_alphabet_size(self):
        """Test that the table covers letters, digits, punctuation and space."""
        assert len(alphabet.MORSE_CODE) == 40
        assert set('ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.,? ') == set(alphabet.MORSE_CODE)

    def test_table_is_bijective(self):
        """Test that every pattern maps back to exactly one character."""
        assert len(alphabet.REVERSE_CODE) == len(alphabet.MORSE_CODE)
        for char, pattern in alphabet.MORSE_CODE.items():
            assert alphabet.to_char(pattern) == char

    def test_lookup_is_case_insensitive(self):
        assert alphabet.to_morse('a') == alphabet.to_morse('A') == '.-'

    def test_unknown_character_raises(self):
        with pytest.raises(UnsupportedCharacter) as exc:
            alphabet.to_morse('!')
        assert exc.value.character == '!'

    def test_unknown_pattern_returns_none(self):
        assert alphabet.to_char('.-.-.-.-.-') is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            alphabet.MORSE_CODE['!'] = '-.-.--'


class TestMorseEncode:
    """Tests for text -> Morse encoding."""

    def setup_method(self):
        self.transcoder = MorseTranscoder()

    def test_single_word(self):
        assert self.transcoder.encode('SOS') == '... --- ...'

    def test_words_separated_by_three_spaces(self):
        assert self.transcoder.encode('HI YOU') == '.... ..   -.-- --- ..-'

    def test_lowercase_is_folded(self):
        assert self.transcoder.encode('sos') == self.transcoder.encode('SOS')

    def test_punctuation(self):
        assert self.transcoder.encode('A.,?') == '.- .-.-.- --..-- ..--..'

    def test_no_letter_gap_after_word_gap(self):
        """Test that a letter after a space does not get an extra gap."""
        morse = self.transcoder.encode('E E')
        assert morse == '.   .'
        assert '    ' not in morse

    def test_repeated_spaces(self):
        assert self.transcoder.encode('E  E') == '.' + ' ' * 6 + '.'

    def test_all_spaces(self):
        """Test that three spaces encode to three word gaps."""
        assert self.transcoder.encode('   ') == ' ' * 9

    def test_empty(self):
        assert self.transcoder.encode('') == ''

    def test_unsupported_character_raises(self):
        with pytest.raises(UnsupportedCharacter):
            self.transcoder.encode('HELLO!')

    def test_unsupported_character_is_a_morse_error(self):
        with pytest.raises(MorseError):
            self.transcoder.encode('A\nB')

    def test_unsupported_character_is_a_value_error(self):
        with pytest.raises(ValueError):
            self.transcoder.encode('50%')


class TestMorseDecode:
    """Tests for Morse -> text decoding."""

    def setup_method(self):
        self.transcoder = MorseTranscoder()

    def test_single_word(self):
        assert self.transcoder.decode('... --- ...') == 'SOS'

    def test_multiple_words(self):
        assert self.transcoder.decode('.... ..   -.-- --- ..-') == 'HI YOU'

    def test_junk_tokens_dropped(self):
        """Test that unknown tokens are silently skipped."""
        assert self.transcoder.decode('.. xyz .-') == 'IA'
        assert self.transcoder.decode('...---... .') == 'E'

    def test_never_raises(self):
        assert self.transcoder.decode('hello world') == ''
        assert self.transcoder.decode('') == ''

    def test_all_gaps(self):
        """Test that a run of word gaps decodes to a run of spaces."""
        assert self.transcoder.decode(' ' * 9) == '   '

    def test_four_and_five_space_runs(self):
        """Test that leftover spaces after a word gap are ignored."""
        assert self.transcoder.decode('.-    -...') == 'A B'
        assert self.transcoder.decode('.-     -...') == 'A B'

    def test_six_space_run_is_two_word_gaps(self):
        assert self.transcoder.decode('.-      -...') == 'A  B'

    def test_no_trailing_space(self):
        assert self.transcoder.decode('.-') == 'A'
        assert not self.transcoder.decode('.-   -...').endswith(' ')


class TestTextRoundtrip:
    """Tests for encode/decode round-trips."""

    @pytest.mark.parametrize('text', [
        'HELLO WORLD',
        'I HAVE 2 CUPS OF WATER.',
        'THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG 0123456789',
        'WHAT, WHERE?',
        'A  B',
        ' LEADING',
    ])
    def test_roundtrip(self, text):
        transcoder = MorseTranscoder()
        assert transcoder.decode(transcoder.encode(text)) == text

    def test_roundtrip_uppercases(self):
        transcoder = MorseTranscoder()
        assert transcoder.decode(transcoder.encode('Morse Code')) == 'MORSE CODE'

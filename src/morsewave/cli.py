"""
morsewave command line

    morsewave --encode INPUT.txt OUTPUT.wav
    morsewave --decode INPUT.wav OUTPUT.txt
    morsewave                                 run the self-test
"""

import argparse
import logging
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from .morse import MorseEncoder, MorseDecoder, MorseError, SampleWidth

SELF_TEST_MESSAGE = "I HAVE 2 CUPS OF WATER."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='morsewave',
        description='Convert text to Morse code WAV audio and back. '
                    'With no mode given, runs a round-trip self-test.'
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--encode', nargs=2, metavar=('INPUT', 'OUTPUT'),
                      help='encode a text file to a WAV file')
    mode.add_argument('--decode', nargs=2, metavar=('INPUT', 'OUTPUT'),
                      help='decode a WAV file to a text file')
    parser.add_argument('--bits', type=int, default=SampleWidth.INT16.value,
                        choices=[w.value for w in SampleWidth],
                        help='PCM sample width (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def run_self_test(sample_width: SampleWidth) -> bool:
    """Encode the sample sentence through WAV and back, via temp files."""
    print("Running self-test...")
    encoder = MorseEncoder(sample_width)
    decoder = MorseDecoder(sample_width)

    print(f"Generated Morse:\n{encoder.to_morse(SELF_TEST_MESSAGE)}\n")

    with tempfile.TemporaryDirectory() as tmp:
        test_file = Path(tmp) / 'test.txt'
        test_wav = Path(tmp) / 'test.wav'
        test_out = Path(tmp) / 'output.txt'

        test_file.write_text(SELF_TEST_MESSAGE, encoding='utf-8')
        encoder.encode_file(test_file, test_wav)
        decoder.decode_file(test_wav, test_out)
        decoded = test_out.read_text(encoding='utf-8')

    passed = decoded == SELF_TEST_MESSAGE
    print(f"Original message: {SELF_TEST_MESSAGE}")
    print(f"Decoded message: {decoded}")
    print("SUCCESS" if passed else "FAILURE")
    return passed


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )
    sample_width = SampleWidth(args.bits)

    try:
        if args.encode:
            input_path, output_path = args.encode
            MorseEncoder(sample_width).encode_file(input_path, output_path)
            print(f"Encoded successfully to {output_path}")
        elif args.decode:
            input_path, output_path = args.decode
            MorseDecoder(sample_width).decode_file(input_path, output_path)
            print(f"Decoded successfully to {output_path}")
        elif not run_self_test(sample_width):
            return 1
    except (MorseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())

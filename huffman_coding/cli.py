import argparse
import sys

from .bitstring import encode_bits
from .codes import decode_bits
from .errors import HuffmanError
from .files import read_bit_string, read_source, write_bit_string, write_decoded
from .frequency import ALPHABET_SIZE, MAX_ALPHABET_SIZE
from .session import HuffmanSession

ENCODED_SUFFIX = '.huf'
DECODED_SUFFIX = '.decoded'


def process_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='huffman-coding',
        description='Huffman coding round trip: encode a file, then decode it with the same tree')
    parser.add_argument('filename', type=str)
    parser.add_argument('-o', '--encoded', type=str, help=f'packed output file (default: FILENAME{ENCODED_SUFFIX})')
    parser.add_argument('-d', '--decoded', type=str, help=f'decoded output file (default: FILENAME{DECODED_SUFFIX})')
    parser.add_argument('--alphabet-size', type=int, default=ALPHABET_SIZE,
                        help=f'number of symbol values, at most {MAX_ALPHABET_SIZE} (default: {ALPHABET_SIZE})')
    parser.add_argument('--show-codes', action='store_true', help='print the frequency list and code table')
    parser.add_argument('--strict', action='store_true', help='fail on a packed file that ends inside a code')
    return parser.parse_args(argv)


def show_codes(session: HuffmanSession):
    for pair in session.sorted_list:
        print(f'{chr(pair.symbol)!r}\t{pair.probability:.6f}')
    for symbol, code in session.code_table().items():
        print(f'{symbol}\t{code}')


def main(argv: list[str] | None = None):
    args = process_args(argv)
    encoded_name = args.encoded or args.filename + ENCODED_SUFFIX
    decoded_name = args.decoded or args.filename + DECODED_SUFFIX
    try:
        source = read_source(args.filename)
        session = HuffmanSession.from_source(source, args.alphabet_size)
        if args.show_codes:
            show_codes(session)
        if not write_bit_string(encoded_name, encode_bits(source, session.encodings)):
            sys.exit(-1)
        result = decode_bits(read_bit_string(encoded_name), session.tree, args.strict)
    except (HuffmanError, ValueError, OSError) as e:
        print(str(e), file = sys.stderr)
        sys.exit(-1)
    if not write_decoded(decoded_name, result):
        sys.exit(-1)
    print(f'{args.filename}: {len(source)} bytes -> {encoded_name}, decoded into {decoded_name}')

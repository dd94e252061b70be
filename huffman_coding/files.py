import sys

from bitarray import bitarray

from .bitstring import pack_bits, unpack_bits
from .errors import InvalidBitStringError


def read_source(filename: str) -> bytes:
    with open(filename, 'rb') as f:
        return f.read()


def write_bit_string(filename: str, bits: bitarray | str) -> bool:
    try:
        packed = pack_bits(bits)
    except InvalidBitStringError as e:
        print(str(e), file = sys.stderr)
        return False
    try:
        with open(filename, 'wb') as f:
            f.write(packed)
    except OSError as e:
        print(f'Error when writing to {filename}: {e}', file = sys.stderr)
        return False
    return True


def read_bit_string(filename: str) -> bitarray:
    try:
        packed = read_source(filename)
    except OSError as e:
        print(f'Error while reading {filename}: {e}', file = sys.stderr)
        return bitarray(endian='big')
    if not packed:
        print(f'Error while reading {filename}: file is empty', file = sys.stderr)
        return bitarray(endian='big')
    return unpack_bits(packed)


def write_decoded(filename: str, data: bytes) -> bool:
    try:
        with open(filename, 'wb') as f:
            f.write(data)
    except OSError as e:
        print(f'Error when writing to {filename}: {e}', file = sys.stderr)
        return False
    return True

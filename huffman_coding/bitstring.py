from collections.abc import Iterable, Mapping

from bitarray import bitarray

from .errors import InvalidBitStringError, SymbolNotEncodedError


def encode_bits(source: Iterable[int], coding: Mapping[int, bitarray]) -> bitarray:
    result = bitarray(endian='big')
    for b in source:
        try:
            result += coding[b]
        except KeyError:
            raise SymbolNotEncodedError(f'symbol {b} has no code in this table') from None
    return result


def to_bitarray(bits: bitarray | str) -> bitarray:
    if isinstance(bits, bitarray):
        return bits
    invalid = set(bits) - {'0', '1'}
    if invalid:
        raise InvalidBitStringError(f'invalid characters in bit string: {"".join(sorted(invalid))!r}')
    return bitarray(bits, endian='big')


def pack_bits(bits: bitarray | str) -> bytes:
    """
    Pack a bit sequence into bytes, most significant bit first.

    The data is preceded by `padding - 1` zero bits and a one bit, so the
    total length is a multiple of 8 and the reader can find where the data
    starts. A bit sequence that is already byte aligned still gets a whole
    padding byte.
    """
    bits = to_bitarray(bits)
    padding = 8 - len(bits) % 8
    result = bitarray('0' * (padding - 1) + '1', endian='big')
    result += bits
    return result.tobytes()


def unpack_bits(packed: bytes) -> bitarray:
    source_bits = bitarray(endian='big')
    source_bits.frombytes(packed)
    # The first one bit within the first byte ends the padding
    for i in range(min(8, len(source_bits))):
        if source_bits[i]:
            return source_bits[i + 1:]
    return source_bits[8:]

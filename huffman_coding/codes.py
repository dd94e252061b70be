from bitarray import bitarray, frozenbitarray

from .bitstring import to_bitarray
from .errors import TruncatedStreamError
from .tree import Fork, HuffmanTree, Leaf


def make_encodings(tree: HuffmanTree) -> dict[int, frozenbitarray]:
    coding = {}
    path = bitarray(endian='big')

    def traverse(tree: HuffmanTree):
        match tree:
            case Fork(l, r, _):
                path.append(0)
                traverse(l)
                path[-1] = 1
                traverse(r)
                path.pop()
            case Leaf(symbol, _):
                coding[symbol] = frozenbitarray(path)

    traverse(tree)
    return coding


def decode_bits(bits: bitarray | str, codetree: HuffmanTree, strict: bool = False) -> bytes:
    """
    Walk `codetree` bit by bit, emitting a symbol at every leaf.
    `bits` may also be a string of '0' and '1' characters.

    A code left unfinished at the end of `bits` is dropped without notice,
    unless `strict` is set, in which case TruncatedStreamError is raised.
    """
    bits = to_bitarray(bits)
    result = bytearray()
    node = codetree
    for bit in bits:
        match node:
            case Fork(l, r, _):
                node = r if bit else l
        match node:
            case Leaf(symbol, _):
                result.append(symbol)
                node = codetree
    if strict and node is not codetree:
        raise TruncatedStreamError(f'bit stream ends inside a code ({len(bits)} bits decoded)')
    return bytes(result)

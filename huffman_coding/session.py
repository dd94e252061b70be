from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from bitarray import frozenbitarray

from .bitstring import encode_bits, pack_bits, unpack_bits
from .codes import decode_bits, make_encodings
from .frequency import ALPHABET_SIZE, CharFreq, make_sorted_list
from .tree import HuffmanTree, build_tree


@dataclass(frozen=True)
class HuffmanSession:
    """
    Everything one encode/decode round needs: the frequency list, the tree
    built from it and the code table derived from the tree.

    The packed output does not carry the code table, so bytes produced by
    `encode` can only be decoded by the session that produced them (or one
    built from identical source data).

    `alphabet_size` records the alphabet the frequency list was built over.
    """
    sorted_list: tuple[CharFreq, ...]
    tree: HuffmanTree
    encodings: MappingProxyType[int, frozenbitarray]
    alphabet_size: int = ALPHABET_SIZE

    @classmethod
    def from_source(cls, source: bytes, alphabet_size: int = ALPHABET_SIZE) -> 'HuffmanSession':
        sorted_list = make_sorted_list(source, alphabet_size)
        tree = build_tree(sorted_list)
        return cls(tuple(sorted_list), tree, MappingProxyType(make_encodings(tree)), alphabet_size)

    def encode(self, source: Iterable[int]) -> bytes:
        return pack_bits(encode_bits(source, self.encodings))

    def decode(self, packed: bytes, strict: bool = False) -> bytes:
        return decode_bits(unpack_bits(packed), self.tree, strict)

    def code_table(self) -> dict[str, str]:
        return {repr(chr(symbol)): code.to01() for symbol, code in sorted(self.encodings.items())}


def compress(source: bytes, alphabet_size: int = ALPHABET_SIZE) -> tuple[bytes, HuffmanSession]:
    session = HuffmanSession.from_source(source, alphabet_size)
    return session.encode(source), session


def decompress(packed: bytes, session: HuffmanSession, strict: bool = False) -> bytes:
    return session.decode(packed, strict)

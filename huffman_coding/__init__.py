from .bitstring import encode_bits, pack_bits, to_bitarray, unpack_bits
from .codes import decode_bits, make_encodings
from .errors import (
    EmptyInputError,
    HuffmanError,
    InvalidBitStringError,
    SymbolNotEncodedError,
    SymbolRangeError,
    TreeBuildError,
    TruncatedStreamError,
)
from .frequency import ALPHABET_SIZE, MAX_ALPHABET_SIZE, CharFreq, make_sorted_list
from .session import HuffmanSession, compress, decompress
from .tree import Fork, HuffmanTree, Leaf, build_tree, leaves, probability

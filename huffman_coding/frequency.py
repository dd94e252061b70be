from collections.abc import Iterable
from dataclasses import dataclass

from .errors import SymbolRangeError

ALPHABET_SIZE = 128
MAX_ALPHABET_SIZE = 256


@dataclass(frozen=True)
class CharFreq:
    symbol: int | None
    probability: float

    def sort_key(self) -> tuple[float, bool, int]:
        # Merged pairs (no symbol) go after leaves of equal probability
        return (self.probability, self.symbol is None, self.symbol or 0)


def count_symbols(source: Iterable[int], alphabet_size: int = ALPHABET_SIZE) -> tuple[list[int], int]:
    counts = [0] * alphabet_size
    total = 0
    for symbol in source:
        if not 0 <= symbol < alphabet_size:
            raise SymbolRangeError(f'symbol {symbol} is outside the alphabet 0..{alphabet_size - 1}')
        counts[symbol] += 1
        total += 1
    return counts, total


def make_sorted_list(source: Iterable[int], alphabet_size: int = ALPHABET_SIZE) -> list[CharFreq]:
    """
    Tally every symbol of `source` and return one pair per distinct symbol,
    sorted by probability, then by symbol value.

    When only one distinct symbol occurs a zero-probability pair for the next
    symbol value (wrapping at the end of the alphabet) is added, so that the
    tree always has two leaves.
    """
    if not 2 <= alphabet_size <= MAX_ALPHABET_SIZE:
        raise ValueError(f'alphabet size must be between 2 and {MAX_ALPHABET_SIZE}, got {alphabet_size}')
    counts, total = count_symbols(source, alphabet_size)
    result = [CharFreq(symbol, count / total) for symbol, count in enumerate(counts) if count]
    if len(result) == 1:
        only = result[0].symbol
        result.append(CharFreq((only + 1) % alphabet_size, 0.0))
    return sorted(result, key=CharFreq.sort_key)

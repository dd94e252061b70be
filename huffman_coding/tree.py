from abc import ABC
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import EmptyInputError, TreeBuildError
from .frequency import CharFreq


class HuffmanTree(ABC):
    pass


@dataclass
class Fork(HuffmanTree):
    left: HuffmanTree
    right: HuffmanTree
    probability: float = 0.0


@dataclass
class Leaf(HuffmanTree):
    symbol: int
    probability: float = 0.0


def probability(tree: HuffmanTree) -> float:
    match tree:
        case Fork(_, _, p):
            return p
        case Leaf(_, p):
            return p
    raise TypeError(f'not a tree node: {tree!r}')


def concat_trees(left: HuffmanTree, right: HuffmanTree) -> Fork:
    return Fork(left, right, probability(left) + probability(right))


def pop_smallest(source: deque[HuffmanTree], target: deque[HuffmanTree]) -> HuffmanTree:
    if not source:
        return target.popleft()
    if not target:
        return source.popleft()
    # Source wins ties, which keeps tree shapes reproducible
    if probability(source[0]) <= probability(target[0]):
        return source.popleft()
    return target.popleft()


def build_tree(sorted_list: list[CharFreq]) -> HuffmanTree:
    """
    Build the Huffman tree for an already sorted frequency list.

    Instead of a priority queue two FIFO queues are used: `source` holds the
    leaves in sorted order and `target` the merged nodes, whose probabilities
    never decrease, so the two smallest nodes are always at the queue fronts.
    """
    if not sorted_list:
        raise EmptyInputError('cannot build a tree from an empty frequency list')
    if len(sorted_list) < 2:
        raise TreeBuildError('at least two symbols are needed to build a tree')
    source: deque[HuffmanTree] = deque(Leaf(pair.symbol, pair.probability) for pair in sorted_list)
    target: deque[HuffmanTree] = deque()
    while source or len(target) != 1:
        if not target:
            left = source.popleft()
            right = source.popleft()
        else:
            left = pop_smallest(source, target)
            right = pop_smallest(source, target)
        target.append(concat_trees(left, right))
    return target[0]


def leaves(tree: HuffmanTree) -> Iterator[Leaf]:
    match tree:
        case Fork(l, r, _):
            yield from leaves(l)
            yield from leaves(r)
        case Leaf():
            yield tree

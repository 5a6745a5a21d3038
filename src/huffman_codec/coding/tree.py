"""
Greedy Huffman tree construction.

The tree is stored as an arena: a tuple of immutable nodes addressed by integer
handles. Internal nodes refer to their children by handle, so a finished tree
can be handed to any number of readers without copying.
"""

import heapq
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from huffman_codec.coding.frequency import count_symbols
from huffman_codec.errors import EmptyInputError, SingleSymbolInputError
from huffman_codec.utils.debug import dbg

SINGLE_SYMBOL_POLICIES = ("one_bit", "error")

NO_CHILD = -1


@dataclass(frozen=True)
class HuffmanNode:
    """
    One arena slot.

    Leaves carry a symbol and have no children; internal nodes carry the handles
    of exactly two children and no symbol.
    """
    weight: int
    symbol: Optional[str] = None
    left: int = NO_CHILD
    right: int = NO_CHILD

    @property
    def is_leaf(self) -> bool:
        return self.left == NO_CHILD


@dataclass(frozen=True)
class HuffmanTree:
    nodes: Tuple[HuffmanNode, ...]
    root: int

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, handle: int) -> HuffmanNode:
        return self.nodes[handle]

    @property
    def root_node(self) -> HuffmanNode:
        return self.nodes[self.root]

    @property
    def weight(self) -> int:
        return self.root_node.weight

    def leaves(self) -> Iterator[HuffmanNode]:
        return (n for n in self.nodes if n.is_leaf)

    def symbols(self) -> List[str]:
        return sorted(n.symbol for n in self.leaves())

    def depth(self) -> int:
        """Length of the longest root-to-leaf path (0 for a lone leaf)."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            handle, level = stack.pop()
            node = self.nodes[handle]
            if node.is_leaf:
                deepest = max(deepest, level)
            else:
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return deepest


def _check_policy(single_symbol: str) -> None:
    if single_symbol not in SINGLE_SYMBOL_POLICIES:
        raise ValueError(
            f"Unsupported single-symbol policy: {single_symbol} "
            f"(expected one of {', '.join(SINGLE_SYMBOL_POLICIES)})"
        )


def build_tree_from_frequencies(
    frequencies: Dict[str, int],
    single_symbol: str = "one_bit",
) -> HuffmanTree:
    """
    Build a Huffman tree by repeatedly merging the two lightest nodes.

    Ties are broken by a sequence number: leaves are numbered in ascending
    symbol order, merged nodes are numbered as they are created. Of each merged
    pair the node popped first becomes the left child.
    """
    _check_policy(single_symbol)
    if not frequencies:
        raise EmptyInputError()
    for symbol, count in frequencies.items():
        if not isinstance(count, int) or isinstance(count, bool) or count <= 0:
            raise ValueError(f"Frequency for {symbol!r} must be a positive integer, got {count!r}")

    nodes: List[HuffmanNode] = [
        HuffmanNode(weight=frequencies[symbol], symbol=symbol)
        for symbol in sorted(frequencies)
    ]

    if len(nodes) == 1:
        if single_symbol == "error":
            raise SingleSymbolInputError(nodes[0].symbol)
        dbg(f"single symbol {nodes[0].symbol!r}, tree is a lone leaf")
        return HuffmanTree(nodes=tuple(nodes), root=0)

    # Handles follow creation order, so they double as the tie-break sequence.
    heap: List[Tuple[int, int]] = [(n.weight, i) for i, n in enumerate(nodes)]
    heapq.heapify(heap)

    while len(heap) > 1:
        left_weight, left = heapq.heappop(heap)
        right_weight, right = heapq.heappop(heap)
        merged = HuffmanNode(weight=left_weight + right_weight, left=left, right=right)
        handle = len(nodes)
        nodes.append(merged)
        heapq.heappush(heap, (merged.weight, handle))

    tree = HuffmanTree(nodes=tuple(nodes), root=heap[0][1])
    dbg(f"built tree: {len(frequencies)} symbols, {len(tree)} nodes, depth {tree.depth()}")
    return tree


def build_tree(text: Iterable[str], single_symbol: str = "one_bit") -> HuffmanTree:
    """Count the symbols of `text` and build its Huffman tree."""
    return build_tree_from_frequencies(count_symbols(text), single_symbol=single_symbol)

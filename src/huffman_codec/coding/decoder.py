from typing import List

from huffman_codec.coding.code_table import LEFT_BIT, RIGHT_BIT
from huffman_codec.coding.tree import HuffmanTree
from huffman_codec.errors import MalformedStreamError
from huffman_codec.utils.debug import dbg


def _decode_lone_leaf(bits: str, tree: HuffmanTree) -> str:
    symbol = tree.root_node.symbol
    for position, bit in enumerate(bits):
        if bit != LEFT_BIT:
            if bit == RIGHT_BIT:
                raise MalformedStreamError("no right branch in a single-symbol tree", position)
            raise MalformedStreamError(f"unexpected character {bit!r}", position)
    return symbol * len(bits)


def decode(bits: str, tree: HuffmanTree) -> str:
    """
    Walk the tree bit by bit and emit a symbol at every leaf.

    '0' follows the left child, '1' the right one; after each leaf the walk
    restarts at the root. Raises MalformedStreamError for stray characters and
    for a stream that ends in the middle of a code.
    """
    if tree.root_node.is_leaf:
        return _decode_lone_leaf(bits, tree)

    nodes = tree.nodes
    root = tree.root
    out: List[str] = []
    current = root
    code_start = 0

    for position, bit in enumerate(bits):
        node = nodes[current]
        if bit == LEFT_BIT:
            current = node.left
        elif bit == RIGHT_BIT:
            current = node.right
        else:
            raise MalformedStreamError(f"unexpected character {bit!r}", position)

        if nodes[current].is_leaf:
            out.append(nodes[current].symbol)
            current = root
            code_start = position + 1

    if current != root:
        raise MalformedStreamError("stream ends inside a code (truncated)", code_start)

    dbg(f"decoded {len(out)} symbols from {len(bits)} bits")
    return "".join(out)

from huffman_codec.coding.code_table import CodeTable, build_code_table
from huffman_codec.coding.decoder import decode
from huffman_codec.coding.encoder import encode
from huffman_codec.coding.frequency import count_symbols
from huffman_codec.coding.tree import (
    HuffmanNode,
    HuffmanTree,
    build_tree,
    build_tree_from_frequencies,
)

__all__ = [
    "CodeTable",
    "HuffmanNode",
    "HuffmanTree",
    "build_code_table",
    "build_tree",
    "build_tree_from_frequencies",
    "count_symbols",
    "decode",
    "encode",
]

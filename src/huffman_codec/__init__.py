"""Character-level Huffman coding: tree construction, code tables, encode/decode."""

from huffman_codec.coding import (
    CodeTable,
    HuffmanNode,
    HuffmanTree,
    build_code_table,
    build_tree,
    build_tree_from_frequencies,
    count_symbols,
    decode,
    encode,
)
from huffman_codec.coding.huffman import HuffmanEncoded, huffman_decode, huffman_encode
from huffman_codec.errors import (
    EmptyInputError,
    HuffmanError,
    MalformedStreamError,
    SingleSymbolInputError,
    SymbolNotFoundError,
)
from huffman_codec.pipeline.config import CodecConfig

__all__ = [
    "CodeTable",
    "CodecConfig",
    "EmptyInputError",
    "HuffmanEncoded",
    "HuffmanError",
    "HuffmanNode",
    "HuffmanTree",
    "MalformedStreamError",
    "SingleSymbolInputError",
    "SymbolNotFoundError",
    "build_code_table",
    "build_tree",
    "build_tree_from_frequencies",
    "count_symbols",
    "decode",
    "encode",
    "huffman_decode",
    "huffman_encode",
]

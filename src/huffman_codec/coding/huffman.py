from dataclasses import dataclass
from typing import Optional

from huffman_codec.coding.code_table import CodeTable, build_code_table
from huffman_codec.coding.decoder import decode
from huffman_codec.coding.encoder import encode
from huffman_codec.coding.frequency import count_symbols
from huffman_codec.coding.tree import HuffmanTree, build_tree_from_frequencies
from huffman_codec.errors import MalformedStreamError
from huffman_codec.pipeline.config import CodecConfig


@dataclass
class HuffmanEncoded:
    """
    Container for one encode/decode session.

    - bits: encoded bit string (e.g. '010101...')
    - tree: the tree the bits were produced from; decoding needs it
    - table: code table derived from `tree`
    - symbol_count: number of symbols in the original text
    """
    bits: str
    tree: HuffmanTree
    table: CodeTable
    symbol_count: int


def huffman_encode(text: str, cfg: Optional[CodecConfig] = None) -> HuffmanEncoded:
    """
    Encode text with a Huffman code built from its own symbol frequencies.

    """
    if cfg is None:
        cfg = CodecConfig()
    frequencies = count_symbols(text)
    tree = build_tree_from_frequencies(frequencies, single_symbol=cfg.single_symbol_policy)
    table = build_code_table(tree)
    bits = encode(text, table)
    return HuffmanEncoded(bits=bits, tree=tree, table=table, symbol_count=len(text))


def huffman_decode(encoded: HuffmanEncoded) -> str:
    """
    Decode HuffmanEncoded back to the original text.

    """
    text = decode(encoded.bits, encoded.tree)
    if len(text) != encoded.symbol_count:
        raise MalformedStreamError(
            f"decoded {len(text)} symbols, expected {encoded.symbol_count}"
        )
    return text

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from huffman_codec.coding.code_table import CodeTable
from huffman_codec.coding.frequency import count_symbols, total_symbols
from huffman_codec.coding.huffman import HuffmanEncoded
from huffman_codec.pipeline.config import CodecConfig


@dataclass
class CompressionStats:
    """
    Size comparison between the fixed-width text and its Huffman encoding.

    Attributes:
        original_symbols: Number of symbols in the input.
        fixed_bits_per_symbol: Width assumed for the uncompressed baseline.
        original_bits: original_symbols * fixed_bits_per_symbol.
        compressed_bits: Length of the encoded bitstring.
        table_bits: Cost of shipping the table, one fixed-width symbol plus its
            code per entry (assumes the table is packed without framing).
        ratio: compressed_bits / original_bits.
        ratio_with_table: (compressed_bits + table_bits) / original_bits.
        packed_bytes: Bytes needed for the bitstring once byte-packed.
        average_code_length: Encoded bits per input symbol.
        entropy_bits: Shannon entropy of the symbol distribution, bits per symbol.
    """
    original_symbols: int
    fixed_bits_per_symbol: int
    original_bits: int
    compressed_bits: int
    table_bits: int
    ratio: float
    ratio_with_table: float
    packed_bytes: int
    average_code_length: float
    entropy_bits: float

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def shannon_entropy(frequencies: Dict[str, int]) -> float:
    total = total_symbols(frequencies)
    if not total:
        return 0.0
    entropy = 0.0
    for count in frequencies.values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def table_cost_bits(table: CodeTable, fixed_bits_per_symbol: int) -> int:
    return sum(fixed_bits_per_symbol + len(table.code_for(symbol)) for symbol in table)


def compression_stats(
    text: str,
    encoded: Optional[HuffmanEncoded],
    cfg: Optional[CodecConfig] = None,
) -> CompressionStats:
    """
    Compute size figures for `text` and its encoding.

    `encoded` may be None for empty text, which has no tree.
    """
    if cfg is None:
        cfg = CodecConfig()
    if cfg.fixed_bits_per_symbol <= 0:
        raise ValueError("fixed_bits_per_symbol must be positive")

    frequencies = count_symbols(text)
    original_symbols = total_symbols(frequencies)
    original_bits = original_symbols * cfg.fixed_bits_per_symbol
    compressed_bits = len(encoded.bits) if encoded is not None else 0
    table_bits = table_cost_bits(encoded.table, cfg.fixed_bits_per_symbol) if encoded is not None else 0

    if original_bits:
        ratio = compressed_bits / original_bits
        ratio_with_table = (compressed_bits + table_bits) / original_bits
        average_code_length = compressed_bits / original_symbols
    else:
        ratio = ratio_with_table = average_code_length = 0.0

    return CompressionStats(
        original_symbols=original_symbols,
        fixed_bits_per_symbol=cfg.fixed_bits_per_symbol,
        original_bits=original_bits,
        compressed_bits=compressed_bits,
        table_bits=table_bits,
        ratio=ratio,
        ratio_with_table=ratio_with_table,
        packed_bytes=math.ceil(compressed_bits / 8),
        average_code_length=average_code_length,
        entropy_bits=shannon_entropy(frequencies),
    )

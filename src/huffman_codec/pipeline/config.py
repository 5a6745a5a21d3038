from dataclasses import dataclass
from typing import Tuple


@dataclass
class CodecConfig:
    """
    Configuration for the Huffman coding pipeline.
    """
    # "one_bit" gives a lone symbol the code "0"; "error" rejects such input.
    single_symbol_policy: str = "one_bit"
    # Width of the uncompressed baseline: one UTF-32 code unit per character.
    fixed_bits_per_symbol: int = 32
    include_table_overhead: bool = False
    encoding: str = "utf-8"
    report_formats: Tuple[str, ...] = ("csv", "json")

from huffman_codec.reporting.report import format_code_table, generate_report
from huffman_codec.reporting.stats import CompressionStats, compression_stats

__all__ = [
    "CompressionStats",
    "compression_stats",
    "format_code_table",
    "generate_report",
]

"""
Command-line demo: encode a text, show its code table and size figures.

    python -m huffman_codec --text "abracadabra" --show-table --show-bits
    python -m huffman_codec --file notes.txt --with-table --plot reports/lengths.png
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from huffman_codec.coding.frequency import count_symbols
from huffman_codec.errors import EmptyInputError, HuffmanError
from huffman_codec.pipeline.config import CodecConfig
from huffman_codec.pipeline.runner import encode_decode_text
from huffman_codec.reporting.report import format_code_table
from huffman_codec.reporting.stats import compression_stats
from huffman_codec.samples import SAMPLE_TEXT


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Huffman-encode a text and report its code table and compression ratio.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="Text to encode (default: built-in sample paragraph).")
    source.add_argument("--file", help="UTF-8 text file to encode.")
    parser.add_argument("--show-table", action="store_true", help="Print the code table.")
    parser.add_argument("--show-bits", action="store_true", help="Print the encoded bitstring.")
    parser.add_argument(
        "--with-table",
        action="store_true",
        help="Count the code table in the compressed size.",
    )
    parser.add_argument(
        "--single-symbol",
        choices=["one_bit", "error"],
        default="one_bit",
        help="How to handle input with one distinct symbol (default: one_bit).",
    )
    parser.add_argument(
        "--bits-per-symbol",
        type=int,
        default=CodecConfig.fixed_bits_per_symbol,
        help="Width of the uncompressed baseline per character (default: 32).",
    )
    parser.add_argument("--plot", default="", help="Save a code-length chart to this PNG path.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    cfg = CodecConfig(
        single_symbol_policy=args.single_symbol,
        fixed_bits_per_symbol=args.bits_per_symbol,
        include_table_overhead=args.with_table,
    )

    if cfg.fixed_bits_per_symbol <= 0:
        print("Error: --bits-per-symbol must be a positive integer.", file=sys.stderr)
        return 1

    if args.file:
        try:
            text = Path(args.file).read_text(encoding=cfg.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read {args.file} as {cfg.encoding} text: {exc}", file=sys.stderr)
            return 1
    elif args.text is not None:
        text = args.text
    else:
        text = SAMPLE_TEXT

    print(text)
    try:
        if not text:
            raise EmptyInputError()
        result = encode_decode_text(text, cfg)
    except HuffmanError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result.decoded != text:
        print("Error: decoded text differs from the input.", file=sys.stderr)
        return 1

    if args.show_table:
        print(format_code_table(result.encoded.table))
    if args.show_bits:
        print(result.bits)

    stats = compression_stats(text, result.encoded, cfg)
    if cfg.include_table_overhead:
        after, ratio = stats.compressed_bits + stats.table_bits, stats.ratio_with_table
    else:
        after, ratio = stats.compressed_bits, stats.ratio
    print(f"before: {stats.original_bits}, after: {after}, ratio: {ratio:.2f}x original size")
    print(
        f"average code length: {stats.average_code_length:.3f} bits/symbol "
        f"(entropy {stats.entropy_bits:.3f})"
    )

    if args.plot:
        from huffman_codec.reporting.plot import plot_code_lengths

        out_path = plot_code_lengths(result.encoded.table, count_symbols(text), Path(args.plot))
        print(f"Plot written to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

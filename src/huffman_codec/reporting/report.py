from __future__ import annotations

import argparse
import csv
import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from huffman_codec.coding.code_table import CodeTable
from huffman_codec.pipeline.config import CodecConfig
from huffman_codec.utils.file_utils import iter_files, mirrored_output_path

REPORT_COLUMNS = [
    "input_path",
    "status",
    "original_symbols",
    "decoded_symbols",
    "symbol_delta",
    "success",
    "symbol_errors",
    "original_bits",
    "compressed_bits",
    "ratio",
]


def _display_symbol(symbol: str) -> str:
    if symbol.isprintable():
        return symbol
    return repr(symbol)[1:-1]


def format_code_table(table: CodeTable) -> str:
    """
    Render a code table one entry per line, shortest codes first:

        {
        'a' > 0
        'b' > 10
        }
    """
    lines = ["{"]
    for symbol, code in table.items():
        lines.append(f"'{_display_symbol(symbol)}' > {code}")
    lines.append("}")
    return "\n".join(lines)


def _symbol_error_count(a: str, b: str) -> int:
    min_len = min(len(a), len(b))
    errors = sum(1 for i in range(min_len) if a[i] != b[i])
    errors += abs(len(a) - len(b))
    return errors


def _read_text(path: Path, encoding: str) -> Optional[str]:
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError:
        return None


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def generate_report(
    input_root: Path,
    output_root: Path,
    report_dir: Path,
    formats: Optional[Sequence[str]] = None,
    cfg: Optional[CodecConfig] = None,
) -> Dict[str, object]:
    """
    Compare every input file with its decoded copy and encoded bitstring under
    `output_root` (as laid out by `run_batch_on_folder`).

    `formats` defaults to `cfg.report_formats`.
    """
    if cfg is None:
        cfg = CodecConfig()
    if formats is None:
        formats = cfg.report_formats
    input_root = input_root.resolve()
    output_root = output_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = []
    decoded_present = 0
    success_count = 0
    total_original_bits = 0
    total_compressed_bits = 0
    ratios: List[float] = []

    for input_file in iter_files(input_root):
        rel_path = input_file.relative_to(input_root)
        row: Dict[str, object] = {column: None for column in REPORT_COLUMNS}
        row["input_path"] = str(rel_path)
        row["status"] = "ok"
        row["success"] = False

        original = _read_text(input_file, cfg.encoding)
        if original is None:
            row["status"] = "not_text"
            rows.append(row)
            continue

        original_bits = len(original) * cfg.fixed_bits_per_symbol
        row["original_symbols"] = len(original)
        row["original_bits"] = original_bits

        decoded_path = mirrored_output_path(output_root / "out_decoded", rel_path, "_decoded")
        encoded_path = mirrored_output_path(output_root / "out_encoded", rel_path, "_encoded")
        if not decoded_path.exists() or not encoded_path.exists():
            row["status"] = "missing_decoded"
            rows.append(row)
            continue

        decoded = decoded_path.read_text(encoding=cfg.encoding)
        compressed_bits = len(encoded_path.read_text(encoding="ascii").strip())
        decoded_present += 1

        row["decoded_symbols"] = len(decoded)
        row["symbol_delta"] = len(decoded) - len(original)
        row["success"] = decoded == original
        row["symbol_errors"] = _symbol_error_count(original, decoded)
        row["compressed_bits"] = compressed_bits
        if row["success"]:
            success_count += 1

        total_original_bits += original_bits
        total_compressed_bits += compressed_bits
        if original_bits:
            ratio = compressed_bits / original_bits
            row["ratio"] = ratio
            ratios.append(ratio)
        else:
            row["ratio"] = 0.0

        rows.append(row)

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    summary = {
        "total_files": len(rows),
        "decoded_present": decoded_present,
        "success_count": success_count,
        "success_rate": (success_count / len(rows)) if rows else 0.0,
        "total_original_bits": total_original_bits,
        "total_compressed_bits": total_compressed_bits,
        "overall_ratio": (total_compressed_bits / total_original_bits) if total_original_bits else 0.0,
        "mean_ratio": statistics.mean(ratios) if ratios else 0.0,
        "median_ratio": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "output_root": str(output_root),
        "report_dir": str(report_dir),
        "fixed_bits_per_symbol": cfg.fixed_bits_per_symbol,
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}


def _positive_int(value: str) -> int:
    width = int(value)
    if width <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return width


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Round-trip a folder of text files and report compression results.",
    )
    parser.add_argument("--input-root", required=True, help="Path to original text files.")
    parser.add_argument("--output-root", required=True, help="Path to pipeline output root.")
    parser.add_argument(
        "--report-dir",
        default="",
        help="Output directory for reports (default: <output-root>/report).",
    )
    parser.add_argument(
        "--formats",
        default="csv,json",
        help="Comma-separated list of formats: csv,json (default: csv,json).",
    )
    parser.add_argument(
        "--skip-run",
        action="store_true",
        help="Only compare existing outputs; don't run the batch first.",
    )
    parser.add_argument(
        "--bits-per-symbol",
        type=_positive_int,
        default=CodecConfig.fixed_bits_per_symbol,
        help="Width of the uncompressed baseline per character (default: 32).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    input_root = Path(args.input_root)
    output_root = Path(args.output_root)
    report_dir = Path(args.report_dir) if args.report_dir else output_root / "report"
    formats = [fmt.strip() for fmt in args.formats.split(",") if fmt.strip()]
    cfg = CodecConfig(fixed_bits_per_symbol=args.bits_per_symbol, report_formats=tuple(formats))

    if not args.skip_run:
        from huffman_codec.utils.batch import run_batch_on_folder

        run_batch_on_folder(input_root=input_root, output_root=output_root, cfg=cfg)

    generate_report(
        input_root=input_root,
        output_root=output_root,
        report_dir=report_dir,
        cfg=cfg,
    )
    print(f"Report written to {report_dir}")


if __name__ == "__main__":
    main()

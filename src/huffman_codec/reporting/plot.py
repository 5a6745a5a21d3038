from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt

from huffman_codec.coding.code_table import CodeTable


def _label(symbol: str) -> str:
    if symbol == " ":
        return "space"
    if not symbol.isprintable():
        return repr(symbol)[1:-1]
    return symbol


def plot_code_lengths(table: CodeTable, frequencies: Dict[str, int], out_path: Path) -> Path:
    """
    Bar chart of symbol counts (top) and code lengths (bottom), most frequent
    symbols first. Saved as PNG at `out_path`.
    """
    symbols = sorted(table, key=lambda s: (-frequencies.get(s, 0), s))
    labels = [_label(s) for s in symbols]
    counts = [frequencies.get(s, 0) for s in symbols]
    lengths = [len(table.code_for(s)) for s in symbols]

    fig, (ax_counts, ax_lengths) = plt.subplots(2, 1, figsize=(max(8, len(symbols) * 0.3), 6), sharex=True)
    ax_counts.bar(range(len(symbols)), counts, color="#1b7a5f")
    ax_counts.set_ylabel("Occurrences")
    ax_counts.set_title("Symbol frequency vs Huffman code length")

    ax_lengths.bar(range(len(symbols)), lengths, color="#0f3328")
    ax_lengths.set_ylabel("Code length (bits)")
    ax_lengths.set_xticks(range(len(symbols)))
    ax_lengths.set_xticklabels(labels)

    fig.tight_layout()
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path

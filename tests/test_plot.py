import matplotlib

matplotlib.use("Agg")

from huffman_codec.cli import main  # noqa: E402
from huffman_codec.coding.code_table import build_code_table  # noqa: E402
from huffman_codec.coding.frequency import count_symbols  # noqa: E402
from huffman_codec.coding.tree import build_tree  # noqa: E402
from huffman_codec.reporting.plot import plot_code_lengths  # noqa: E402


def test_plot_code_lengths_writes_png(tmp_path):
    text = "abracadabra\n  "
    table = build_code_table(build_tree(text))
    out_path = plot_code_lengths(table, count_symbols(text), tmp_path / "plots" / "lengths.png")

    assert out_path.exists()
    assert out_path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_cli_plot_flag(tmp_path, capsys):
    out_path = tmp_path / "lengths.png"
    assert main(["--text", "abracadabra", "--plot", str(out_path)]) == 0
    assert out_path.exists()
    assert "Plot written to" in capsys.readouterr().out

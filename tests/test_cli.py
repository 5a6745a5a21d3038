from huffman_codec.cli import main
from huffman_codec.samples import SAMPLE_TEXT


def test_cli_prints_table_bits_and_ratio(capsys):
    assert main(["--text", "abracadabra", "--show-table", "--show-bits"]) == 0
    out = capsys.readouterr().out

    assert "'a' > 0" in out
    assert "'r' > 111" in out
    assert "01101110100010101101110" in out
    assert "before: 352, after: 23, ratio: 0.07x original size" in out


def test_cli_with_table_overhead(capsys):
    assert main(["--text", "abracadabra", "--with-table"]) == 0
    out = capsys.readouterr().out
    # 5 entries * 32 bits + 13 code bits on top of the 23-bit stream.
    assert "before: 352, after: 196, ratio: 0.56x original size" in out


def test_cli_defaults_to_sample_text(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert SAMPLE_TEXT.splitlines()[0] in out
    assert "average code length" in out


def test_cli_reads_file(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("abab", encoding="utf-8")
    assert main(["--file", str(path), "--bits-per-symbol", "8"]) == 0
    assert "before: 32, after: 4," in capsys.readouterr().out


def test_cli_single_symbol_error_policy(capsys):
    assert main(["--text", "aaaa", "--single-symbol", "error"]) == 1
    assert "single distinct symbol" in capsys.readouterr().err


def test_cli_empty_text_fails(capsys):
    assert main(["--text", ""]) == 1
    assert "empty input" in capsys.readouterr().err


def test_cli_rejects_non_positive_width(capsys):
    assert main(["--text", "ab", "--bits-per-symbol", "0"]) == 1
    captured = capsys.readouterr()
    assert "Error: --bits-per-symbol must be a positive integer." in captured.err
    assert "before:" not in captured.out


def test_cli_rejects_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\xff\xfe\x81")
    assert main(["--file", str(path)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: cannot read")
    assert "utf-8" in err


def test_cli_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.txt")]) == 1
    assert "Error: cannot read" in capsys.readouterr().err

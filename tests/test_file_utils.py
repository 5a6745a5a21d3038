from pathlib import Path

from huffman_codec.utils.file_utils import iter_files, mirrored_output_path


def test_iter_files_sorted_and_skips_directories(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "z.txt").write_text("z", encoding="utf-8")
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "empty_dir").mkdir()

    files = iter_files(tmp_path)

    assert [p.relative_to(tmp_path).as_posix() for p in files] == ["a.txt", "b/z.txt"]


def test_iter_files_empty_root(tmp_path):
    assert iter_files(tmp_path) == []


def test_mirrored_output_path_tags_top_dir_and_stem():
    out = mirrored_output_path(Path("out/out_encoded"), Path("books/ch1/intro.txt"), "_encoded")
    assert out == Path("out/out_encoded/books_encoded/ch1/intro_encoded.txt")


def test_mirrored_output_path_top_level_file():
    assert mirrored_output_path(Path("out"), Path("README"), "_decoded") == Path("out/README_decoded")

from pathlib import Path
from typing import List


def iter_files(root: Path) -> List[Path]:
    """All regular files under `root`, in sorted path order."""
    return sorted(p for p in root.rglob("*") if p.is_file())


def mirrored_output_path(out_root: Path, rel_path: Path, tag: str) -> Path:
    """
    Place a file from the input tree under `out_root`, tagging both the
    top-level directory and the file stem.

    Example:
        out_root='out/out_encoded', rel_path='books/ch1/intro.txt', tag='_encoded'
        -> 'out/out_encoded/books_encoded/ch1/intro_encoded.txt'
        rel_path='README' -> 'out/out_encoded/README_encoded'
    """
    parent_parts = list(rel_path.parent.parts)
    if parent_parts:
        parent_parts[0] += tag
    name = Path(rel_path.name)
    tagged_name = name.stem + tag + name.suffix
    return out_root.joinpath(*parent_parts, tagged_name)

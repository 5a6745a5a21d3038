import os
import sys

# Debug logging controlled by environment variable HUFFMAN_DEBUG
_DEBUG = os.environ.get("HUFFMAN_DEBUG", "").lower() in {"1", "true", "yes"}


def dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[HUFFMAN] {msg}", file=sys.stderr)

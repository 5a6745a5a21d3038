from collections import Counter
from typing import Dict, Iterable


def count_symbols(text: Iterable[str]) -> Dict[str, int]:
    """
    Count how often each symbol occurs in `text`.

    Empty input gives an empty map; the tree builder decides what to do with it.
    """
    return dict(Counter(text))


def total_symbols(frequencies: Dict[str, int]) -> int:
    return sum(frequencies.values())

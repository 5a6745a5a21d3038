"""
Error types raised by the Huffman coding stages.

All of them are ValueErrors so callers that already guard pipeline input with
`except ValueError` keep working.
"""

from typing import Optional


class HuffmanError(ValueError):
    """Base class for coding failures."""


class EmptyInputError(HuffmanError):
    def __init__(self) -> None:
        super().__init__("Cannot build a Huffman tree from empty input.")


class SingleSymbolInputError(HuffmanError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(
            f"Input contains a single distinct symbol {symbol!r}; "
            "use single_symbol='one_bit' to encode it with a one-bit code."
        )


class SymbolNotFoundError(HuffmanError):
    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"Symbol {symbol!r} at position {position} has no code in the table.")


class MalformedStreamError(HuffmanError):
    def __init__(self, reason: str, position: Optional[int] = None) -> None:
        self.reason = reason
        self.position = position
        if position is None:
            super().__init__(f"Malformed bit stream: {reason}")
        else:
            super().__init__(f"Malformed bit stream at bit {position}: {reason}")

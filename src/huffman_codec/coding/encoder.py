from typing import Iterable

from huffman_codec.coding.code_table import CodeTable
from huffman_codec.errors import SymbolNotFoundError


def encode(text: Iterable[str], table: CodeTable) -> str:
    """
    Concatenate the code of every symbol of `text`, in input order.

    Raises SymbolNotFoundError when a symbol has no entry in `table`.
    """
    chunks = []
    for position, symbol in enumerate(text):
        code = table.get(symbol)
        if code is None:
            raise SymbolNotFoundError(symbol, position)
        chunks.append(code)
    return "".join(chunks)

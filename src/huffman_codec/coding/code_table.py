from typing import Dict, Iterator, List, Mapping, Tuple

from huffman_codec.coding.tree import HuffmanTree

LEFT_BIT = "0"
RIGHT_BIT = "1"


class CodeTable:
    """
    Bijection between symbols and their bit-string codes (root first).

    Lookups work in both directions: `code_for(symbol)` for encoding and
    `symbol_for(code)` for table-driven checks.
    """

    def __init__(self, codes: Mapping[str, str]) -> None:
        self._codes: Dict[str, str] = dict(codes)
        self._symbols: Dict[str, str] = {code: symbol for symbol, code in self._codes.items()}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "CodeTable":
        """
        Build a table from an externally supplied mapping, validating that it is
        a usable prefix code.
        """
        for symbol, code in mapping.items():
            if not code:
                raise ValueError(f"Code for {symbol!r} is empty.")
            if not set(code).issubset({LEFT_BIT, RIGHT_BIT}):
                raise ValueError(f"Code for {symbol!r} must contain only '0' and '1', got {code!r}.")
        table = cls(mapping)
        if len(table._symbols) != len(table._codes):
            raise ValueError("Code table is not bijective: two symbols share a code.")
        clash = table.prefix_clash()
        if clash is not None:
            raise ValueError(f"Code {clash[0]!r} is a prefix of {clash[1]!r}.")
        return table

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return NotImplemented
        return self._codes == other._codes

    def __repr__(self) -> str:
        return f"CodeTable({self._codes!r})"

    def code_for(self, symbol: str) -> str:
        return self._codes[symbol]

    def symbol_for(self, code: str) -> str:
        return self._symbols[code]

    def get(self, symbol: str, default=None):
        return self._codes.get(symbol, default)

    def items(self) -> List[Tuple[str, str]]:
        """Entries ordered by code length, then by symbol."""
        return sorted(self._codes.items(), key=lambda item: (len(item[1]), item[0]))

    def as_dict(self) -> Dict[str, str]:
        return dict(self._codes)

    def code_lengths(self) -> Dict[str, int]:
        return {symbol: len(code) for symbol, code in self._codes.items()}

    def prefix_clash(self):
        """
        Return the first (prefix, code) pair that breaks the prefix property,
        or None. In sorted order a prefix always sorts right before some code
        it prefixes, so checking neighbours is enough.
        """
        ordered = sorted(self._codes.values())
        for shorter, longer in zip(ordered, ordered[1:]):
            if longer.startswith(shorter):
                return shorter, longer
        return None

    def is_prefix_free(self) -> bool:
        return self.prefix_clash() is None


def build_code_table(tree: HuffmanTree) -> CodeTable:
    """
    Derive each symbol's code from its root-to-leaf path.

    A left step appends '0', a right step appends '1'. A tree that is a lone
    leaf gets the one-bit code '0' so repeated symbols stay separable.
    """
    root = tree.root_node
    if root.is_leaf:
        return CodeTable({root.symbol: LEFT_BIT})

    codes: Dict[str, str] = {}
    stack = [(tree.root, "")]
    while stack:
        handle, path = stack.pop()
        node = tree.node(handle)
        if node.is_leaf:
            codes[node.symbol] = path
            continue
        stack.append((node.right, path + RIGHT_BIT))
        stack.append((node.left, path + LEFT_BIT))
    return CodeTable(codes)

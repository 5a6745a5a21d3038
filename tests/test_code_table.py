from itertools import permutations

import pytest

from huffman_codec.coding.code_table import CodeTable, build_code_table
from huffman_codec.coding.tree import build_tree
from huffman_codec.samples import SAMPLE_TEXT

ABRACADABRA_CODES = {"a": "0", "c": "100", "d": "101", "b": "110", "r": "111"}


def test_abracadabra_codes_follow_left_zero_right_one():
    table = build_code_table(build_tree("abracadabra"))
    assert table.as_dict() == ABRACADABRA_CODES
    assert all(len(table.code_for(s)) > 0 for s in table)


def test_two_equal_symbols_get_one_bit_each():
    table = build_code_table(build_tree("abab"))
    assert table.as_dict() == {"a": "0", "b": "1"}


def test_codes_are_prefix_free():
    table = build_code_table(build_tree(SAMPLE_TEXT))
    codes = [table.code_for(s) for s in table]

    assert table.is_prefix_free()
    for a, b in permutations(codes, 2):
        assert not b.startswith(a)


def test_table_is_bijective_over_input_symbols():
    table = build_code_table(build_tree(SAMPLE_TEXT))
    assert sorted(table) == sorted(set(SAMPLE_TEXT))
    for symbol in table:
        assert table.symbol_for(table.code_for(symbol)) == symbol


def test_code_length_matches_leaf_depth():
    tree = build_tree("abracadabra")
    table = build_code_table(tree)
    assert max(table.code_lengths().values()) == tree.depth()


def test_lone_leaf_gets_one_bit_code():
    table = build_code_table(build_tree("aaaa"))
    assert table.as_dict() == {"a": "0"}


def test_items_ordered_by_length_then_symbol():
    table = build_code_table(build_tree("abracadabra"))
    assert [s for s, _ in table.items()] == ["a", "b", "c", "d", "r"]


def test_from_mapping_accepts_valid_prefix_code():
    table = CodeTable.from_mapping({"a": "0", "b": "10", "c": "11"})
    assert len(table) == 3
    assert "b" in table
    assert table.symbol_for("10") == "b"


@pytest.mark.parametrize(
    "mapping",
    [
        {"a": "0", "b": "01"},
        {"a": "1", "b": "1"},
        {"a": "", "b": "1"},
        {"a": "0", "b": "12"},
    ],
)
def test_from_mapping_rejects_invalid_tables(mapping):
    with pytest.raises(ValueError):
        CodeTable.from_mapping(mapping)


def test_prefix_clash_reports_offending_pair():
    table = CodeTable({"a": "10", "b": "0", "c": "101"})
    assert table.prefix_clash() == ("10", "101")
    assert not table.is_prefix_free()

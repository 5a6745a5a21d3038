from huffman_codec.coding.frequency import count_symbols, total_symbols


def test_count_symbols_abracadabra():
    assert count_symbols("abracadabra") == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}


def test_count_symbols_empty_input_gives_empty_map():
    assert count_symbols("") == {}


def test_count_symbols_treats_each_code_point_as_a_symbol():
    freqs = count_symbols("héé 🙂🙂🙂")
    assert freqs == {"h": 1, "é": 2, " ": 1, "🙂": 3}
    assert total_symbols(freqs) == 7


def test_count_symbols_accepts_any_iterable_of_symbols():
    assert count_symbols(iter(["x", "y", "x"])) == {"x": 2, "y": 1}

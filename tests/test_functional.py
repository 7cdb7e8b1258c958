import pytest

from fogl.functional import for_all, for_seq, for_zip, map_for_all, size_product


def _pair(a, b):
    return (a, b)


def test_size_product_of_arrays():
    assert size_product([1, 2, 3], [4, 5]) == 6


def test_size_product_scalars_count_as_one():
    assert size_product(7, "text") == 1
    assert size_product([1, 2], 9) == size_product([1, 2])


def test_map_for_all_first_argument_varies_fastest():
    first, second = ["a", "b"], ["x", "y", "z"]
    result = map_for_all(_pair, first, second)
    assert result[0] == (first[0], second[0])
    assert result[1] == (first[1], second[0])
    assert result[2] == (first[0], second[1])


def test_map_for_all_covers_every_combination_once():
    first, second, third = [1, 2], [3, 4, 5], [6, 7]
    result = map_for_all(lambda a, b, c: (a, b, c), first, second, third)
    assert len(result) == size_product(first, second, third)
    assert len(set(result)) == len(result)
    assert all(a in first and b in second and c in third for a, b, c in result)


def test_for_seq_matches_map_for_all():
    first, second = [10, 20, 30], ["p", "q"]
    mapped = map_for_all(_pair, first, second)
    for seq, expected in enumerate(mapped):
        assert for_seq(seq, _pair, first, second) == expected


def test_for_seq_passes_scalars_through():
    assert for_seq(1, _pair, ["a", "b"], "scalar") == ("b", "scalar")


def test_for_seq_out_of_range():
    with pytest.raises(IndexError):
        for_seq(size_product([1, 2], [3]), _pair, [1, 2], [3])
    with pytest.raises(IndexError):
        for_seq(-1, _pair, [1, 2], [3])


def test_for_all_visits_same_order_as_map():
    first, second = [1, 2, 3], [4, 5]
    calls = []
    for_all(lambda a, b: calls.append((a, b)), first, second)
    assert calls == map_for_all(_pair, first, second)


def test_for_all_with_several_functions_runs_each_in_turn():
    first, second = [1, 2], [3]
    calls = []
    for_all(
        [lambda a, b: calls.append(("one", a, b)), lambda a, b: calls.append(("two", a, b))],
        first,
        second,
    )
    combos = map_for_all(_pair, first, second)
    assert calls == [("one", *c) for c in combos] + [("two", *c) for c in combos]


def test_for_all_with_empty_array_calls_nothing():
    calls = []
    for_all(lambda a, b: calls.append((a, b)), [], [1, 2])
    assert calls == []


def test_for_zip_calls_in_index_order():
    first, second = [1, 2, 3], ["a", "b", "c"]
    calls = []
    for_zip(lambda a, b: calls.append((a, b)), first, second)
    assert calls == list(zip(first, second))


def test_for_zip_length_mismatch():
    with pytest.raises(ValueError):
        for_zip(_pair, [1, 2], [1])
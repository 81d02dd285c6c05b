from advent2024.iterutils import pairs, unique


def test_unique_keeps_first_occurrences_in_order():
    assert list(unique([1, 2, 1, 3, 2, 1])) == [1, 2, 3]


def test_unique_is_lazy():
    gen = unique(iter([5, 5, 6]))
    assert next(gen) == 5
    assert next(gen) == 6


def test_unique_empty():
    assert list(unique([])) == []


def test_pairs_even_length():
    assert list(pairs("abcd")) == [("a", "b"), ("c", "d")]


def test_pairs_odd_length_ends_with_none():
    assert list(pairs([1, 2, 3])) == [(1, 2), (3, None)]


def test_pairs_flatten_round_trip():
    items = list(range(7))
    flat = [x for pair in pairs(items) for x in pair if x is not None]
    assert flat == items
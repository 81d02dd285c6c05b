import pytest

from advent2024.day25 import Schematics

LOCK = "#####\n#####\n.....\n.....\n.....\n.....\n....."
SHORT_KEY = ".....\n.....\n.....\n.....\n#####\n#####\n#####"
FULL_KEY = ".....\n#####\n#####\n#####\n#####\n#####\n#####"
SHAPED_KEY = ".....\n#....\n#.#..\n#.#.#\n#####\n#####\n#####"


def test_parse_keys_and_locks():
    state = Schematics.from_text("\n\n".join([LOCK, SHORT_KEY, FULL_KEY]) + "\n")
    assert state.locks == [(1, 1, 1, 1, 1)]
    assert state.keys == [(2, 2, 2, 2, 2), (5, 5, 5, 5, 5)]


def test_shaped_key_heights():
    state = Schematics.from_text(SHAPED_KEY)
    assert state.keys == [(5, 2, 4, 2, 3)]
    assert state.locks == []


def test_find_matches():
    state = Schematics.from_text("\n\n".join([LOCK, SHORT_KEY, FULL_KEY, SHAPED_KEY]))
    assert state.find_matches() == [((1, 1, 1, 1, 1), (2, 2, 2, 2, 2))]


def test_find_matches_exact_fit():
    empty_lock = "#####\n.....\n.....\n.....\n.....\n.....\n....."
    state = Schematics.from_text("\n\n".join([empty_lock, FULL_KEY]))
    assert state.find_matches() == [((0, 0, 0, 0, 0), (5, 5, 5, 5, 5))]


def test_truncated_block_raises():
    with pytest.raises(IndexError):
        Schematics.from_text("#####\n#####")
from advent2024.day04 import find_matches, find_matches_2, string_to_array

EXAMPLE = (
    "MMMSXXMASM\nMSAMXMSMSA\nAMXSXMAAMM\nMSAMASMSMX\nXMASAMXAMM\n"
    "XXAMMXXAMA\nSMSMSASXSS\nSAXAMASAAA\nMAMMMXMMMM\nMXMXAXMASX\n"
)


def test_two_dimensional_array():
    array = string_to_array("abc\ndef\nghi")
    assert array[1][0] == "d"
    assert array == [["a", "b", "c"], ["d", "e", "f"], ["g", "h", "i"]]


def test_part1():
    assert find_matches(string_to_array(EXAMPLE)) == 18


def test_part2():
    assert find_matches_2(string_to_array(EXAMPLE)) == 9


def test_single_line_both_directions():
    assert find_matches(string_to_array("XMASAMX")) == 2


def test_cross_at_edge_is_not_counted():
    assert find_matches_2(string_to_array("AM\nSS")) == 0


def test_single_cross():
    assert find_matches_2(string_to_array("M.S\n.A.\nM.S")) == 1
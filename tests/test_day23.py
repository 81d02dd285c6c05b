import pytest

from advent2024.day23 import Connections, get_most_connected, parse_input

EXAMPLE = """\
kh-tc
qp-kh
de-cg
ka-co
yn-aq
qp-ub
cg-tb
vc-aq
tb-ka
wh-tc
yn-cg
kh-ub
ta-co
de-co
tc-td
tb-wq
wh-td
ta-ka
td-qp
aq-cg
wq-ub
ub-vc
de-ta
wq-aq
wq-vc
wh-yn
ka-de
kh-ta
co-tc
wh-qp
tb-vc
td-yn
"""


def test_sets():
    c = Connections(parse_input(EXAMPLE))
    sets = c.sets()
    assert len(sets) == 12
    ts = [s for s in sets if any(pc.startswith("t") for pc in s)]
    assert len(ts) == 7


def test_most_connected():
    c = Connections(list(parse_input(EXAMPLE)))
    assert get_most_connected(c) == ["co", "de", "ka", "ta"]


def test_parse_input_orders_pairs():
    assert list(parse_input("b-a\nc-d\nnoise\n")) == [("a", "b"), ("c", "d")]


def test_triangle():
    c = Connections([("a", "b"), ("b", "c"), ("a", "c"), ("c", "d")])
    assert c.sets() == [("a", "b", "c")]
    assert sorted(c.get_connected("a")[0]) == ["a", "b", "c"]
    assert c.get_connected("missing") is None


def test_all_connected():
    c = Connections([("a", "b"), ("b", "c"), ("a", "c"), ("c", "d")])
    assert c.get_all_connected("a") == {"a", "b", "c"}
    assert c.get_all_inter_connected("c") == {"a", "b", "c"}


def test_all_connected_unknown():
    c = Connections([("a", "b")])
    with pytest.raises(KeyError):
        c.get_all_connected("z")


def test_most_connected_empty():
    with pytest.raises(ValueError):
        get_most_connected(Connections([]))
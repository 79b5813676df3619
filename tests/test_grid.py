import pytest

from aocrunner.grid import Grid
from aocrunner.point import Point

TEXT = "abc\ndef\n"


def test_from_str_dimensions_and_indexing():
    g = Grid.from_str(TEXT)
    assert (g.width, g.height) == (3, 2)
    assert g[Point(1, 0)] == "b"
    assert g[(2, 1)] == "f"
    assert list(g) == list("abcdef")


def test_str_round_trip():
    assert str(Grid.from_str(TEXT)) == TEXT


def test_map_from_str_applies_mapper():
    g = Grid.map_from_str("12\n34", int)
    assert g.data == [1, 2, 3, 4]
    assert g[Point(0, 1)] == 3


def test_map_from_str_rejects_empty():
    with pytest.raises(ValueError):
        Grid.from_str("")


def test_from_data_checks_length():
    g = Grid.from_data(2, 2, [1, 2, 3, 4])
    assert g[(1, 1)] == 4
    with pytest.raises(ValueError):
        Grid.from_data(2, 2, [1, 2, 3])


def test_new_fills_with_default():
    g = Grid.new(4, 3, ".")
    assert len(g) == 12
    assert set(g) == {"."}


def test_setitem_changes_one_cell():
    g = Grid.new(3, 3, 0)
    g[Point(2, 1)] = 7
    assert g[(2, 1)] == 7
    assert sum(g) == 7


def test_get_and_get_or():
    g = Grid.from_str(TEXT)
    assert g.get(Point(0, 0)) == "a"
    assert g.get(Point(3, 0)) is None
    assert g.get(Point(0, -1)) is None
    assert g.get_or(Point(-1, 5), "#") == "#"
    assert g.get_or(Point(2, 0), "#") == "c"


def test_is_in_bounds():
    g = Grid.new(2, 3, 0)
    assert g.is_in_bounds(Point(1, 2))
    assert not g.is_in_bounds(Point(2, 0))
    assert not g.is_in_bounds(Point(0, 3))
    assert not g.is_in_bounds(Point(-1, 0))


@pytest.mark.parametrize("key", [(-1, 0), (0, -1), (3, 0), (0, 2), Point(5, 5)])
def test_index_out_of_bounds(key):
    g = Grid.from_str(TEXT)
    pos = key if isinstance(key, Point) else Point.from_tuple(key)
    assert not g.is_in_bounds(pos)
    assert g.get_or(pos, "#") == "#"
    with pytest.raises(IndexError):
        _ = g[key]


def test_enumerate_covers_grid():
    g = Grid.from_str(TEXT)
    pairs = list(g.enumerate())
    assert len(pairs) == g.width * g.height
    assert all(g[pos] == value for pos, value in pairs)
    assert len({pos for pos, _ in pairs}) == len(pairs)


def test_find_and_find_all():
    g = Grid.from_str("aba\nbab\n")
    assert g.find("b") == Point(1, 0)
    assert g.find("z") is None
    found = list(g.find_all("a"))
    assert found == [Point(0, 0), Point(2, 0), Point(1, 1)]
    assert all(g[p] == "a" for p in found)


def test_equality():
    assert Grid.from_str(TEXT) == Grid.from_data(3, 2, list("abcdef"))
    assert Grid.from_str(TEXT) != Grid.from_data(2, 3, list("abcdef"))
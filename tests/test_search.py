import pytest

from katamachine.dsa.search import binary_search, linear_search, two_crystal_balls

HAYSTACK = [1, 3, 4, 69, 71, 81, 90, 99, 420, 1337, 69420]


@pytest.mark.parametrize(
    ("needle", "expected"),
    [
        (69, True),
        (1336, False),
        (69420, True),
        (69421, False),
        (1, True),
        (0, False),
    ],
)
def test_linear_search(needle, expected):
    assert linear_search(HAYSTACK, needle) is expected


@pytest.mark.parametrize(
    ("needle", "expected"),
    [
        (69, True),
        (1336, False),
        (69420, True),
        (69421, False),
        (1, True),
        (0, False),
    ],
)
def test_binary_search(needle, expected):
    assert binary_search(HAYSTACK, needle) is expected


def test_binary_search_finds_every_element():
    assert all(binary_search(HAYSTACK, value) for value in HAYSTACK)


def test_searches_on_empty_input():
    assert linear_search([], 5) is False
    assert binary_search([], 5) is False


@pytest.mark.parametrize("idx", [0, 1, 2, 99, 100, 101, 5000, 9899, 9900, 9999])
def test_two_crystal_balls_finds_first_break(idx):
    data = [False] * idx + [True] * (10000 - idx)
    assert two_crystal_balls(data) == idx


def test_two_crystal_balls_no_break():
    assert two_crystal_balls([False] * 821) == -1


def test_two_crystal_balls_empty():
    assert two_crystal_balls([]) == -1


@pytest.mark.parametrize(
    ("data", "expected"),
    [([True], 0), ([False], -1), ([False, True], 1), ([False, False, True], 2)],
)
def test_two_crystal_balls_small_inputs(data, expected):
    assert two_crystal_balls(data) == expected
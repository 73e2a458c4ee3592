import pytest

from sujet.basics import (
    count_occurrences,
    factorial,
    filter_even,
    is_even,
    max_of_four,
    reverse_string,
    sum_of_three,
)


@pytest.mark.parametrize(
    "a, b, c, want",
    [
        (10, 39, 94, 143),
        (-5, 2, 3, 0),
        (19485928, 39849834, -49288346, 10047416),
    ],
)
def test_sum_of_three(a, b, c, want):
    assert sum_of_three(a, b, c) == want


@pytest.mark.parametrize(
    "s, char, want",
    [
        ("", "a", 0),
        ("hello", "h", 1),
        ("hello", "l", 2),
        ("hello", "x", 0),
        ("a man a plan a canal panama", "a", 10),
        ("abracadabra", "a", 5),
    ],
)
def test_count_occurrences(s, char, want):
    assert count_occurrences(s, char) == want


@pytest.mark.parametrize("n, want", [(0, 1), (1, 1), (10, 3628800)])
def test_factorial(n, want):
    assert factorial(n) == want


def test_factorial_negative():
    assert factorial(-5) == 0


@pytest.mark.parametrize(
    "numbers, want",
    [
        ([], []),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [2, 4, 6, 8, 10]),
        (
            [1, 23, 34, 119, 548, 4, 5, 8, 75, 1, 34, 65, 7, 3],
            [34, 548, 4, 8, 34],
        ),
    ],
)
def test_filter_even(numbers, want):
    assert filter_even(numbers) == want


@pytest.mark.parametrize("n, want", [(1, False), (10, True), (66336, True)])
def test_is_even(n, want):
    assert is_even(n) is want


@pytest.mark.parametrize(
    "a, b, c, d, want",
    [
        (5, -19, 37, 25, 37),
        (30948, 409822, 304, 999999, 999999),
        (-30948, -409822, -304, -999999, -304),
    ],
)
def test_max_of_four(a, b, c, d, want):
    assert max_of_four(a, b, c, d) == want


@pytest.mark.parametrize(
    "s, want",
    [
        ("", ""),
        ("a", "a"),
        ("hello", "olleh"),
        ("Hello 世界", "界世 olleH"),
        ("Happy birthday ! 🎉🥳🎂", "🎂🥳🎉 ! yadhtrib yppaH"),
    ],
)
def test_reverse_string(s, want):
    assert reverse_string(s) == want


def test_reverse_string_twice_is_identity():
    text = "Bonjour à tous"
    assert reverse_string(reverse_string(text)) == text
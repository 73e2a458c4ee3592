"""Small arithmetic and string helpers."""

from __future__ import annotations

from collections.abc import Iterable


def sum_of_three(a: int, b: int, c: int) -> int:
    """Return the sum of three integers."""
    return a + b + c


def is_even(n: int) -> bool:
    """Return True when ``n`` is even."""
    return n % 2 == 0


def max_of_four(a: int, b: int, c: int, d: int) -> int:
    """Return the largest of four integers."""
    return max(a, b, c, d)


def factorial(n: int) -> int:
    """Return ``n!``, or 0 for a negative ``n``."""
    if n < 0:
        return 0
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def count_occurrences(s: str, char: str) -> int:
    """Count how many times the character ``char`` appears in ``s``."""
    return sum(1 for c in s if c == char)


def filter_even(numbers: Iterable[int]) -> list[int]:
    """Return the even numbers of ``numbers``, in their original order."""
    return [n for n in numbers if is_even(n)]


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]
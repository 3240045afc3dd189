"""Dynamic-programming and combinatorial counting problems."""

from __future__ import annotations

from collections.abc import Iterable
from math import comb

MODULUS = 10**9
MAX_DIGIT_USES = 8
BAG_SIZES = (3, 5)


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for j, other in enumerate(second, 1):
            if item == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def sugar_bags(weight: int) -> int | None:
    """Fewest 3 kg and 5 kg bags that make up weight exactly, or None."""
    if weight < 0:
        raise ValueError("weight must not be negative")
    best: list[int | None] = [0] + [None] * weight
    for total in range(1, weight + 1):
        options = [
            best[total - size] + 1
            for size in BAG_SIZES
            if total >= size and best[total - size] is not None
        ]
        best[total] = min(options, default=None)
    return best[weight]


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Best total value of (weight, value) items fitting into capacity, each used once."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("item weight must not be negative")
        best = [
            max(best[room], best[room - weight] + value) if room >= weight else best[room]
            for room in range(capacity + 1)
        ]
    return best[capacity]


def candy_store(n: int, k: int) -> int:
    """Ways to pick k candies from n kinds with repetition, modulo 10**9."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    return sum(comb(n, i) * comb(k - 1, i - 1) for i in range(1, min(n, k) + 1)) % MODULUS


def _truncated_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def expression_count(digit: int, number: int) -> int | None:
    """Fewest uses of digit, with + - * / and concatenation, that yield number.

    Returns None when more than eight uses would be needed.
    """
    reachable: list[set[int]] = []
    repunit = 0
    for uses in range(1, MAX_DIGIT_USES + 1):
        repunit = repunit * 10 + 1
        values = {repunit * digit}
        for left in range(1, uses):
            for a in reachable[left - 1]:
                for b in reachable[uses - left - 1]:
                    values.update((a + b, a - b, a * b))
                    if b:
                        values.add(_truncated_div(a, b))
        if number in values:
            return uses
        reachable.append(values)
    return None
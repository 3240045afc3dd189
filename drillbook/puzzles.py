"""Short counting and array puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _parity_source(arr: Sequence[int], x: int, y: int) -> int:
    """A value with the same parity as the query result for (x, y)."""
    if x > y:
        return 1
    if x == y:
        return arr[x - 1]
    if arr[x] == 0:
        return 1
    return arr[x - 1]


def even_odd_query(
    arr: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[str]:
    """Answer 'Even' or 'Odd' for each 1-indexed (x, y) query over arr."""
    size = len(arr)
    answers = []
    for x, y in queries:
        if not (1 <= x <= size and 1 <= y <= size):
            raise ValueError(f"query {(x, y)} lies outside 1..{size}")
        answers.append("Even" if _parity_source(arr, x, y) % 2 == 0 else "Odd")
    return answers


def chocolate_feast(n: int, c: int, m: int) -> int:
    """Chocolates eaten with n money, price c, and m wrappers per free bar."""
    if c < 1:
        raise ValueError("price must be positive")
    if m < 2:
        raise ValueError("wrapper exchange rate must be at least 2")
    wrappers = n // c
    eaten = wrappers
    while wrappers >= m:
        free, left = divmod(wrappers, m)
        eaten += free
        wrappers = free + left
    return eaten


def halloween_party(k: int) -> int:
    """Most chocolate pieces obtainable with k straight cuts."""
    if k < 0:
        raise ValueError("number of cuts must not be negative")
    vertical = k // 2
    return vertical * (k - vertical)


def average_after_operations(
    n: int, operations: Iterable[tuple[int, int, int]]
) -> int:
    """Floor of the mean candy count in n jars after (a, b, k) additions."""
    if n < 1:
        raise ValueError("there must be at least one jar")
    total = sum((b - a + 1) * k for a, b, k in operations)
    return total // n


def service_lane(width: Sequence[int], cases: Iterable[tuple[int, int]]) -> list[int]:
    """Narrowest width along each inclusive (entry, exit) segment."""
    result = []
    for entry, exit_ in cases:
        if not (0 <= entry <= exit_ < len(width)):
            raise ValueError(f"segment {(entry, exit_)} is out of range")
        result.append(min(width[entry : exit_ + 1]))
    return result


def special_problems(k: int, chapters: Iterable[int]) -> int:
    """Problems whose number equals the page they are printed on.

    Each chapter starts on a new page and a page holds at most k problems.
    """
    if k < 1:
        raise ValueError("a page must hold at least one problem")
    page = 1
    special = 0
    for problems in chapters:
        for number in range(1, problems + 1):
            if number == page:
                special += 1
            if number == problems or number % k == 0:
                page += 1
    return special


def flatland_space_stations(n: int, stations: Iterable[int]) -> int:
    """Largest distance from any of n cities to its nearest space station."""
    positions = list(stations)
    if not positions:
        raise ValueError("at least one space station is needed")
    if n < 1:
        raise ValueError("there must be at least one city")
    return max(min(abs(city - station) for station in positions) for city in range(n))
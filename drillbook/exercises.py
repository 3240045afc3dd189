"""Warm-up exercises on strings, lists and simple greedy rules."""

from __future__ import annotations

import heapq
import string
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

MONTH_LENGTHS_2016 = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
WEEKDAYS = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
START_AIRPORT = "ICN"

_CASE_SWAP = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_lowercase + string.ascii_uppercase,
)


def inner_product(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of pairwise products of two equally long sequences."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return sum(x * y for x, y in zip(a, b))


def middle_chars(text: str) -> str:
    """The middle character, or the middle two when the length is even."""
    if not text:
        raise ValueError("text must not be empty")
    half = len(text) // 2
    return text[half] if len(text) % 2 else text[half - 1 : half + 1]


def price_durations(prices: Sequence[int]) -> list[int]:
    """Seconds each price holds before first dropping below its value."""
    last = len(prices) - 1
    durations = []
    for i, price in enumerate(prices):
        drop = next((j for j in range(i, len(prices)) if prices[j] < price), last)
        durations.append(drop - i)
    return durations


def weekday_2016(month: int, day: int) -> str:
    """Three-letter weekday name of a date in 2016."""
    if not 1 <= month <= 12:
        raise ValueError(f"month {month} is out of range")
    if not 1 <= day <= MONTH_LENGTHS_2016[month - 1]:
        raise ValueError(f"day {day} is out of range for month {month}")
    ordinal = sum(MONTH_LENGTHS_2016[: month - 1]) + day
    return WEEKDAYS[(ordinal % 7 + 4) % 7]


def days_in_year(year: int) -> int:
    """366 for Gregorian leap years, otherwise 365."""
    leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    return 366 if leap else 365


def swap_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving everything else unchanged."""
    return text.translate(_CASE_SWAP)


def unfinished_runner(participants: Iterable[str], completions: Iterable[str]) -> str:
    """Name of the participant who did not finish, or '' if everyone did."""
    remaining = Counter(participants) - Counter(completions)
    return next(iter(remaining), "")


def gym_suits(n: int, lost: Iterable[int], reserve: Iterable[int]) -> int:
    """Students able to attend after spare suits are lent to neighbours."""
    missing = set(lost)
    spares = set()
    for student in reserve:
        if student in missing:
            missing.discard(student)
        else:
            spares.add(student)
    for student in sorted(spares):
        if student - 1 in missing:
            missing.discard(student - 1)
        elif student + 1 in missing:
            missing.discard(student + 1)
    return n - len(missing)


def _concat_order(a: int, b: int) -> int:
    ab, ba = f"{a}{b}", f"{b}{a}"
    return -1 if ab > ba else (1 if ab < ba else 0)


def largest_number(numbers: Iterable[int]) -> str:
    """Largest number formed by concatenating all the given numbers."""
    ordered = sorted(numbers, key=cmp_to_key(_concat_order))
    answer = "".join(map(str, ordered))
    return "0" if answer.startswith("0") else answer


def largest_after_removal(number: str, k: int) -> str:
    """Largest digit string left after removing k digits from number."""
    if not 0 <= k <= len(number):
        raise ValueError("k must lie between 0 and the number of digits")
    kept: list[str] = []
    to_remove = k
    for digit in number:
        while kept and to_remove and kept[-1] < digit:
            kept.pop()
            to_remove -= 1
        kept.append(digit)
    return "".join(kept[: len(kept) - to_remove])


def mix_scoville(scoville: Iterable[int], k: int) -> int:
    """Mixes needed until every food is at least k hot, or -1 if impossible."""
    heap = list(scoville)
    if not heap:
        raise ValueError("at least one food is needed")
    heapq.heapify(heap)
    mixes = 0
    while True:
        mildest = heapq.heappop(heap)
        if mildest >= k:
            return mixes
        if not heap:
            return -1
        second = heapq.heappop(heap)
        heapq.heappush(heap, mildest + 2 * second)
        mixes += 1


def travel_route(tickets: Iterable[Sequence[str]]) -> list[str]:
    """Alphabetically first itinerary that uses every ticket, starting at ICN."""
    routes: dict[str, list[str]] = defaultdict(list)
    for origin, destination in sorted((tuple(t) for t in tickets), reverse=True):
        routes[origin].append(destination)
    route: list[str] = []
    stack = [START_AIRPORT]
    while stack:
        airport = stack[-1]
        if routes[airport]:
            stack.append(routes[airport].pop())
        else:
            route.append(stack.pop())
    route.reverse()
    return route


def third_largest_distinct(values: Iterable[int]) -> int | None:
    """Third largest distinct value, or None if there are fewer than three."""
    distinct = sorted(set(values), reverse=True)
    return distinct[2] if len(distinct) >= 3 else None
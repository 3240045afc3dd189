import pytest

from drillbook.exercises import (
    days_in_year,
    gym_suits,
    inner_product,
    largest_after_removal,
    largest_number,
    middle_chars,
    mix_scoville,
    price_durations,
    swap_case,
    third_largest_distinct,
    travel_route,
    unfinished_runner,
    weekday_2016,
)


def test_inner_product_worked_example():
    assert inner_product([1, 2, 3, 4], [-3, -1, 0, 2]) == 3


def test_inner_product_symmetric_and_zero():
    a, b = [4, -2, 7], [1, 5, 3]
    assert inner_product(a, b) == inner_product(b, a)
    assert inner_product(a, [0, 0, 0]) == 0


def test_inner_product_length_mismatch():
    with pytest.raises(ValueError):
        inner_product([1, 2], [1])


@pytest.mark.parametrize("text", ["abcde", "qwer", "z", "ab", "hello!"])
def test_middle_chars_shape(text):
    middle = middle_chars(text)
    assert len(middle) == (1 if len(text) % 2 else 2)
    assert middle in text
    assert text.index(middle) == len(text) // 2 - (len(middle) - 1)


def test_middle_chars_empty():
    with pytest.raises(ValueError):
        middle_chars("")


def test_price_durations_rising_prices_never_drop():
    prices = [1, 2, 3, 4, 5]
    assert price_durations(prices) == list(range(len(prices) - 1, -1, -1))


def test_price_durations_immediate_drop():
    result = price_durations([5, 4, 3])
    assert result[0] == 1 and result[1] == 1 and result[-1] == 0


def test_weekday_new_year():
    assert weekday_2016(1, 1) == "FRI"


def test_weekday_repeats_weekly():
    assert weekday_2016(3, 1) == weekday_2016(3, 8) == weekday_2016(3, 29)
    assert weekday_2016(1, 1) != weekday_2016(1, 2)


def test_weekday_invalid_date():
    with pytest.raises(ValueError):
        weekday_2016(13, 1)
    with pytest.raises(ValueError):
        weekday_2016(2, 30)


@pytest.mark.parametrize(
    "year, days", [(2000, 366), (1900, 365), (2024, 366), (2023, 365)]
)
def test_days_in_year(year, days):
    assert days_in_year(year) == days


def test_swap_case_round_trip_and_direction():
    text = "Hello, World 123"
    assert swap_case(swap_case(text)) == text
    assert swap_case("abcxyz") == "abcxyz".upper()
    assert swap_case("12 !?") == "12 !?"


def test_unfinished_runner():
    assert unfinished_runner(["leo", "kiki", "eden"], ["eden", "kiki"]) == "leo"
    assert (
        unfinished_runner(["mislav", "stanko", "mislav", "ana"], ["stanko", "ana", "mislav"])
        == "mislav"
    )
    assert unfinished_runner(["ana"], ["ana"]) == ""


def test_gym_suits_everyone_covered():
    assert gym_suits(5, [2, 4], [1, 3, 5]) == 5
    assert gym_suits(4, [], [1]) == 4


def test_gym_suits_self_reserve_cancels():
    assert gym_suits(3, [2], [2]) == 3


def test_gym_suits_never_above_n():
    assert gym_suits(6, [1, 3, 6], [2]) < 6


def test_largest_number_example():
    assert largest_number([6, 10, 2]) == "6210"


def test_largest_number_uses_all_digits():
    numbers = [3, 30, 34, 5, 9]
    result = largest_number(numbers)
    assert sorted(result) == sorted("".join(map(str, numbers)))
    assert result.startswith("9")


def test_largest_number_all_zero():
    assert largest_number([0, 0, 0]) == "0"


def test_largest_after_removal_properties():
    number, k = "4177252841", 4
    result = largest_after_removal(number, k)
    assert len(result) == len(number) - k
    remaining = iter(number)
    assert all(digit in remaining for digit in result)


def test_largest_after_removal_descending_keeps_prefix():
    assert largest_after_removal("98765", 2) == "98765"[:-2]
    assert largest_after_removal("1924", 0) == "1924"


def test_largest_after_removal_bad_k():
    with pytest.raises(ValueError):
        largest_after_removal("12", 3)


def test_mix_scoville_example():
    assert mix_scoville([1, 2, 3, 9, 10, 12], 7) == 2


def test_mix_scoville_already_hot_and_impossible():
    assert mix_scoville([8, 9], 7) == 0
    assert mix_scoville([1], 5) == -1


def test_mix_scoville_empty():
    with pytest.raises(ValueError):
        mix_scoville([], 1)


def test_travel_route_chain():
    tickets = [["ICN", "JFK"], ["HND", "IAD"], ["JFK", "HND"]]
    assert travel_route(tickets) == ["ICN", "JFK", "HND", "IAD"]


def test_travel_route_uses_every_ticket_alphabetically():
    tickets = [["ICN", "SFO"], ["ICN", "ATL"], ["SFO", "ATL"], ["ATL", "ICN"], ["ATL", "SFO"]]
    route = travel_route(tickets)
    assert route[0] == "ICN"
    assert len(route) == len(tickets) + 1
    legs = sorted(zip(route, route[1:]))
    assert legs == sorted(tuple(t) for t in tickets)
    assert route[1] == "ATL"


def test_third_largest_distinct():
    assert third_largest_distinct([5, 5, 4, 3, 2]) == 3
    assert third_largest_distinct([7, 7, 1]) is None
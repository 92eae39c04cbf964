from itertools import combinations

import pytest

from drillbook.sorting import (
    assign_tickets,
    count_apartment_matches,
    count_distinct,
    count_gondolas,
    count_towers,
    max_customers,
    max_movies,
    min_stick_cost,
    nested_ranges,
    smallest_missing_sum,
)


def test_apartments_exact_sizes_all_match():
    applicants = [15, 5, 10]
    assert count_apartment_matches(applicants, [10, 15, 5], 0) == len(applicants)


def test_apartments_wide_tolerance_limited_by_smaller_side():
    applicants = [60, 45, 80, 60]
    apartments = [30, 60]
    assert count_apartment_matches(applicants, apartments, 1000) == len(apartments)


@pytest.mark.parametrize("tolerance", [0, 1, 5, 20])
def test_apartments_bounded(tolerance):
    applicants = [60, 45, 80, 60, 12, 33]
    apartments = [30, 60, 75, 14]
    result = count_apartment_matches(applicants, apartments, tolerance)
    assert 0 <= result <= min(len(applicants), len(apartments))


def test_apartments_tolerance_monotonic():
    applicants = [60, 45, 80, 60, 12, 33]
    apartments = [30, 60, 75, 14]
    counts = [count_apartment_matches(applicants, apartments, t) for t in range(30)]
    assert counts == sorted(counts)


def test_gondolas_heavy_children_ride_alone():
    weights = [7, 8, 9, 6]
    assert count_gondolas(weights, 9) == len(weights)


def test_gondolas_bounds():
    weights = [7, 2, 3, 9, 4, 1, 5]
    result = count_gondolas(weights, 10)
    assert (len(weights) + 1) // 2 <= result <= len(weights)


def test_gondolas_light_children_pair_up():
    weights = [1, 1, 1, 1, 1, 1]
    assert count_gondolas(weights, 2) == len(weights) // 2


def test_movies_disjoint_all_watched():
    movies = [(5, 6), (1, 2), (3, 4), (2, 3)]
    assert max_movies(movies) == len(movies)


def test_movies_overlapping_only_one():
    movies = [(1, 10), (2, 9), (3, 8)]
    assert max_movies(movies) == max_movies(movies[:1])


def test_customers_identical_intervals_all_present():
    visits = [(2, 8), (2, 8), (2, 8)]
    assert max_customers(visits) == len(visits)


def test_customers_touching_intervals_do_not_overlap():
    assert max_customers([(1, 5), (5, 9)]) == max_customers([(1, 5)])


def test_customers_disjoint():
    assert max_customers([(1, 2), (3, 4), (6, 7)]) == max_customers([(3, 4)])


def test_stick_cost_equal_lengths_is_free():
    assert min_stick_cost([4, 4, 4]) == min_stick_cost([4])


@pytest.mark.parametrize("lengths", [[2, 3, 1, 5, 2], [10, 1, 7, 3], [5]])
def test_stick_cost_is_minimal(lengths):
    cost = min_stick_cost(lengths)
    assert all(cost <= sum(abs(x - t) for x in lengths) for t in range(0, 12))


def test_stick_cost_shift_invariant():
    lengths = [2, 3, 1, 5, 2]
    assert min_stick_cost(lengths) == min_stick_cost([x + 100 for x in lengths])


def test_missing_sum_without_one():
    assert smallest_missing_sum([2, 3, 9]) == 1


def test_missing_sum_ones():
    coins = [1, 1, 1]
    assert smallest_missing_sum(coins) == sum(coins) + 1


@pytest.mark.parametrize("coins", [[2, 9, 1, 2, 7], [1, 2, 4, 9], [1, 3, 6]])
def test_missing_sum_is_smallest_unreachable(coins):
    sums = {sum(c) for r in range(1, len(coins) + 1) for c in combinations(coins, r)}
    result = smallest_missing_sum(coins)
    assert result not in sums
    assert all(v in sums for v in range(1, result))


def test_towers_decreasing_single_tower():
    assert count_towers([5, 4, 3, 2]) == 1


@pytest.mark.parametrize("cubes", [[1, 2, 3, 4], [3, 3, 3]])
def test_towers_non_decreasing_each_separate(cubes):
    assert count_towers(cubes) == len(cubes)


def test_distinct():
    assert count_distinct([2, 3, 2, 2, 3, 5]) == 3


def test_tickets_invariants():
    prices = [5, 3, 7, 8, 5]
    budgets = [4, 8, 3, 6, 10, 1]
    sold = assign_tickets(prices, budgets)
    assert len(sold) == len(budgets)
    taken = [p for p in sold if p is not None]
    remaining = list(prices)
    for price in taken:
        remaining.remove(price)
    for price, budget in zip(sold, budgets):
        if price is not None:
            assert price <= budget


def test_tickets_none_when_too_poor():
    assert assign_tickets([5, 6], [4]) == [None]


def test_tickets_dearest_affordable_first():
    assert assign_tickets([2, 4, 9], [5, 5, 5]) == [4, 2, None]


def test_nested_identical_ranges():
    result = nested_ranges([(1, 5), (1, 5)])
    assert all(contains and contained for _, contains, contained in result)


def test_nested_disjoint_ranges():
    result = nested_ranges([(5, 6), (1, 2), (3, 4)])
    assert [r for r, _, _ in result] == [(1, 2), (3, 4), (5, 6)]
    assert not any(c or d for _, c, d in result)


def test_nested_same_start():
    result = nested_ranges([(1, 7), (1, 3)])
    assert [contains for _, contains, _ in result] == [False, True]
    assert [contained for _, _, contained in result] == [True, False]
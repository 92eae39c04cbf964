"""Greedy and sorting based exercises: matching, scheduling and ordering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from bisect import bisect_right
from itertools import pairwise

from sortedcontainers import SortedList


def count_apartment_matches(
    applicants: Iterable[int], apartments: Iterable[int], tolerance: int
) -> int:
    """Count applicants who get an apartment within ``tolerance`` of the desired size."""
    wants = sorted(applicants)
    sizes = sorted(apartments)
    i = j = matches = 0
    while i < len(wants) and j < len(sizes):
        if abs(wants[i] - sizes[j]) <= tolerance:
            matches += 1
            i += 1
            j += 1
        elif sizes[j] < wants[i] - tolerance:
            j += 1
        else:
            i += 1
    return matches


def count_gondolas(weights: Iterable[int], limit: int) -> int:
    """Minimum number of two-seat gondolas with a weight limit for all children."""
    ordered = sorted(weights)
    lo, hi = 0, len(ordered) - 1
    gondolas = 0
    while lo < hi:
        if ordered[lo] + ordered[hi] <= limit:
            lo += 1
        hi -= 1
        gondolas += 1
    return gondolas + (lo == hi)


def max_movies(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of ``(start, end)`` movies that can be watched one after another."""
    last_end = 0
    watched = 0
    for end, start in sorted((end, start) for start, end in intervals):
        if last_end <= start:
            watched += 1
            last_end = max(last_end, end)
    return watched


def max_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of customers present at once; a leaving customer goes first on ties."""
    events: list[tuple[int, int]] = []
    for start, end in intervals:
        events.append((start, 1))
        events.append((end, -1))
    events.sort()
    present = best = 0
    for _, change in events:
        present += change
        best = max(best, present)
    return best


def min_stick_cost(lengths: Iterable[int]) -> int:
    """Minimum total change needed to make all sticks the same length."""
    ordered = sorted(lengths)
    if not ordered:
        return 0
    median = ordered[len(ordered) // 2]
    return sum(abs(median - length) for length in ordered)


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Smallest positive sum that no subset of the coins adds up to."""
    reachable_below = 1
    for coin in sorted(coins):
        if coin > reachable_below:
            break
        reachable_below += coin
    return reachable_below


def count_towers(cubes: Iterable[int]) -> int:
    """Number of towers built when each cube goes on the leftmost tower with a larger top."""
    tops: list[int] = []
    for cube in cubes:
        slot = bisect_right(tops, cube)
        if slot < len(tops):
            tops[slot] = cube
        else:
            tops.append(cube)
    return len(tops)


def count_distinct(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))


def assign_tickets(prices: Iterable[int], budgets: Iterable[int]) -> list[int | None]:
    """Give each customer the dearest remaining ticket within budget, or None if there is none."""
    remaining = SortedList(prices)
    sold: list[int | None] = []
    for budget in budgets:
        index = remaining.bisect_right(budget)
        sold.append(remaining.pop(index - 1) if index else None)
    return sold


def nested_ranges(
    ranges: Sequence[tuple[int, int]],
) -> list[tuple[tuple[int, int], bool, bool]]:
    """Flag containment between neighbouring ranges in sorted order.

    Returns ``(range, contains_other, is_contained)`` for every range, sorted by
    start and then end. Only ranges adjacent in that order are compared.
    """
    ordered = sorted(ranges)
    contains = [False] * len(ordered)
    contained = [False] * len(ordered)
    for index, ((prev_left, prev_right), (left, right)) in enumerate(
        pairwise(ordered), start=1
    ):
        if right <= prev_right:
            contains[index - 1] = True
            contained[index] = True
        if left == prev_left and prev_right <= right:
            contains[index] = True
            contained[index - 1] = True
    return list(zip(ordered, contains, contained))
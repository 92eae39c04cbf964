"""Exercises on sequences: counting, prefix sums and sliding windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

MOD = 10**9 + 7


def dice_combinations(n: int) -> int:
    """Number of ordered dice throws summing to ``n``, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def _positions(permutation: Sequence[int]) -> list[int]:
    """Position (1-based) of each value, with sentinels at 0 and n + 1."""
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("expected a permutation of 1..n")
    pos = [0] * (n + 2)
    for index, value in enumerate(permutation, start=1):
        pos[value] = index
    pos[n + 1] = n + 1
    return pos


def _count_from_positions(pos: list[int]) -> int:
    n = len(pos) - 2
    return 1 + sum(pos[value] > pos[value + 1] for value in range(1, n))


def count_rounds(permutation: Sequence[int]) -> int:
    """Rounds needed to collect 1..n in order when each pass goes left to right."""
    return _count_from_positions(_positions(permutation))


class CollectingRounds:
    """Collection round count kept up to date while positions are swapped."""

    def __init__(self, permutation: Sequence[int]) -> None:
        self._pos = _positions(permutation)
        self._seq = [0, *permutation]
        self._rounds = _count_from_positions(self._pos)

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def permutation(self) -> list[int]:
        return self._seq[1:]

    def _breaks(self, values: set[int]) -> int:
        return sum(self._pos[v] > self._pos[v + 1] for v in values)

    def swap(self, a: int, b: int) -> int:
        """Swap the values at 1-based positions ``a`` and ``b``; return the new round count."""
        n = len(self._seq) - 1
        if not (1 <= a <= n and 1 <= b <= n):
            raise IndexError("position out of range")
        x, y = self._seq[a], self._seq[b]
        affected = {x - 1, x, y - 1, y}
        self._rounds -= self._breaks(affected)
        self._seq[a], self._seq[b] = y, x
        self._pos[x], self._pos[y] = self._pos[y], self._pos[x]
        self._rounds += self._breaks(affected)
        return self._rounds


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    it = iter(values)
    try:
        current = best = next(it)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in it:
        current = max(current, 0) + value
        best = max(best, current)
    return best


def missing_number(n: int, values: Iterable[int]) -> list[int]:
    """Numbers from 1..n that do not occur in ``values``, in increasing order."""
    present = set(values)
    return [number for number in range(1, n + 1) if number not in present]


def longest_unique_run(values: Iterable[int]) -> int:
    """Length of the longest contiguous run with no repeated value."""
    last_seen: dict[int, int] = {}
    left = best = 0
    for index, value in enumerate(values):
        if last_seen.get(value, -1) >= left:
            left = last_seen[value] + 1
        last_seen[value] = index
        best = max(best, index - left + 1)
    return best


def longest_repetition(dna: str) -> int:
    """Length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(dna)), default=0)


def count_divisible_subarrays(values: Sequence[int]) -> int:
    """Number of subarrays whose sum is divisible by the number of values."""
    n = len(values)
    if n == 0:
        return 0
    seen = Counter({0: 1})
    prefix = total = 0
    for value in values:
        prefix = (prefix + value) % n
        total += seen[prefix]
        seen[prefix] += 1
    return total


def count_subarrays_with_sum(values: Iterable[int], target: int) -> int:
    """Number of subarrays whose sum equals ``target``."""
    seen = Counter({0: 1})
    prefix = total = 0
    for value in values:
        prefix += value
        total += seen[prefix - target]
        seen[prefix] += 1
    return total


def two_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """1-based positions ``(later, earlier)`` of two values summing to ``target``.

    The last pair found in a left-to-right scan is returned; None if there is none.
    """
    seen: dict[int, int] = {}
    found: tuple[int, int] | None = None
    for index, value in enumerate(values):
        if target - value in seen:
            found = (index + 1, seen[target - value] + 1)
        else:
            seen[value] = index
    return found


def collatz_sequence(n: int) -> list[int]:
    """Values visited from ``n`` down to 1 by halving evens and mapping odds to 3n + 1."""
    steps: list[int] = []
    while n > 1:
        steps.append(n)
        n = 3 * n + 1 if n % 2 else n // 2
    steps.append(1)
    return steps
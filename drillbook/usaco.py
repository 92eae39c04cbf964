"""Prefix-sum and interval dynamic programming exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import accumulate, pairwise

from drillbook.sequences import MOD


class ForestGrid:
    """Grid of '.' (empty) and '*' (tree) cells answering rectangle tree counts."""

    def __init__(self, rows: Iterable[str]) -> None:
        grid = list(rows)
        width = len(grid[0]) if grid else 0
        if any(len(row) != width for row in grid):
            raise ValueError("all rows must have the same width")
        self.height = len(grid)
        self.width = width
        self._prefix = [[0] * (width + 1)]
        for row in grid:
            above = self._prefix[-1]
            running = 0
            line = [0]
            for col, cell in enumerate(row, start=1):
                running += cell == "*"
                line.append(above[col] + running)
            self._prefix.append(line)

    def count(self, y1: int, x1: int, y2: int, x2: int) -> int:
        """Trees in the rectangle with 1-based inclusive corners ``(y1, x1)`` and ``(y2, x2)``."""
        if not (1 <= y1 <= y2 <= self.height and 1 <= x1 <= x2 <= self.width):
            raise IndexError("rectangle is outside the grid")
        p = self._prefix
        return p[y2][x2] - p[y1 - 1][x2] - p[y2][x1 - 1] + p[y1 - 1][x1 - 1]


def count_empty_string_ways(s: str) -> int:
    """Ways to empty ``s`` by repeatedly removing two equal adjacent characters, modulo 10**9 + 7."""
    n = len(s)
    if n == 0:
        return 1
    if n % 2:
        return 0
    choose = [[1]]
    for _ in range(n // 2):
        prev = choose[-1]
        choose.append([1, *((a + b) % MOD for a, b in pairwise(prev)), 1])
    ways = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n):
        ways[i + 1][i] = 1
    for i in range(n - 1, -1, -1):
        for j in range(i + 1, n, 2):
            total = 0
            for k in range(i + 1, j + 1, 2):
                if s[i] == s[k]:
                    inner = ways[i + 1][k - 1] * ways[k + 1][j] % MOD
                    total += inner * choose[(j - i + 1) // 2][(k - i + 1) // 2]
            ways[i][j] = total % MOD
    return ways[0][n - 1]


def _kind(gesture: str) -> str:
    return gesture if gesture in ("S", "P") else "H"


def max_hps_wins(gestures: Iterable[str]) -> int:
    """Most games won by playing one gesture, then switching at most once to another.

    ``gestures`` are the opponent's plays; 'S' and 'P' are told apart and
    anything else counts as 'H'.
    """
    kinds = [_kind(g) for g in gestures]
    total = Counter(kinds)
    before: Counter[str] = Counter()
    best = 0
    for kind in kinds:
        before[kind] += 1
        after = total - before
        best = max(best, max(before.values()) + max(after.values(), default=0))
    return best


def min_signal_repairs(n: int, k: int, broken: Iterable[int]) -> int:
    """Fewest signals to repair so that ``k`` consecutive signals among 1..n all work."""
    if k < 0:
        raise ValueError("k must not be negative")
    broken_set = set(broken)
    if any(not 1 <= signal <= n for signal in broken_set):
        raise ValueError("broken signal ids must lie in 1..n")
    prefix = list(
        accumulate((signal in broken_set for signal in range(1, n + 1)), initial=0)
    )
    return min(
        (hi - lo for lo, hi in zip(prefix, prefix[k:])),
        default=k,
    )
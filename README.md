# drillbook

Compact, tested solutions to well-known algorithm drills: sorting and
greedy problems, prefix sums, sliding windows, circular eliminations and
a few dynamic-programming classics. Each drill is a plain Python function,
or a small class when it answers repeated queries, so you can call it
directly, check your own answers against it, or read it as a reference.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                | Functions and classes |
|-----------------------|-----------------------|
| `drillbook.sorting`   | `count_apartment_matches`, `count_gondolas`, `max_movies`, `max_customers`, `min_stick_cost`, `smallest_missing_sum`, `count_towers`, `count_distinct`, `assign_tickets`, `nested_ranges` |
| `drillbook.sequences` | `dice_combinations`, `count_rounds`, `CollectingRounds`, `max_subarray_sum`, `missing_number`, `longest_unique_run`, `longest_repetition`, `count_divisible_subarrays`, `count_subarrays_with_sum`, `two_sum`, `collatz_sequence` |
| `drillbook.circles`   | `josephus_order`, `josephus_order_k`, `longest_passages` |
| `drillbook.usaco`     | `ForestGrid`, `count_empty_string_ways`, `max_hps_wins`, `min_signal_repairs` |
| `drillbook.cli`       | `main`, the entry point of the `drillbook` command |

## Using the functions

```python
from drillbook.sequences import dice_combinations, max_subarray_sum
from drillbook.sorting import count_distinct
from drillbook.circles import josephus_order
from drillbook.usaco import ForestGrid

dice_combinations(3)                              # 4
max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2])     # 9
count_distinct([2, 3, 2, 2, 3])                   # 2
josephus_order(7)                                 # [2, 4, 6, 1, 5, 3, 7]

grid = ForestGrid([".*..", "*.**", "**..", "****"])
grid.count(2, 2, 3, 4)                            # 3  (1-based, inclusive corners)
```

Where a drill answers many queries against the same data, it is a class
you build once and query repeatedly: `ForestGrid` precomputes 2-D prefix
sums, and `CollectingRounds` keeps the number of collecting rounds up to
date as you call `swap(a, b)` on 1-based positions (its `rounds` and
`permutation` properties show the current state).

Invalid input raises an exception (`ValueError`, or `IndexError` for
positions and rectangles out of range). Drills whose answer may not exist
say so in their return value: `two_sum` returns `None` when no pair is
found, and `assign_tickets` puts `None` in place of a customer who cannot
afford any remaining ticket.

## Command line

The `drillbook` command runs three of the drills:

```
drillbook weird 3             # prints the 3n+1 sequence: 3 10 5 16 8 4 2 1
echo 3 | drillbook weird      # reads the start value from stdin when omitted
drillbook hps --dir DIR       # reads DIR/hps.in, writes the answer to DIR/hps.out
drillbook maxcross --dir DIR  # reads DIR/maxcross.in, writes DIR/maxcross.out
```

`--dir` defaults to the current directory. `hps.in` holds a count followed
by that many gestures; `maxcross.in` holds `n`, `k`, the number of broken
signals and then their ids. On a missing file or malformed input the
command prints a message to stderr and exits with status 1.

## Limits

Only the drills listed above under "Command line" can be run from the
shell; every other drill is available as a Python function only, and the
package does not read or write contest input for them.
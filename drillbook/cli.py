"""Command line entry point for a few of the exercises."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from drillbook.sequences import collatz_sequence
from drillbook.usaco import max_hps_wins, min_signal_repairs


def _solve_hps(text: str) -> int:
    tokens = text.split()
    if not tokens:
        raise ValueError("missing gesture count")
    count = int(tokens[0])
    gestures = "".join(tokens[1:])
    if len(gestures) < count:
        raise ValueError("fewer gestures than announced")
    return max_hps_wins(gestures[:count])


def _solve_maxcross(text: str) -> int:
    numbers = [int(token) for token in text.split()]
    if len(numbers) < 3:
        raise ValueError("expected n, k and the number of broken signals")
    n, k, count = numbers[:3]
    broken = numbers[3:3 + count]
    if len(broken) < count:
        raise ValueError("fewer broken signals than announced")
    return min_signal_repairs(n, k, broken)


_FILE_TASKS = {"hps": _solve_hps, "maxcross": _solve_maxcross}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drillbook")
    commands = parser.add_subparsers(dest="command", required=True)
    weird = commands.add_parser("weird", help="print the 3n+1 sequence")
    weird.add_argument("n", nargs="?", type=int, help="start value (read from stdin if omitted)")
    for name in _FILE_TASKS:
        task = commands.add_parser(name, help=f"solve {name}.in into {name}.out")
        task.add_argument("--dir", default=".", type=Path, help="directory holding the files")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a subcommand; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "weird":
            start = args.n
            if start is None:
                tokens = sys.stdin.read().split()
                if not tokens:
                    raise ValueError("missing start value")
                start = int(tokens[0])
            print(" ".join(map(str, collatz_sequence(start))))
        else:
            directory: Path = args.dir
            text = (directory / f"{args.command}.in").read_text()
            answer = _FILE_TASKS[args.command](text)
            (directory / f"{args.command}.out").write_text(f"{answer}\n")
    except (OSError, ValueError) as exc:
        print(f"drillbook: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
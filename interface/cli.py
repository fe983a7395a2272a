"""
Command-line interface for the Tower of Hanoi solver.

Prints one line per move followed by the total, or only the total when the
disk count is above the enumeration limit:

    $ python -m interface.cli 2
    1: disk 1 A -> B
    2: disk 2 A -> C
    3: disk 1 B -> C
    total: 3

Critical rule: stdout carries results only, so the output can be piped.
Diagnostics go to stderr through logging.
"""

import argparse
import logging
import sys

from hanoi.constants import ENUMERATION_LIMIT, MAX_DISK_COUNT
from hanoi.solver import Move, solve

_log = logging.getLogger(__name__)

# Highest accepted --limit. 20 disks is already 1,048,575 printed lines.
_MAX_LIMIT = 20


def _send(line: str) -> None:
    """Write a result line to stdout and flush immediately."""
    print(line, flush=True)


def _positive_int(text: str) -> int:
    """argparse type: an integer of at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _disk_count(text: str) -> int:
    """argparse type: a disk count between 1 and MAX_DISK_COUNT."""
    value = _positive_int(text)
    if value > MAX_DISK_COUNT:
        raise argparse.ArgumentTypeError(f"must not exceed {MAX_DISK_COUNT}, got {value}")
    return value


def _limit(text: str) -> int:
    """argparse type: an enumeration limit between 1 and _MAX_LIMIT."""
    value = _positive_int(text)
    if value > _MAX_LIMIT:
        raise argparse.ArgumentTypeError(f"must not exceed {_MAX_LIMIT}, got {value}")
    return value


def format_move(move: Move) -> str:
    """Render a move as '<seq>: disk <size> <from> -> <to>'."""
    return (
        f"{move.sequence_number}: disk {move.disk_size} "
        f"{move.from_peg.value} -> {move.to_peg.value}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanoi",
        description="Solve the Tower of Hanoi puzzle from peg A to peg C.",
    )
    parser.add_argument("disks", type=_disk_count, help="number of disks")
    parser.add_argument(
        "--limit",
        type=_limit,
        default=ENUMERATION_LIMIT,
        help=f"largest disk count to list move by move (default {ENUMERATION_LIMIT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Parse arguments, solve, and print the result.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        Process exit status (0 on success). Bad arguments exit with status 2
        from argparse.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    result = solve(args.disks, enumeration_limit=args.limit)
    if isinstance(result, int):
        _log.info("disks=%d above limit=%d, printing count only", args.disks, args.limit)
        _send(f"total: {result}")
        return 0

    for move in result:
        _send(format_move(move))
    _send(f"total: {len(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

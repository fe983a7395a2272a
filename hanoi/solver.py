"""
Solver entry point: recursive move generation and closed-form move counting.

This module defines the stable public interface that web/app.py and
interface/cli.py depend on. solve() is the only function the transport
layers call; the rest is exposed for tests and for callers that need a
non-canonical orientation.

Two output modes:

1. Full enumeration (disk_count <= ENUMERATION_LIMIT): the classic recursive
   relocation. To move n disks from source to target, move the top n-1 disks
   to the auxiliary peg, move disk n to the target, then move the n-1 disks
   from the auxiliary peg onto it. T(n) = 2*T(n-1) + 1 with T(1) = 1, so the
   list has exactly 2^n - 1 moves.

2. Count only (disk_count > ENUMERATION_LIMIT): 2^n - 1 computed directly.
   Python ints are arbitrary precision, so the count is exact for n = 1000
   and beyond.

State model:
    The sequence counter and the move buffer live in a _RelocationState
    created per call and passed down the recursion. Nothing survives between
    calls, so concurrent callers never share a counter.
"""

from dataclasses import dataclass, field

from hanoi.constants import (
    AUXILIARY_PEG,
    ENUMERATION_LIMIT,
    SOURCE_PEG,
    TARGET_PEG,
    Peg,
)


class IllegalMoveError(ValueError):
    """Raised by replay() when a move breaks the puzzle rules."""


@dataclass(frozen=True)
class Move:
    """
    A single relocation of one disk.

    Attributes:
        sequence_number: 1-based position of the move in the solution.
        from_peg:        Peg the disk is taken from.
        to_peg:          Peg the disk is placed on.
        disk_size:       Disk label, 1 (smallest) to n (largest).
    """

    sequence_number: int
    from_peg: Peg
    to_peg: Peg
    disk_size: int


@dataclass
class _RelocationState:
    """
    Per-call accumulator threaded through the recursion.

    Attributes:
        moves:    Moves emitted so far, in emission order.
        next_seq: Sequence number the next emitted move receives.
    """

    moves: list[Move] = field(default_factory=list)
    next_seq: int = 1

    def emit(self, from_peg: Peg, to_peg: Peg, disk_size: int) -> None:
        self.moves.append(Move(self.next_seq, from_peg, to_peg, disk_size))
        self.next_seq += 1


def _check_disk_count(disk_count: int) -> None:
    # bool is an int subclass; True must not pass as one disk.
    if isinstance(disk_count, bool) or not isinstance(disk_count, int):
        raise TypeError(f"disk_count must be an int, got {type(disk_count).__name__}")
    if disk_count < 1:
        raise ValueError(f"disk_count must be at least 1, got {disk_count}")


def _relocate(
    n: int,
    source: Peg,
    target: Peg,
    auxiliary: Peg,
    state: _RelocationState,
) -> None:
    """
    Move the top n disks from source to target, emitting moves into state.

    Args:
        n:         Number of disks to move. Strictly decreases on every
                   recursive call, so the recursion always reaches n == 1.
        source:    Peg currently holding the n disks.
        target:    Peg the n disks must end on.
        auxiliary: The remaining peg, used as temporary storage.
        state:     Per-call accumulator (move buffer and sequence counter).
    """
    if n == 1:
        state.emit(source, target, 1)
        return

    _relocate(n - 1, source, auxiliary, target, state)
    state.emit(source, target, n)
    _relocate(n - 1, auxiliary, target, source, state)


def move_count(disk_count: int) -> int:
    """Return 2^disk_count - 1, the length of the optimal solution."""
    _check_disk_count(disk_count)
    return (1 << disk_count) - 1


def generate_moves(
    disk_count: int,
    source: Peg = SOURCE_PEG,
    target: Peg = TARGET_PEG,
    auxiliary: Peg = AUXILIARY_PEG,
) -> tuple[Move, ...]:
    """
    Enumerate the optimal move sequence for any peg orientation.

    Unlike solve(), this never falls back to counting, so callers must keep
    disk_count small themselves.

    Args:
        disk_count: Number of disks, all starting on source.
        source:     Starting peg.
        target:     Destination peg.
        auxiliary:  Spare peg.

    Returns:
        Tuple of 2^disk_count - 1 moves, numbered 1..2^disk_count - 1.

    Raises:
        ValueError: disk_count < 1, or the three pegs are not distinct.
        TypeError:  disk_count is not an int.
    """
    _check_disk_count(disk_count)
    if len({source, target, auxiliary}) != 3:
        raise ValueError(
            f"source, target and auxiliary must be distinct pegs, "
            f"got {source.value}, {target.value}, {auxiliary.value}"
        )

    state = _RelocationState()
    _relocate(disk_count, source, target, auxiliary, state)
    return tuple(state.moves)


def solve(
    disk_count: int,
    enumeration_limit: int = ENUMERATION_LIMIT,
) -> tuple[Move, ...] | int:
    """
    Solve the puzzle in the canonical orientation (A to C via B).

    This is the stable interface called by the web and CLI layers. The
    return type depends on the size of the problem:
        - disk_count <= enumeration_limit: tuple of every Move, in order.
        - disk_count >  enumeration_limit: int move count 2^disk_count - 1.
          No move is materialized.

    Args:
        disk_count:        Number of disks. Callers validate before calling;
                           invalid values still raise rather than recurse.
        enumeration_limit: Largest disk count that is fully enumerated.

    Returns:
        The move tuple or the move count, as described above.

    Example:
        >>> [(m.from_peg.value, m.to_peg.value) for m in solve(2)]
        [('A', 'B'), ('A', 'C'), ('B', 'C')]
        >>> solve(64)
        18446744073709551615
    """
    _check_disk_count(disk_count)
    if disk_count > enumeration_limit:
        return move_count(disk_count)
    return generate_moves(disk_count)


def replay(
    disk_count: int,
    moves: tuple[Move, ...] | list[Move],
    source: Peg = SOURCE_PEG,
) -> dict[Peg, list[int]]:
    """
    Play moves on a board that starts with every disk on source.

    Checks each move against the puzzle rules independently of how the moves
    were generated.

    Args:
        disk_count: Number of disks initially stacked on source.
        moves:      Moves to apply, in order.
        source:     Peg holding the initial tower.

    Returns:
        Final peg contents, each list ordered bottom to top.

    Raises:
        IllegalMoveError: A move stays on one peg, takes from an empty peg,
                          names a disk that is not on top, or puts a larger
                          disk on a smaller one.
    """
    _check_disk_count(disk_count)
    pegs: dict[Peg, list[int]] = {peg: [] for peg in Peg}
    pegs[source] = list(range(disk_count, 0, -1))

    for move in moves:
        if move.from_peg == move.to_peg:
            raise IllegalMoveError(
                f"move {move.sequence_number}: source and destination are both "
                f"peg {move.from_peg.value}"
            )
        stack = pegs[move.from_peg]
        if not stack:
            raise IllegalMoveError(
                f"move {move.sequence_number}: peg {move.from_peg.value} is empty"
            )
        if stack[-1] != move.disk_size:
            raise IllegalMoveError(
                f"move {move.sequence_number}: disk {move.disk_size} is not on top "
                f"of peg {move.from_peg.value} (top is {stack[-1]})"
            )
        dest = pegs[move.to_peg]
        if dest and dest[-1] < move.disk_size:
            raise IllegalMoveError(
                f"move {move.sequence_number}: disk {move.disk_size} cannot go on "
                f"disk {dest[-1]} on peg {move.to_peg.value}"
            )
        dest.append(stack.pop())

    return pegs

"""
Tower of Hanoi solver package.

This package implements the classic three-peg recursive solution and a
closed-form move count for disk counts too large to enumerate.

Modules:
    constants — Peg names, canonical orientation, enumeration limit, messages
    solver    — Move generation, move counting, and move replay
"""

from hanoi.constants import ENUMERATION_LIMIT, Peg
from hanoi.solver import (
    IllegalMoveError,
    Move,
    generate_moves,
    move_count,
    replay,
    solve,
)

__all__ = [
    "ENUMERATION_LIMIT",
    "IllegalMoveError",
    "Move",
    "Peg",
    "generate_moves",
    "move_count",
    "replay",
    "solve",
]

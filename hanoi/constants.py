"""
Solver constants: peg identifiers, canonical orientation, and limits.

All tunables used by the solver and the web layer are defined here so that
no module needs to introduce its own magic numbers or message strings.
"""

from enum import Enum


class Peg(str, Enum):
    """One of the three fixed positions a disk can occupy."""

    A = "A"
    B = "B"
    C = "C"


# ---------------------------------------------------------------------------
# Canonical orientation
# ---------------------------------------------------------------------------
# A top-level solve always moves the tower from A to C, using B as the spare.

SOURCE_PEG: Peg = Peg.A
TARGET_PEG: Peg = Peg.C
AUXILIARY_PEG: Peg = Peg.B

# ---------------------------------------------------------------------------
# Enumeration limit
# ---------------------------------------------------------------------------
# Largest disk count for which the full move list is materialized.
# 10 disks = 1023 moves. Above this only the closed-form count 2^n - 1 is
# returned; the move list doubles with every disk and 2^1000 moves can never
# be built or serialized.
ENUMERATION_LIMIT: int = 10

# Largest disk count accepted over HTTP. 2^10000 - 1 has 3011 decimal digits,
# which stays under the interpreter's 4300-digit int-to-str limit used by
# the JSON encoder, and building it is instant.
MAX_DISK_COUNT: int = 10_000

# ---------------------------------------------------------------------------
# Error messages (returned verbatim in HTTP error bodies)
# ---------------------------------------------------------------------------

MISSING_BODY_MESSAGE: str = "Request body is required"
INVALID_DISKS_MESSAGE: str = "numberOfDisks must be a number greater than 0"
TOO_MANY_DISKS_MESSAGE: str = f"numberOfDisks must not exceed {MAX_DISK_COUNT}"
INTERNAL_ERROR_MESSAGE: str = "Internal server error"

"""
Tests for the recursive solver, move counting, and move replay.
"""

import pytest

from hanoi.constants import ENUMERATION_LIMIT, Peg
from hanoi.solver import IllegalMoveError, Move, generate_moves, move_count, replay, solve


def _as_tuples(moves):
    return [(m.sequence_number, m.from_peg.value, m.to_peg.value, m.disk_size) for m in moves]


class TestEnumeration:
    """Full move lists for small disk counts."""

    def test_single_disk(self):
        assert solve(1) == (Move(1, Peg.A, Peg.C, 1),)

    def test_three_disks_exact_sequence(self):
        assert _as_tuples(solve(3)) == [
            (1, "A", "C", 1),
            (2, "A", "B", 2),
            (3, "C", "B", 1),
            (4, "A", "C", 3),
            (5, "B", "A", 1),
            (6, "B", "C", 2),
            (7, "A", "C", 1),
        ]

    @pytest.mark.parametrize("n", range(1, ENUMERATION_LIMIT + 1))
    def test_length_numbering_and_target(self, n):
        moves = solve(n)

        assert len(moves) == 2**n - 1
        assert [m.sequence_number for m in moves] == list(range(1, 2**n))
        assert moves[-1].to_peg is Peg.C
        assert all(m.from_peg is not m.to_peg for m in moves)
        assert all(1 <= m.disk_size <= n for m in moves)

    @pytest.mark.parametrize("n", range(1, ENUMERATION_LIMIT + 1))
    def test_replay_ends_with_tower_on_target(self, n):
        pegs = replay(n, solve(n))

        assert pegs[Peg.A] == []
        assert pegs[Peg.B] == []
        assert pegs[Peg.C] == list(range(n, 0, -1))

    def test_disk_frequencies(self):
        n = 10
        moves = solve(n)

        smallest = [m for m in moves if m.disk_size == 1]
        largest = [m for m in moves if m.disk_size == n]
        assert len(smallest) == 2 ** (n - 1)
        assert len(largest) == 1
        assert largest[0].sequence_number == 2 ** (n - 1)
        assert (largest[0].from_peg, largest[0].to_peg) == (Peg.A, Peg.C)

    def test_smallest_disk_moves_every_other_step(self):
        moves = solve(6)
        assert all(m.disk_size == 1 for m in moves[::2])
        assert all(m.disk_size != 1 for m in moves[1::2])

    def test_idempotent(self):
        assert solve(7) == solve(7)
        assert solve(500) == solve(500)

    def test_calls_do_not_share_numbering(self):
        solve(4)
        assert solve(2)[0].sequence_number == 1

    def test_moves_are_immutable(self):
        move = solve(1)[0]
        with pytest.raises(AttributeError):
            move.disk_size = 2


class TestCountOnly:
    """Closed-form count above the enumeration limit."""

    def test_boundary(self):
        assert isinstance(solve(ENUMERATION_LIMIT), tuple)
        assert len(solve(ENUMERATION_LIMIT)) == 1023
        assert solve(ENUMERATION_LIMIT + 1) == 2047

    @pytest.mark.parametrize("n", [11, 64, 100, 1000])
    def test_exact_count(self, n):
        result = solve(n)
        assert isinstance(result, int)
        assert result == 2**n - 1

    def test_count_beyond_64_bits(self):
        assert solve(100) == 1267650600228229401496703205375

    def test_custom_limit(self):
        assert solve(5, enumeration_limit=4) == 31
        assert len(solve(12, enumeration_limit=12)) == 4095

    @pytest.mark.parametrize("n", [1, 2, 5, 10, 33])
    def test_move_count_matches_enumeration(self, n):
        if n <= ENUMERATION_LIMIT:
            assert move_count(n) == len(generate_moves(n))
        else:
            assert move_count(n) == solve(n)


class TestArguments:
    @pytest.mark.parametrize("bad", [0, -1, -100])
    def test_non_positive(self, bad):
        with pytest.raises(ValueError):
            solve(bad)

    @pytest.mark.parametrize("bad", [2.0, "3", None, True])
    def test_non_integer(self, bad):
        with pytest.raises(TypeError):
            solve(bad)

    def test_pegs_must_be_distinct(self):
        with pytest.raises(ValueError, match="distinct"):
            generate_moves(3, Peg.A, Peg.A, Peg.B)


class TestOrientation:
    def test_other_orientation(self):
        moves = generate_moves(4, source=Peg.B, target=Peg.A, auxiliary=Peg.C)

        assert len(moves) == 15
        assert moves[-1].to_peg is Peg.A
        pegs = replay(4, moves, source=Peg.B)
        assert pegs[Peg.A] == [4, 3, 2, 1]


class TestReplay:
    """replay() rejects moves that break the rules."""

    def test_empty_peg(self):
        with pytest.raises(IllegalMoveError, match="empty"):
            replay(2, [Move(1, Peg.B, Peg.C, 1)])

    def test_disk_not_on_top(self):
        with pytest.raises(IllegalMoveError, match="not on top"):
            replay(2, [Move(1, Peg.A, Peg.C, 2)])

    def test_larger_on_smaller(self):
        moves = [Move(1, Peg.A, Peg.C, 1), Move(2, Peg.A, Peg.C, 2)]
        with pytest.raises(IllegalMoveError, match="cannot go on"):
            replay(2, moves)

    def test_same_peg(self):
        with pytest.raises(IllegalMoveError, match="both"):
            replay(1, [Move(1, Peg.A, Peg.A, 1)])

    def test_no_moves(self):
        assert replay(3, []) == {Peg.A: [3, 2, 1], Peg.B: [], Peg.C: []}

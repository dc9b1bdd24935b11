"""
Move Reconciler - Merges engine candidates with the move actually played.

A report shows the engine's top moves. The move the player made must
always be among them, so the reader can see how it compared:

- If the played move is already a candidate, the list is unchanged
- Otherwise it is appended last, dropping the last candidate if the
  list is already full

Candidate order is never altered, and the played move is never
re-sorted by rank.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..engine_core.move import Move


MOVES_TO_SHOW = 5


@dataclass
class ReconciledMoveList:
    """
    The displayed move ranking.

    played_index is where the played move sits in `moves`
    (None when no move was played).
    """
    moves: list[Move] = field(default_factory=list)
    played: Move | None = None
    played_index: int | None = None
    played_was_candidate: bool = False

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self):
        return iter(self.moves)

    def is_played(self, move: Move) -> bool:
        return self.played is not None and move == self.played


class MoveReconciler:
    """Builds bounded move rankings that always include the played move."""

    def __init__(self, limit: int = MOVES_TO_SHOW):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit

    def reconcile(self, candidates: Sequence[Move], played: Move | None) -> ReconciledMoveList:
        moves = list(candidates[: self.limit])

        if played is None or not played.is_a_move:
            return ReconciledMoveList(moves=moves)

        if played in moves:
            return ReconciledMoveList(
                moves=moves,
                played=played,
                played_index=moves.index(played),
                played_was_candidate=True,
            )

        if len(moves) == self.limit:
            moves.pop()
        moves.append(played)

        return ReconciledMoveList(
            moves=moves,
            played=played,
            played_index=len(moves) - 1,
            played_was_candidate=False,
        )


def reconcile_moves(
    candidates: Sequence[Move],
    played: Move | None,
    limit: int = MOVES_TO_SHOW,
) -> ReconciledMoveList:
    """Convenience function to reconcile a ranking."""
    return MoveReconciler(limit).reconcile(candidates, played)

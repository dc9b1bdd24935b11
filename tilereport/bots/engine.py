"""
Evaluation Engine - Interface for move analysis.

An engine is given a position, optionally told which move was
actually played there, and asked for its best candidate moves.

Implementations:
- RankedCandidateEngine: ranks recorded candidate moves by equity
- Future: engines that generate moves from a lexicon
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .evaluator import MoveEvaluator

if TYPE_CHECKING:
    from ..engine_core.move import Move
    from ..engine_core.state import GamePosition


# (turn number, id of the player to move); turn numbers repeat across players
AnalysisKey = tuple[int, str]


def analysis_key(position: GamePosition) -> AnalysisKey:
    return (position.turn_number, position.current_player.player_id)


class EvaluationEngine(ABC):
    """
    Abstract base class for evaluation engines.

    Call order per position:
        engine.set_position(position)
        engine.consider_move(played)   # optional
        engine.moves(5)
    """

    @abstractmethod
    def set_position(self, position: GamePosition) -> None:
        """Make `position` the working position, discarding prior analysis."""
        pass

    @abstractmethod
    def consider_move(self, move: Move) -> None:
        """Include `move` in the analysis of the working position."""
        pass

    @abstractmethod
    def moves(self, count: int) -> list[Move]:
        """
        Return up to `count` moves for the working position, best first.

        Returned moves carry their equity.
        """
        pass

    def get_name(self) -> str:
        """Get the engine's name/identifier."""
        return self.__class__.__name__


class RankedCandidateEngine(EvaluationEngine):
    """
    Ranks candidate moves recorded alongside a game.

    `analysis` maps (turn, player to move) to the candidates recorded for
    that position (for instance an export from a full move generator).
    Moves passed to consider_move join the pool and are ranked like any
    other.
    """

    def __init__(
        self,
        analysis: dict[AnalysisKey, list[Move]] | None = None,
        evaluator: MoveEvaluator | None = None,
    ):
        self.analysis = analysis or {}
        self.evaluator = evaluator or MoveEvaluator()
        self._position: GamePosition | None = None
        self._pool: list[Move] = []

    def set_position(self, position: GamePosition) -> None:
        self._position = position
        self._pool = list(self.analysis.get(analysis_key(position), []))

    def consider_move(self, move: Move) -> None:
        if move.is_a_move and move not in self._pool:
            self._pool.append(move)

    def moves(self, count: int) -> list[Move]:
        if self._position is None:
            raise RuntimeError("set_position() must be called before moves()")

        position = self._position
        scored = [
            move.with_equity(self.evaluator.evaluate(position, move))
            for move in self._pool
        ]
        # sorted() is stable: equal equities keep recorded order
        scored = sorted(scored, key=lambda m: -m.equity)
        return scored[:count]

"""
Heuristic Evaluator - Scores candidate moves for ranking.

A move's equity is:
- The points it scores
- Plus the value of the tiles it leaves on the rack

Leave values favour flexible racks (blanks, S, balanced vowels)
and penalise clunky ones (Q without U, duplicates).
Weights can be adjusted to tune the ranking.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..engine_core.board import BLANK

if TYPE_CHECKING:
    from ..engine_core.move import Move
    from ..engine_core.state import GamePosition


VOWELS = frozenset("AEIOU")


def _default_tile_values() -> dict[str, float]:
    return {
        BLANK: 24.0,
        "S": 8.0,
        "Z": 3.0,
        "X": 3.5,
        "E": 3.5,
        "R": 1.5,
        "H": 1.0,
        "A": 1.0,
        "N": 0.5,
        "L": 0.5,
        "D": 0.5,
        "T": 0.5,
        "I": -0.5,
        "O": -1.0,
        "U": -3.0,
        "G": -2.0,
        "B": -2.0,
        "F": -2.0,
        "W": -4.0,
        "V": -5.5,
        "Q": -7.0,
    }


@dataclass
class EvaluationWeights:
    """
    Weights for the move evaluator.

    Tile values are in points; letters not listed are worth 0.
    """
    score_weight: float = 1.0
    tile_values: dict[str, float] = field(default_factory=_default_tile_values)

    # Per repeated copy of a letter already on the rack
    duplicate_penalty: float = -3.0

    # Per tile of imbalance away from an even vowel/consonant split
    imbalance_penalty: float = -1.5

    # Q left without a U to play it with
    lonely_q_penalty: float = -5.0


def leave_after(rack: str, move: Move) -> str:
    """
    Tiles remaining on the rack after `move`.

    Blank designations (lowercase letters) consume a '?'.
    Tiles the rack does not hold are ignored.
    """
    remaining = list(rack)
    for letter in move.used_tiles():
        tile = BLANK if letter.islower() else letter
        if tile in remaining:
            remaining.remove(tile)
    return "".join(remaining)


class MoveEvaluator:
    """
    Evaluates moves using weighted heuristics.

    Used by RankedCandidateEngine:
    1. Collect candidate moves for a position
    2. Evaluate each move
    3. Rank by equity, best first
    """

    def __init__(self, weights: EvaluationWeights | None = None):
        self.weights = weights or EvaluationWeights()

    def evaluate(self, position: GamePosition, move: Move) -> float:
        """Equity of `move` for the player to move in `position`."""
        leave = leave_after(position.current_player.rack, move)
        return move.score * self.weights.score_weight + self.leave_value(leave)

    def leave_value(self, leave: str) -> float:
        """Value of keeping `leave` on the rack."""
        weights = self.weights
        value = 0.0
        seen: set[str] = set()

        for tile in leave:
            value += weights.tile_values.get(tile, 0.0)
            if tile in seen and tile != BLANK:
                value += weights.duplicate_penalty
            seen.add(tile)

        vowels = sum(1 for tile in leave if tile in VOWELS)
        consonants = sum(1 for tile in leave if tile != BLANK and tile not in VOWELS)
        value += abs(vowels - consonants) // 2 * weights.imbalance_penalty

        if "Q" in seen and "U" not in seen:
            value += weights.lonely_q_penalty

        return value

"""
Move System - Moves, their kinds, and coordinate notation.

A move is one of:
1. Place - tiles laid on the board
2. Exchange - tiles swapped with the bag
3. Pass
4. Nonmove - placeholder for "no move committed"

Coordinates use the usual crossword notation:
- Horizontal moves: row number then column letter ("8H")
- Vertical moves: column letter then row number ("H8")
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
import re
from typing import TYPE_CHECKING, Iterator

from .board import EMPTY_SQUARE, column_label

if TYPE_CHECKING:
    from .board import Board


class MoveAction(Enum):
    """Kinds of move."""
    PLACE = "place"
    EXCHANGE = "exchange"
    PASS = "pass"
    NONMOVE = "nonmove"


_HORIZONTAL_RE = re.compile(r"^(\d{1,2})([A-Za-z])$")
_VERTICAL_RE = re.compile(r"^([A-Za-z])(\d{1,2})$")


def parse_position(text: str) -> tuple[int, int, bool]:
    """
    Parse a coordinate string into (row, col, horizontal).

    Rows and columns are zero-based in the result.
    """
    text = text.strip()
    match = _HORIZONTAL_RE.match(text)
    if match:
        row, col, horizontal = int(match.group(1)), match.group(2), True
    else:
        match = _VERTICAL_RE.match(text)
        if not match:
            raise ValueError(f"invalid board coordinate: {text!r}")
        col, row, horizontal = match.group(1), int(match.group(2)), False

    if row < 1:
        raise ValueError(f"invalid board coordinate: {text!r}")
    return row - 1, ord(col.upper()) - ord("A"), horizontal


@dataclass(frozen=True)
class Move:
    """
    A move made (or proposed) from a position.

    Equality covers what was played and where; score and equity are
    annotations, so an engine's copy of a move equals the recorded one.
    """
    action: MoveAction
    tiles: str = ""
    start_row: int = 0
    start_col: int = 0
    horizontal: bool = True
    score: int = field(default=0, compare=False)
    equity: float = field(default=0.0, compare=False)

    @classmethod
    def place(cls, tiles: str, position: str, score: int = 0) -> Move:
        """Factory for a placement at a coordinate string."""
        if not tiles:
            raise ValueError("a placement needs at least one tile")
        row, col, horizontal = parse_position(position)
        return cls(
            action=MoveAction.PLACE,
            tiles=tiles,
            start_row=row,
            start_col=col,
            horizontal=horizontal,
            score=score,
        )

    @classmethod
    def exchange(cls, tiles: str) -> Move:
        """Factory for an exchange."""
        return cls(action=MoveAction.EXCHANGE, tiles=tiles)

    @classmethod
    def pass_turn(cls) -> Move:
        """Factory for a pass."""
        return cls(action=MoveAction.PASS)

    @classmethod
    def nonmove(cls) -> Move:
        """Factory for "nothing committed"."""
        return cls(action=MoveAction.NONMOVE)

    @property
    def is_a_move(self) -> bool:
        return self.action is not MoveAction.NONMOVE

    def with_equity(self, equity: float) -> Move:
        return replace(self, equity=equity)

    def squares(self) -> Iterator[tuple[int, int, str]]:
        """Yield (row, col, letter) for every square a placement covers."""
        if self.action is not MoveAction.PLACE:
            return
        for offset, letter in enumerate(self.tiles):
            if self.horizontal:
                yield self.start_row, self.start_col + offset, letter
            else:
                yield self.start_row + offset, self.start_col, letter

    def used_tiles(self) -> str:
        """Tiles that leave the rack: new letters placed, or letters exchanged."""
        if self.action is MoveAction.PLACE:
            return "".join(letter for letter in self.tiles if letter != EMPTY_SQUARE)
        if self.action is MoveAction.EXCHANGE:
            return self.tiles
        return ""

    def position_string(self) -> str:
        if self.action is not MoveAction.PLACE:
            return ""
        row, col = str(self.start_row + 1), column_label(self.start_col)
        return row + col if self.horizontal else col + row

    def pretty_tiles(self, board: Board | None = None) -> str:
        """
        Tiles for display.

        With a board, played-through squares show the board's letters
        grouped in parentheses ("RE(T)AIN"); without one they stay '.'.
        """
        if board is None or self.action is not MoveAction.PLACE:
            return self.tiles

        out: list[str] = []
        through = False
        for row, col, letter in self.squares():
            if letter == EMPTY_SQUARE:
                if not through:
                    out.append("(")
                    through = True
                out.append(board.letter_at(row, col) or EMPTY_SQUARE)
            else:
                if through:
                    out.append(")")
                    through = False
                out.append(letter)
        if through:
            out.append(")")
        return "".join(out)

    def detailed_string(self, board: Board | None = None) -> str:
        if self.action is MoveAction.PLACE:
            return f"{self.position_string()} {self.pretty_tiles(board)}"
        if self.action is MoveAction.EXCHANGE:
            return f"Exch. {self.tiles}"
        if self.action is MoveAction.PASS:
            return "Pass"
        return ""

"""
Game Record Schema - Pydantic models for JSON game records.

A record lists the players, then one entry per position: whose turn it
is, each player's rack and score, the board (optional; rebuilt from the
committed moves when omitted), the move played, and optionally the
candidate moves an analysis program proposed.

Example:
    {
      "layout": "standard",
      "players": [{"id": "p1", "name": "Ann"}, {"id": "p2", "name": "Bo"}],
      "positions": [
        {"turn": 1, "current_player": "p1",
         "racks": {"p1": "AEINRST", "p2": "EEIOQUV"},
         "scores": {"p1": 0, "p2": 0},
         "committed_move": {"action": "place", "tiles": "RETAINS",
                            "position": "8D", "score": 66}}
      ]
    }
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..engine_core.move import parse_position


class MoveKind(str, Enum):
    """Move kinds accepted in records."""
    PLACE = "place"
    EXCHANGE = "exchange"
    PASS = "pass"


class MoveRecord(BaseModel):
    """A move as written in a record."""
    action: MoveKind = Field(..., description="place, exchange or pass")
    tiles: str = Field(
        default="",
        description="Uppercase tiles, lowercase blanks, '.' for played-through squares",
    )
    position: Optional[str] = Field(default=None, description="Coordinate, e.g. '8H' or 'H8'")
    score: int = 0

    @field_validator("position")
    @classmethod
    def _check_position(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            parse_position(value)
        return value

    @field_validator("tiles")
    @classmethod
    def _check_tiles(cls, value: str) -> str:
        for letter in value:
            if not (letter.isalpha() or letter in ".?"):
                raise ValueError(f"invalid tile {letter!r}")
        return value

    @model_validator(mode="after")
    def _check_placement(self) -> "MoveRecord":
        if self.action == MoveKind.PLACE:
            if not self.position:
                raise ValueError("a placement needs a position")
            if not self.tiles:
                raise ValueError("a placement needs tiles")
        return self


class PlayerRecord(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class PositionRecord(BaseModel):
    """One position in the game history."""
    turn: int = Field(..., ge=1)
    current_player: str
    game_over: bool = False
    board: Optional[list[str]] = Field(
        default=None,
        description="One string per row, '.' for empty squares",
    )
    racks: dict[str, str] = Field(default_factory=dict)
    scores: dict[str, int] = Field(default_factory=dict)
    committed_move: Optional[MoveRecord] = None
    candidates: list[MoveRecord] = Field(default_factory=list)


class GameRecord(BaseModel):
    """A complete game record."""
    layout: str = "standard"
    players: list[PlayerRecord] = Field(..., min_length=1)
    positions: list[PositionRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_players(self) -> "GameRecord":
        ids = [p.id for p in self.players]
        if len(set(ids)) != len(ids):
            raise ValueError("player ids must be unique")

        known = set(ids)
        seen: set[tuple[int, str]] = set()
        for position in self.positions:
            if position.current_player not in known:
                raise ValueError(
                    f"turn {position.turn}: unknown current_player {position.current_player!r}"
                )
            for player_id in list(position.racks) + list(position.scores):
                if player_id not in known:
                    raise ValueError(f"turn {position.turn}: unknown player {player_id!r}")

            key = (position.turn, position.current_player)
            if key in seen:
                raise ValueError(
                    f"turn {position.turn}: {position.current_player!r} already has a position on this turn"
                )
            seen.add(key)
        return self

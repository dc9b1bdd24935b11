"""
Records - JSON game records.

Loading validates the record (pydantic) and builds engine_core objects.
Invalid records raise GameRecordError listing every problem found.
"""

from .schema import GameRecord, MoveKind, MoveRecord, PlayerRecord, PositionRecord
from .loader import GameRecordError, LoadedGame, build_game, load_game, parse_game, to_move

__all__ = [
    "GameRecord",
    "MoveKind",
    "MoveRecord",
    "PlayerRecord",
    "PositionRecord",
    "GameRecordError",
    "LoadedGame",
    "build_game",
    "load_game",
    "parse_game",
    "to_move",
]

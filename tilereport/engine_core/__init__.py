"""
Engine Core - Crossword game data model.

Provides:
1. BoardLayout / Board - geometry, premium squares, placed tiles
2. Move - placements, exchanges, passes
3. GamePosition / Game - per-turn snapshots and the game history

Move legality is not checked here; positions are taken as recorded.
"""

from .board import Board, BoardLayout, Premium, STANDARD_LAYOUT, LAYOUTS
from .move import Move, MoveAction, parse_position
from .state import Game, GamePosition, Player

__all__ = [
    "Board",
    "BoardLayout",
    "Premium",
    "STANDARD_LAYOUT",
    "LAYOUTS",
    "Move",
    "MoveAction",
    "parse_position",
    "Game",
    "GamePosition",
    "Player",
]

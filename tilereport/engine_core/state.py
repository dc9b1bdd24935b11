"""
Game State - Players, positions, and the game history.

Design principles:
- Immutable-friendly: all mutations return new state
- A position is a snapshot taken before its committed move is played
- Speculative previews (a candidate move laid on the board) are new
  positions; the history is never touched
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .board import Board, BoardLayout, STANDARD_LAYOUT
from .move import Move


@dataclass(frozen=True)
class Player:
    """A player's seat at one point in the game."""
    player_id: str
    name: str
    rack: str = ""
    score: int = 0

    def with_score(self, score: int) -> Player:
        return Player(player_id=self.player_id, name=self.name, rack=self.rack, score=score)


@dataclass
class GamePosition:
    """
    Complete game state at one turn.

    `committed_move` is the move actually played from this position.
    `move_made` is a display overlay: the move whose tiles should be
    drawn on top of the board (empty for a plain snapshot).
    """
    turn_number: int
    players: list[Player]
    board: Board = field(default_factory=Board)
    current_player_idx: int = 0
    committed_move: Move = field(default_factory=Move.nonmove)
    move_made: Move = field(default_factory=Move.nonmove)
    game_over: bool = False

    @property
    def current_player(self) -> Player:
        """Get the player to move."""
        return self.players[self.current_player_idx]

    @property
    def layout(self) -> BoardLayout:
        return self.board.layout

    def get_player(self, player_id: str) -> Player | None:
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def with_move_made(self, move: Move) -> GamePosition:
        """Return new position previewing `move` on the board."""
        return self._copy_with(move_made=move)

    def reset_move_made(self) -> GamePosition:
        """Return new position with no move overlay."""
        return self._copy_with(move_made=Move.nonmove())

    def board_with_move_made(self) -> Board:
        """The board as it looks with the overlay move laid down."""
        return self.board.with_move(self.move_made)

    def endgame_adjusted_scores(self) -> list[Player]:
        """
        Players ranked by score, best first.

        Once the game is over, racks count: a player who went out gains
        the value of every other rack, and anyone still holding tiles
        loses the value of their own. Ties keep seating order.
        """
        players = list(self.players)

        if self.game_over:
            layout = self.layout
            rack_values = {p.player_id: layout.rack_value(p.rack) for p in players}
            leftover = sum(rack_values.values())
            adjusted = []
            for p in players:
                if p.rack:
                    adjusted.append(p.with_score(p.score - rack_values[p.player_id]))
                else:
                    adjusted.append(p.with_score(p.score + leftover))
            players = adjusted

        return sorted(players, key=lambda p: -p.score)

    def _copy_with(self, **kwargs) -> GamePosition:
        """Create a copy with some fields replaced."""
        return GamePosition(
            turn_number=kwargs.get("turn_number", self.turn_number),
            players=kwargs.get("players", self.players),
            board=kwargs.get("board", self.board),
            current_player_idx=kwargs.get("current_player_idx", self.current_player_idx),
            committed_move=kwargs.get("committed_move", self.committed_move),
            move_made=kwargs.get("move_made", self.move_made),
            game_over=kwargs.get("game_over", self.game_over),
        )


@dataclass
class Game:
    """A finished (or in-progress) game: its layout, seats and history."""
    players: list[Player]
    history: list[GamePosition] = field(default_factory=list)
    board_layout: BoardLayout = STANDARD_LAYOUT

    @property
    def current_position(self) -> GamePosition | None:
        return self.history[-1] if self.history else None

    @property
    def num_players(self) -> int:
        return len(self.players)

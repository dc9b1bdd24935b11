"""
Game Record Loader - Turns validated records into engine_core objects.

Boards missing from a record are rebuilt by replaying the committed
moves of earlier positions onto an empty board.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from pydantic import ValidationError

from ..bots.engine import AnalysisKey
from ..engine_core.board import LAYOUTS, Board
from ..engine_core.move import Move
from ..engine_core.state import Game, GamePosition, Player
from .schema import GameRecord, MoveKind, MoveRecord

logger = structlog.get_logger(__name__)


class GameRecordError(Exception):
    """Raised when a game record cannot be loaded."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Game record invalid with {len(errors)} error(s): " + "; ".join(errors))


@dataclass
class LoadedGame:
    """A game plus the candidate moves recorded for each (turn, player to move)."""
    game: Game
    analysis: dict[AnalysisKey, list[Move]] = field(default_factory=dict)

    @property
    def has_analysis(self) -> bool:
        return any(self.analysis.values())


def to_move(record: MoveRecord) -> Move:
    if record.action == MoveKind.PLACE:
        return Move.place(record.tiles, record.position, score=record.score)
    if record.action == MoveKind.EXCHANGE:
        return Move.exchange(record.tiles)
    return Move.pass_turn()


def build_game(record: GameRecord) -> LoadedGame:
    """Build a Game from a validated record."""
    layout = LAYOUTS.get(record.layout)
    if layout is None:
        raise GameRecordError([f"unknown layout {record.layout!r}"])

    seats = [Player(player_id=p.id, name=p.name) for p in record.players]
    seat_index = {p.player_id: i for i, p in enumerate(seats)}

    errors: list[str] = []
    history: list[GamePosition] = []
    analysis: dict[AnalysisKey, list[Move]] = {}
    board = Board(layout=layout)

    for entry in record.positions:
        try:
            if entry.board is not None:
                board = Board.from_rows(layout, entry.board)

            players = [
                Player(
                    player_id=seat.player_id,
                    name=seat.name,
                    rack=entry.racks.get(seat.player_id, ""),
                    score=entry.scores.get(seat.player_id, 0),
                )
                for seat in seats
            ]
            committed = to_move(entry.committed_move) if entry.committed_move else Move.nonmove()

            history.append(
                GamePosition(
                    turn_number=entry.turn,
                    players=players,
                    board=board,
                    current_player_idx=seat_index[entry.current_player],
                    committed_move=committed,
                    game_over=entry.game_over,
                )
            )
            if entry.candidates:
                candidates = [to_move(c) for c in entry.candidates]
                for candidate in candidates:
                    board.with_move(candidate)
                analysis[(entry.turn, entry.current_player)] = candidates

            board = board.with_move(committed)
        except ValueError as exc:
            errors.append(f"turn {entry.turn}: {exc}")

    if errors:
        raise GameRecordError(errors)

    game = Game(players=seats, history=history, board_layout=layout)
    logger.debug(
        "game_loaded",
        players=len(seats),
        positions=len(history),
        analysed_positions=len(analysis),
    )
    return LoadedGame(game=game, analysis=analysis)


def parse_game(text: str | bytes) -> LoadedGame:
    """Validate and build a game from JSON text."""
    try:
        record = GameRecord.model_validate_json(text)
    except ValidationError as exc:
        raise GameRecordError([
            "{}: {}".format(".".join(str(part) for part in err["loc"]) or "record", err["msg"])
            for err in exc.errors()
        ]) from exc
    return build_game(record)


def load_game(path: Path | str) -> LoadedGame:
    """Load a game record file. Raises OSError if it cannot be read."""
    return parse_game(Path(path).read_text(encoding="utf-8"))

"""
Pytest fixtures for Tilereport tests.
"""

import sys

import pytest
import structlog
from PIL import Image

from ..bots.engine import EvaluationEngine
from ..config import Settings
from ..engine_core.board import Board, STANDARD_LAYOUT
from ..engine_core.move import Move
from ..engine_core.state import Game, GamePosition, Player
from ..imaging.board_image import BoardRenderer
from .. import log_config


@pytest.fixture(autouse=True)
def _isolate_structlog(monkeypatch):
    """
    Keep structlog from holding on to a per-test captured stderr.

    setup_logging() binds the logger factory to the sys.stderr of the moment
    and caches loggers on first use; pytest closes that stream after each
    test. Resolve stderr lazily and disable caching while under test.
    """
    real_setup = log_config.setup_logging

    def setup_logging(settings=None):
        real_setup(settings)
        structlog.configure(
            logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
            cache_logger_on_first_use=False,
        )

    monkeypatch.setattr(log_config, "setup_logging", setup_logging)
    monkeypatch.setattr("tilereport.cli.setup_logging", setup_logging)
    yield
    structlog.reset_defaults()


class ScriptedEngine(EvaluationEngine):
    """Engine returning a fixed candidate list, recording every call."""

    def __init__(self, candidates: list[Move] | None = None):
        self.candidates = candidates or []
        self.calls: list[tuple] = []

    def set_position(self, position):
        self.calls.append(("set_position", position.turn_number))

    def consider_move(self, move):
        self.calls.append(("consider_move", move))

    def moves(self, count):
        self.calls.append(("moves", count))
        return list(self.candidates[:count])


class FakeBoardRenderer(BoardRenderer):
    """
    Renderer producing tiny blank images.

    Saves fail with OSError for any filename listed in `fail_on`.
    """

    def __init__(self, fail_on: set[str] | None = None):
        self.fail_on = fail_on or set()
        self.rendered: list[GamePosition] = []
        self.saved: list[str] = []

    def render(self, position, size):
        self.rendered.append(position)
        return Image.new("RGB", (4, 4), "white")

    def save(self, image, path):
        if path.name in self.fail_on:
            raise OSError(28, "No space left on device")
        super().save(image, path)
        self.saved.append(path.name)


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(
        env="development",
        log_level="INFO",
        log_format="console",
        picture_size=500,
        moves_to_show=5,
        allowed_origins="*",
    )


@pytest.fixture
def players() -> list[Player]:
    return [
        Player(player_id="ann", name="Ann", rack="AEINRST", score=120),
        Player(player_id="bo", name="Bo", rack="EEIOQUV", score=150),
    ]


@pytest.fixture
def opening_board() -> Board:
    """Board with RETAINS played through the centre."""
    return Board(layout=STANDARD_LAYOUT).with_move(Move.place("RETAINS", "8D", score=66))


@pytest.fixture
def position(players, opening_board) -> GamePosition:
    """Ann to move on turn 3; she played QUOTE at G7."""
    return GamePosition(
        turn_number=3,
        players=players,
        board=opening_board,
        current_player_idx=0,
        committed_move=Move.place("QUOTE", "G7", score=28),
    )


@pytest.fixture
def final_position(players, opening_board) -> GamePosition:
    """Game over: Ann went out, Bo is left holding tiles."""
    return GamePosition(
        turn_number=12,
        players=[
            Player(player_id="ann", name="Ann", rack="", score=300),
            Player(player_id="bo", name="Bo", rack="QV", score=310),
        ],
        board=opening_board,
        current_player_idx=1,
        game_over=True,
    )


@pytest.fixture
def game(players, position, final_position) -> Game:
    return Game(players=players, history=[position, final_position], board_layout=STANDARD_LAYOUT)


@pytest.fixture
def candidates() -> list[Move]:
    """Five engine candidates, best first."""
    return [
        Move.place("QUOTE", "9A", score=40),
        Move.place("QUITE", "9A", score=38),
        Move.place("QUIET", "C3", score=36),
        Move.exchange("QV"),
        Move.place("TOQUE", "F10", score=30),
    ]


@pytest.fixture
def fake_renderer() -> FakeBoardRenderer:
    return FakeBoardRenderer()


@pytest.fixture
def sample_record() -> dict:
    """A small game record as it would appear in a JSON file."""
    return {
        "layout": "standard",
        "players": [{"id": "ann", "name": "Ann"}, {"id": "bo", "name": "Bo"}],
        "positions": [
            {
                "turn": 1,
                "current_player": "ann",
                "racks": {"ann": "AEINRST", "bo": "EEIOQUV"},
                "scores": {"ann": 0, "bo": 0},
                "committed_move": {"action": "place", "tiles": "RETAINS", "position": "8D", "score": 66},
                "candidates": [
                    {"action": "place", "tiles": "STAINER", "position": "8H", "score": 66},
                    {"action": "place", "tiles": "RETAINS", "position": "8D", "score": 66},
                    {"action": "exchange", "tiles": "AEI"},
                ],
            },
            {
                "turn": 2,
                "current_player": "bo",
                "racks": {"ann": "DEGLNOU", "bo": "EEIOQUV"},
                "scores": {"ann": 66, "bo": 0},
                "committed_move": {"action": "exchange", "tiles": "QV"},
            },
            {
                "turn": 3,
                "current_player": "ann",
                "game_over": True,
                "racks": {"ann": "", "bo": "EEIO"},
                "scores": {"ann": 66, "bo": 0},
            },
        ],
    }

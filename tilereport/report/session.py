"""
Report Session - Owns one report document and drives its rendering.

LIFECYCLE:
1. Construct once per run with an output destination and image flag
2. report_game() (or report_header() + report_position() per position)
3. close()

OUTPUT:
- Image mode: `output` is a directory; the document is output/index.html
  and board images sit beside it
- Otherwise: `output` is the document path itself

The document stream opens on first use, at most once. If it cannot be
opened the failure is recorded once and every later write is a no-op,
so the run still completes.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Callable, TextIO

import structlog

from ..config import Settings, get_settings
from .errors import OutputOpenFailure, ReportError, ReportIssue
from .markup import HTML_FOOTER, HTML_HEADER, POSITION_SEPARATOR
from .naming import AssetNamer
from .renderer import PositionRenderer

if TYPE_CHECKING:
    from ..bots.engine import EvaluationEngine
    from ..engine_core.state import Game, GamePosition
    from ..imaging.board_image import BoardRenderer

logger = structlog.get_logger(__name__)

INDEX_FILENAME = "index.html"


class ReportSession:
    """
    A single report run.

    Usage:
        with ReportSession("out/", generate_images=True) as session:
            session.report_game(game, engine)
        for issue in session.issues:
            ...
    """

    def __init__(
        self,
        output: Path | str,
        generate_images: bool = False,
        board_renderer: BoardRenderer | None = None,
        on_issue: Callable[[ReportIssue], None] | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()

        self.output = Path(output)
        self.generate_images = generate_images
        self.on_issue = on_issue
        self.issues: list[ReportIssue] = []
        self.positions_reported = 0

        self._stream: TextIO | None = None
        self._open_failed = False

        if generate_images and board_renderer is None:
            from ..imaging.board_image import PillowBoardRenderer
            board_renderer = PillowBoardRenderer()

        self.namer = AssetNamer(self.output)
        self.renderer = PositionRenderer(
            write=self._write,
            namer=self.namer,
            generate_images=generate_images,
            board_renderer=board_renderer,
            on_error=self._record_error,
            picture_size=settings.picture_dimensions,
            moves_to_show=settings.moves_to_show,
        )

    @property
    def index_path(self) -> Path:
        """Where the report document is written."""
        if self.generate_images:
            return self.namer.path_for(INDEX_FILENAME)
        return self.output

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    # =========================================================================
    # Reporting
    # =========================================================================

    def report_header(self, game: Game) -> None:
        """Write the document preamble and the board key."""
        self._open_index()
        self._write(HTML_HEADER)
        self._write(game.board_layout.html_key())

    def report_game(self, game: Game, engine: EvaluationEngine | None = None) -> None:
        """Write the header, then every position in the game's history, in order."""
        self.report_header(game)

        for position in game.history:
            self.report_position(position, engine)

        logger.info(
            "game_reported",
            path=str(self.index_path),
            positions=len(game.history),
            images=self.generate_images,
            analysed=engine is not None,
            issues=len(self.issues),
        )

    def report_position(self, position: GamePosition, engine: EvaluationEngine | None = None) -> None:
        """Write one position's section followed by a blank-line separator."""
        self._open_index()
        self.renderer.render(position, engine)
        self._write(POSITION_SEPARATOR)
        self.positions_reported += 1

    def close(self) -> None:
        """Finish the document and release the stream."""
        if self._stream is None:
            return
        self._stream.write(HTML_FOOTER)
        self._stream.close()
        self._stream = None
        logger.debug("report_closed", path=str(self.index_path))

    def __enter__(self) -> ReportSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Stream and issues
    # =========================================================================

    def _open_index(self) -> None:
        if self._stream is not None or self._open_failed:
            return

        path = self.index_path
        try:
            if self.generate_images:
                self.output.mkdir(parents=True, exist_ok=True)
            self._stream = open(path, "w", encoding="utf-8")
        except OSError as exc:
            self._open_failed = True
            self._record_error(OutputOpenFailure(path, exc))
            return

        logger.debug("report_opened", path=str(path))

    def _write(self, text: str) -> None:
        if self._stream is None:
            return
        self._stream.write(text)

    def _record_error(self, error: ReportError) -> None:
        issue = ReportIssue.from_error(error)
        self.issues.append(issue)
        logger.error(
            issue.kind.value,
            path=issue.path,
            turn=issue.turn_number,
            error=issue.detail,
        )
        if self.on_issue is not None:
            self.on_issue(issue)

"""
Position Renderer - Writes one position's section of the report.

Sections, in order:
1. Header ("Game over." or "<player>: Turn <n>")
2. Board (linked image in image mode, inline HTML table otherwise)
3. Score table, in end-game-adjusted ranking order
4. Move list (only with an engine, and only before the game is over)

Image failures are reported and the affected link is left out;
rendering always carries on.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable

import structlog

from ..engine_core.move import MoveAction
from .errors import AssetRenderFailure, AssetWriteFailure, ReportError
from .markup import (
    CURRENT_PLAYER_MARKER,
    OTHER_PLAYER_MARKER,
    PLAYED_MOVE_MARKER,
    image_html,
    link_html,
    sanitize_letters,
    title_html,
)
from .naming import AssetNamer, RenderedAsset
from .reconciler import MOVES_TO_SHOW, MoveReconciler, ReconciledMoveList

if TYPE_CHECKING:
    from ..bots.engine import EvaluationEngine
    from ..engine_core.move import Move
    from ..engine_core.state import GamePosition
    from ..imaging.board_image import BoardRenderer

logger = structlog.get_logger(__name__)

PICTURE_SIZE = (500, 500)
FINAL_BOARD_TILE_SIZE = 45
BOARD_TILE_SIZE = 25


def header_text(position: GamePosition) -> str:
    """Plain-text section header for a position."""
    if position.game_over:
        return "Game over."
    return f"{position.current_player.name}: Turn {position.turn_number}"


class PositionRenderer:
    """
    Renders positions through a write callback.

    Args:
        write: Appends text to the report document
        namer: Names image assets (needed in image mode)
        generate_images: Whether to draw board images
        board_renderer: Draws board images (needed in image mode)
        on_error: Receives contained failures
    """

    def __init__(
        self,
        write: Callable[[str], None],
        namer: AssetNamer,
        generate_images: bool = False,
        board_renderer: BoardRenderer | None = None,
        on_error: Callable[[ReportError], None] | None = None,
        picture_size: tuple[int, int] = PICTURE_SIZE,
        moves_to_show: int = MOVES_TO_SHOW,
    ):
        if generate_images and board_renderer is None:
            raise ValueError("image mode needs a board renderer")

        self.write = write
        self.namer = namer
        self.generate_images = generate_images
        self.board_renderer = board_renderer
        self.on_error = on_error
        self.picture_size = picture_size
        self.moves_to_show = moves_to_show
        self.reconciler = MoveReconciler(moves_to_show)

    def render(self, position: GamePosition, engine: EvaluationEngine | None = None) -> None:
        """Write the full section for `position`."""
        self._render_board(position)
        self._render_scores(position)

        if engine is not None and not position.game_over:
            self._render_moves(position, engine)

    # =========================================================================
    # Header and board
    # =========================================================================

    def _render_board(self, position: GamePosition) -> None:
        title = title_html(sanitize_letters(header_text(position)))

        if not self.generate_images:
            self.write(title + "\n")
            tile_size = FINAL_BOARD_TILE_SIZE if position.game_over else BOARD_TILE_SIZE
            self.write(position.board.html_board(tile_size) + "\n")
            return

        filename = self.namer.position_image(position.turn_number, position.current_player.name)
        asset = self._write_image(position.reset_move_made(), filename)

        if asset.saved:
            self.write(link_html(filename, title) + "\n")
            self.write(image_html(filename) + "\n")
        else:
            self.write(title + "\n")

    # =========================================================================
    # Score table
    # =========================================================================

    def _render_scores(self, position: GamePosition) -> None:
        current_id = position.current_player.player_id

        self.write("<table cellspacing=6>\n")
        for player in position.endgame_adjusted_scores():
            marker = CURRENT_PLAYER_MARKER if player.player_id == current_id else OTHER_PLAYER_MARKER
            self.write(
                f"<tr><td>{marker}</td>"
                f"<td>{sanitize_letters(player.name)}</td>"
                f"<td>{sanitize_letters(player.rack)}</td>"
                f"<td>{player.score}</td></tr>\n"
            )
        self.write("</table>\n")

    # =========================================================================
    # Move list
    # =========================================================================

    def ranked_moves(self, position: GamePosition, engine: EvaluationEngine) -> ReconciledMoveList:
        """Ask the engine for its top moves and make sure the played move is among them."""
        engine.set_position(position)

        played = position.committed_move
        if played.is_a_move:
            engine.consider_move(played)

        candidates = engine.moves(self.moves_to_show)
        return self.reconciler.reconcile(candidates, played)

    def _render_moves(self, position: GamePosition, engine: EvaluationEngine) -> None:
        ranking = self.ranked_moves(position, engine)

        logger.debug(
            "moves_ranked",
            turn=position.turn_number,
            shown=len(ranking),
            played_index=ranking.played_index,
            played_was_candidate=ranking.played_was_candidate,
        )

        self.write("<ol>\n")
        for move in ranking:
            item = self._move_item(position, move)
            if ranking.is_played(move):
                item += PLAYED_MOVE_MARKER
            if item:
                self.write(f"<li>{item}</li>\n")
        self.write("</ol>\n")

    def _move_item(self, position: GamePosition, move: Move) -> str:
        detail = sanitize_letters(move.detailed_string(position.board))

        if move.action is MoveAction.PLACE:
            if self.generate_images:
                filename = self.namer.move_image(
                    position.turn_number, position.current_player.name, move
                )
                asset = self._write_image(position.with_move_made(move), filename)
                if asset.saved:
                    return f"{link_html(filename, detail)} {move.score}"
            return f"{detail} {move.score}"
        elif move.action is MoveAction.EXCHANGE:
            return detail
        elif move.action is MoveAction.PASS:
            return detail
        elif move.action is MoveAction.NONMOVE:
            return ""
        raise ValueError(f"unhandled move action: {move.action}")

    # =========================================================================
    # Images
    # =========================================================================

    def _write_image(self, snapshot: GamePosition, filename: str) -> RenderedAsset:
        """Draw `snapshot` and save it under `filename`. Failures are reported, not raised."""
        path = self.namer.path_for(filename)

        try:
            image = self.board_renderer.render(snapshot, self.picture_size)
        except ValueError as exc:
            # e.g. a candidate that runs off the board
            return self._failed_asset(filename, AssetRenderFailure(path, exc, turn_number=snapshot.turn_number))

        try:
            self.board_renderer.save(image, path)
        except OSError as exc:
            return self._failed_asset(filename, AssetWriteFailure(path, exc, turn_number=snapshot.turn_number))

        logger.debug("image_saved", path=str(path))
        return RenderedAsset(filename=filename, path=path, saved=True)

    def _failed_asset(self, filename: str, error: ReportError) -> RenderedAsset:
        if self.on_error is not None:
            self.on_error(error)
        return RenderedAsset(filename=filename, path=error.path, saved=False, error=str(error))

"""Board image rendering.

Draws a position's board as a square PNG: premium squares in the same
colours as the HTML key, tiles with their letter and face value, and the
position's move-made overlay highlighted so a candidate move stands out.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
from PIL import Image, ImageDraw, ImageFont

from ..engine_core.board import BLANK_TEXT_COLOR, TILE_COLOR, TILE_TEXT_COLOR, column_label

if TYPE_CHECKING:
    from ..engine_core.state import GamePosition

logger = structlog.get_logger(__name__)

BG_COLOR = "#ffffff"
GRID_COLOR = "#7a7262"
LABEL_COLOR = "#555555"
HIGHLIGHT_COLOR = "#ffe14d"
HIGHLIGHT_OUTLINE = "#c08a00"


def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a TrueType font, falling back to PIL default."""
    for name in [
        "DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "arialbd.ttf",
        "Arial Bold.ttf",
        "C:/Windows/Fonts/arialbd.ttf",
    ]:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buf = io.BytesIO()
    image.save(buf, format="PNG", optimize=True)
    return buf.getvalue()


class BoardRenderer(ABC):
    """
    Abstract base class for board renderers.

    render() must not modify the position it is given.
    """

    @abstractmethod
    def render(self, position: GamePosition, size: tuple[int, int]) -> Image.Image:
        """Draw the position's board (with its move-made overlay) at `size`."""
        pass

    def save(self, image: Image.Image, path: Path | str) -> None:
        """Write `image` as a PNG. Raises OSError if the file cannot be written."""
        Path(path).write_bytes(encode_png(image))


class PillowBoardRenderer(BoardRenderer):
    """Draws boards with Pillow."""

    def __init__(self, show_coordinates: bool = True):
        self.show_coordinates = show_coordinates

    def render(self, position: GamePosition, size: tuple[int, int]) -> Image.Image:
        width, height = size
        layout = position.layout
        board = position.board_with_move_made()
        highlighted = {
            (row, col)
            for row, col, letter in position.move_made.squares()
            if letter != "."
        }

        margin = 0
        if self.show_coordinates:
            margin = max(12, min(width, height) // (max(layout.width, layout.height) + 1))
        cell = max(1, min((width - margin) // layout.width, (height - margin) // layout.height))
        origin_x = margin + (width - margin - cell * layout.width) // 2
        origin_y = margin + (height - margin - cell * layout.height) // 2

        letter_font = _load_font(max(8, int(cell * 0.6)))
        value_font = _load_font(max(6, int(cell * 0.25)))
        label_font = _load_font(max(6, int(margin * 0.55))) if margin else None

        img = Image.new("RGB", (width, height), BG_COLOR)
        draw = ImageDraw.Draw(img)

        for row in range(layout.height):
            for col in range(layout.width):
                x0 = origin_x + col * cell
                y0 = origin_y + row * cell
                box = [x0, y0, x0 + cell - 1, y0 + cell - 1]
                letter = board.letter_at(row, col)

                if letter is None:
                    draw.rectangle(box, fill=layout.premium_at(row, col).color, outline=GRID_COLOR)
                    continue

                if (row, col) in highlighted:
                    draw.rectangle(box, fill=HIGHLIGHT_COLOR, outline=HIGHLIGHT_OUTLINE, width=2)
                else:
                    draw.rectangle(box, fill=TILE_COLOR, outline=GRID_COLOR)

                text = letter.upper()
                fill = BLANK_TEXT_COLOR if letter.islower() else TILE_TEXT_COLOR
                bb = draw.textbbox((0, 0), text, font=letter_font)
                draw.text(
                    (x0 + (cell - (bb[2] - bb[0])) // 2, y0 + (cell - (bb[3] - bb[1])) // 2 - bb[1] // 2),
                    text,
                    font=letter_font,
                    fill=fill,
                )

                value = layout.tile_value(letter)
                if value:
                    draw.text(
                        (x0 + int(cell * 0.68), y0 + int(cell * 0.62)),
                        str(value),
                        font=value_font,
                        fill=TILE_TEXT_COLOR,
                    )

        if label_font is not None:
            self._draw_labels(draw, label_font, layout.width, layout.height, origin_x, origin_y, cell)

        logger.debug(
            "board_rendered",
            turn=position.turn_number,
            size=f"{width}x{height}",
            highlighted=len(highlighted),
        )
        return img

    def _draw_labels(
        self,
        draw: ImageDraw.ImageDraw,
        font: ImageFont.FreeTypeFont | ImageFont.ImageFont,
        columns: int,
        rows: int,
        origin_x: int,
        origin_y: int,
        cell: int,
    ) -> None:
        """Column letters along the top, row numbers down the left."""
        for col in range(columns):
            text = column_label(col)
            bb = draw.textbbox((0, 0), text, font=font)
            draw.text(
                (origin_x + col * cell + (cell - (bb[2] - bb[0])) // 2, origin_y - (bb[3] - bb[1]) - 4),
                text,
                font=font,
                fill=LABEL_COLOR,
            )
        for row in range(rows):
            text = str(row + 1)
            bb = draw.textbbox((0, 0), text, font=font)
            draw.text(
                (origin_x - (bb[2] - bb[0]) - 4, origin_y + row * cell + (cell - (bb[3] - bb[1])) // 2),
                text,
                font=font,
                fill=LABEL_COLOR,
            )

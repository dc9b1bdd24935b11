"""
Board - Layout (premium squares, letter values) and placed tiles.

The layout is the static geometry of a crossword board.
The board is an immutable snapshot of which tiles sit where:
- Uppercase letters are ordinary tiles
- Lowercase letters are blanks designated as that letter

All "mutations" return a new Board.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from html import escape
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .move import Move


EMPTY_SQUARE = "."
BLANK = "?"


class Premium(Enum):
    """Premium square types, keyed by their layout code."""
    NONE = "."
    DOUBLE_LETTER = "d"
    TRIPLE_LETTER = "t"
    DOUBLE_WORD = "D"
    TRIPLE_WORD = "T"

    @property
    def label(self) -> str:
        return _PREMIUM_LABELS[self]

    @property
    def color(self) -> str:
        return _PREMIUM_COLORS[self]


_PREMIUM_LABELS = {
    Premium.NONE: "Plain square",
    Premium.DOUBLE_LETTER: "Double letter score",
    Premium.TRIPLE_LETTER: "Triple letter score",
    Premium.DOUBLE_WORD: "Double word score",
    Premium.TRIPLE_WORD: "Triple word score",
}

# Shared by the HTML board and the image renderer
_PREMIUM_COLORS = {
    Premium.NONE: "#e6e0c8",
    Premium.DOUBLE_LETTER: "#a8d8ea",
    Premium.TRIPLE_LETTER: "#3c7fb1",
    Premium.DOUBLE_WORD: "#f4b6b6",
    Premium.TRIPLE_WORD: "#d9443b",
}

TILE_COLOR = "#f5d79e"
TILE_TEXT_COLOR = "#222222"
BLANK_TEXT_COLOR = "#b03030"


ENGLISH_LETTER_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2, "H": 4, "I": 1,
    "J": 8, "K": 5, "L": 1, "M": 3, "N": 1, "O": 1, "P": 3, "Q": 10, "R": 1,
    "S": 1, "T": 1, "U": 1, "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10,
    BLANK: 0,
}


@dataclass(frozen=True)
class BoardLayout:
    """
    Static board geometry.

    `premiums` is one string per row, one layout code per column
    (see Premium for the codes).
    """
    name: str
    premiums: tuple[str, ...]
    letter_values: dict[str, int] = field(default_factory=lambda: dict(ENGLISH_LETTER_VALUES))

    def __post_init__(self):
        widths = {len(row) for row in self.premiums}
        if not self.premiums or len(widths) != 1:
            raise ValueError(f"layout {self.name!r} must have rows of equal, non-zero width")

    @property
    def height(self) -> int:
        return len(self.premiums)

    @property
    def width(self) -> int:
        return len(self.premiums[0])

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def premium_at(self, row: int, col: int) -> Premium:
        return Premium(self.premiums[row][col])

    def tile_value(self, letter: str) -> int:
        """Face value of a tile. Blanks (lowercase or '?') are worth nothing."""
        if letter == BLANK or letter.islower():
            return 0
        return self.letter_values.get(letter, 0)

    def rack_value(self, rack: str) -> int:
        return sum(self.tile_value(letter) for letter in rack)

    def html_key(self) -> str:
        """
        Geometry descriptor written once at the top of a report:
        board dimensions and a colour legend for the premium squares.
        """
        lines = [f"<p>Board: {escape(self.name)}, {self.width} &times; {self.height}</p>"]
        lines.append("<table cellspacing=4>")
        for premium in Premium:
            if premium is Premium.NONE:
                continue
            lines.append(
                f'<tr><td bgcolor="{premium.color}" width=20>&nbsp;</td>'
                f"<td>{premium.label}</td></tr>"
            )
        lines.append("</table>")
        return "\n".join(lines) + "\n\n"


STANDARD_LAYOUT = BoardLayout(
    name="standard",
    premiums=(
        "T..d...T...d..T",
        ".D...t...t...D.",
        "..D...d.d...D..",
        "d..D...d...D..d",
        "....D.....D....",
        ".t...t...t...t.",
        "..d...d.d...d..",
        "T..d...D...d..T",
        "..d...d.d...d..",
        ".t...t...t...t.",
        "....D.....D....",
        "d..D...d...D..d",
        "..D...d.d...D..",
        ".D...t...t...D.",
        "T..d...T...d..T",
    ),
)

LAYOUTS: dict[str, BoardLayout] = {
    STANDARD_LAYOUT.name: STANDARD_LAYOUT,
}


def column_label(col: int) -> str:
    """Column letter used in coordinates (0 -> 'A')."""
    return chr(ord("A") + col)


@dataclass(frozen=True)
class Board:
    """
    Tiles placed on a layout.

    `tiles` maps (row, col) to a single letter.
    """
    layout: BoardLayout = STANDARD_LAYOUT
    tiles: dict[tuple[int, int], str] = field(default_factory=dict)

    @classmethod
    def from_rows(cls, layout: BoardLayout, rows: Iterable[str]) -> Board:
        """Build a board from one string per row, '.' or ' ' marking empty squares."""
        rows = list(rows)
        if len(rows) != layout.height:
            raise ValueError(f"expected {layout.height} board rows, got {len(rows)}")

        tiles: dict[tuple[int, int], str] = {}
        for row, text in enumerate(rows):
            if len(text) != layout.width:
                raise ValueError(
                    f"board row {row + 1} has {len(text)} squares, expected {layout.width}"
                )
            for col, letter in enumerate(text):
                if letter in (EMPTY_SQUARE, " "):
                    continue
                if not letter.isalpha():
                    raise ValueError(f"invalid tile {letter!r} at row {row + 1}")
                tiles[(row, col)] = letter
        return cls(layout=layout, tiles=tiles)

    @property
    def is_empty(self) -> bool:
        return not self.tiles

    def letter_at(self, row: int, col: int) -> str | None:
        return self.tiles.get((row, col))

    def to_rows(self) -> list[str]:
        return [
            "".join(self.tiles.get((row, col), EMPTY_SQUARE) for col in range(self.layout.width))
            for row in range(self.layout.height)
        ]

    def with_move(self, move: Move) -> Board:
        """Return new board with a placement's new tiles laid down."""
        from .move import MoveAction

        if move.action is not MoveAction.PLACE:
            return self

        new_tiles = self.tiles.copy()
        for row, col, letter in move.squares():
            if not self.layout.contains(row, col):
                raise ValueError(f"move {move.position_string()} runs off the board")
            if letter == EMPTY_SQUARE:
                continue
            new_tiles[(row, col)] = letter
        return Board(layout=self.layout, tiles=new_tiles)

    def html_board(self, tile_size: int) -> str:
        """Inline HTML table of the board, each square `tile_size` pixels wide."""
        layout = self.layout
        cell = f"width={tile_size} height={tile_size} align=center"

        lines = ["<table cellspacing=1 cellpadding=0 border=0>"]
        header = "".join(f"<th>{column_label(col)}</th>" for col in range(layout.width))
        lines.append(f"<tr><th></th>{header}</tr>")

        for row in range(layout.height):
            cells = [f"<th>{row + 1}</th>"]
            for col in range(layout.width):
                letter = self.tiles.get((row, col))
                if letter is None:
                    color = layout.premium_at(row, col).color
                    cells.append(f'<td bgcolor="{color}" {cell}>&nbsp;</td>')
                else:
                    text = escape(letter.upper())
                    if letter.islower():
                        text = f'<font color="{BLANK_TEXT_COLOR}">{text}</font>'
                    cells.append(f'<td bgcolor="{TILE_COLOR}" {cell}><b>{text}</b></td>')
            lines.append("<tr>" + "".join(cells) + "</tr>")

        lines.append("</table>")
        return "\n".join(lines)

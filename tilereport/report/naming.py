"""
Asset Naming - Deterministic filenames for board images.

Names are relative to the report's output directory, so the report can
link them directly:
- Position image: "<turn>-<player>-position.png"
- Move image:     "<turn>-<player>-<tiles>-<coordinates>.png"

The same inputs always give the same name. Two moves on the same turn
that differ in tiles or placement always get different names.
"""

from __future__ import annotations
from dataclasses import dataclass
import hashlib
from pathlib import Path
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine_core.move import Move


_UNSAFE_NAME_RE = re.compile(r"[^\w.-]+")


def player_slug(name: str) -> str:
    """
    Filename- and URL-safe form of a player name.

    Names that had to be changed get a short hash of the original, so
    "A B" and "A_B" never share a slug.
    """
    slug = _UNSAFE_NAME_RE.sub("_", name.strip()).strip("_") or "player"
    if slug != name:
        digest = hashlib.sha256(name.encode("utf-8")).hexdigest()[:8]
        slug = f"{slug}~{digest}"
    return slug


def tile_signature(tiles: str) -> str:
    """
    Filename-safe tile string that never merges distinct tile strings.

    Blank letters get a trailing '_' so they stay distinct from real
    tiles on case-insensitive filesystems.
    """
    out: list[str] = []
    for letter in tiles:
        if letter.isascii() and (letter.isupper() or letter.isdigit() or letter == "."):
            out.append(letter)
        elif letter.isascii() and letter.islower():
            out.append(letter + "_")
        else:
            out.append(f"~{ord(letter):04x}")
    return "".join(out)


@dataclass(frozen=True)
class RenderedAsset:
    """Outcome of writing one image. Failed assets are never retried."""
    filename: str
    path: Path
    saved: bool
    error: str | None = None


class AssetNamer:
    """Names image assets inside one output directory."""

    def __init__(self, output_directory: Path | str):
        self.output_directory = Path(output_directory)

    def position_image(self, turn_number: int, player_name: str) -> str:
        return f"{turn_number}-{player_slug(player_name)}-position.png"

    def move_image(self, turn_number: int, player_name: str, move: Move) -> str:
        return (
            f"{turn_number}-{player_slug(player_name)}-"
            f"{tile_signature(move.tiles)}-{move.position_string()}.png"
        )

    def path_for(self, filename: str) -> Path:
        return self.output_directory / filename

"""
Imaging - Board pictures for graphical reports.

Provides:
- BoardRenderer: Interface the report pipeline consumes
- PillowBoardRenderer: Draws boards with Pillow
"""

from .board_image import BoardRenderer, PillowBoardRenderer, encode_png

__all__ = [
    "BoardRenderer",
    "PillowBoardRenderer",
    "encode_png",
]

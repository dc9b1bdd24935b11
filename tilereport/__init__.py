"""
Tilereport - Crossword Game Analysis Reports

Turns a recorded crossword game into an HTML report with one section per
position:
- Board (inline table or rendered image)
- Racks and scores
- Engine move ranking, always including the move actually played
"""

__version__ = "0.1.0"

"""
tilemap - Sparse coordinate maps and the text puzzles solved with them.

Subpackages:
    - tilemap.map: SparseMap, coordinate spaces, tiles, text read/render
    - tilemap.puzzles: Solver framework and built-in puzzles
"""

__version__ = "0.1.0"

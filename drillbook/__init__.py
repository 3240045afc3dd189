"""Plain functions for classic algorithm drills: grids, dynamic programming, puzzles and exercises."""

__version__ = "0.1.0"
__all__ = ["dynamic", "exercises", "grids", "puzzles"]
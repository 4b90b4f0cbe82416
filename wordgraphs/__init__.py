"""Graph-search puzzles: water jugs, word ladders and strongly connected word groups."""

__version__ = "0.1.0"
__all__ = ["jugs", "ladder", "scc"]
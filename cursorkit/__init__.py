"""Cursor lists, breadth- and depth-first graph searches, and tools built on them."""

__version__ = "0.1.0"
__all__ = ["cursorlist", "lex", "bfsgraph", "findpath", "digraph", "findcomponents"]
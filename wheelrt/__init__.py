"""Wheel language building blocks: cursor, token kinds, arena, AST nodes and interpreter."""

__version__ = "0.0.1"
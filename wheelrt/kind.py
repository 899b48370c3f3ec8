"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenKind(enum.IntEnum):
    EOF_ = 0
    TAB = enum.auto()
    NEWLINE = enum.auto()
    SPACE = enum.auto()
    COMMENT = enum.auto()
    DOCUMENT_COMMENT = enum.auto()
    IDENT = enum.auto()
    INT_LITERAL = enum.auto()
    FLOAT_LITERAL = enum.auto()
    STRING_LITERAL = enum.auto()
    RAW_STRING_LITERAL = enum.auto()
    EQUAL = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    PLUS_PLUS = enum.auto()
    MINUS_MINUS = enum.auto()
    EQUAL_EQUAL = enum.auto()
    NOT_EQUAL = enum.auto()
    LESS_THAN = enum.auto()
    GREATER_THAN = enum.auto()
    ARROW = enum.auto()
    FAT_ARROW = enum.auto()
    COLON = enum.auto()
    COMMA = enum.auto()
    DOT = enum.auto()
    LEFT_PARENT = enum.auto()
    RIGHT_PARENT = enum.auto()


def to_string(token_kind: TokenKind | int) -> str:
    """Display name of a token kind; unknown values read as ``IDENTIFIER``."""
    try:
        kind = TokenKind(token_kind)
    except ValueError:
        return "IDENTIFIER"
    if kind is TokenKind.EOF_:
        return "EOF"
    return kind.name


@dataclass(frozen=True)
class Token:
    """A lexed token: its kind, its text and its ``[start, end)`` offsets."""

    kind: TokenKind
    text: str
    start: int
    end: int

    def __len__(self) -> int:
        return len(self.text)
"""
Token definitions for the Monkey lexer.

This module defines the closed set of token kinds the lexer emits:
- Special tokens (ILLEGAL, EOF)
- Identifiers and integer literals
- Operators and delimiters
- Keywords
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class TokenKind(Enum):
    """
    Enumeration of all token kinds in Monkey.

    The member name is what diagnostics print, e.g. ``IDENT`` or ``ASSIGN``.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Character the lexer does not know about
    EOF = auto()                    # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # add, foobar, x, y
    INT = auto()                    # 1343456

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    LT = auto()                     # <
    GT = auto()                     # >

    EQ = auto()                     # ==
    NOT_EQ = auto()                 # !=

    # ========================================================================
    # Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;

    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


@dataclass(frozen=True)
class SourceLocation:
    """
    A position in the source text.

    Lines and columns are 1-based.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its kind, the exact source text it was read from, and
    the line and column of its first character.

    The EOF token carries an empty literal.
    """
    kind: TokenKind
    literal: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.kind.name}({self.literal!r})"

    def location(self, filename: str = "<string>") -> SourceLocation:
        """Source location of the token's first character."""
        return SourceLocation(filename, self.line, self.column)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.kind in KEYWORDS.values()


# Keywords are matched exactly against a maximal identifier run
KEYWORDS: Dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
}

# Operators and delimiters that are always exactly one character long.
# '=' and '!' are absent: they need a peek to tell them from '==' and '!='.
SINGLE_CHAR_TOKENS: Dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


def lookup_ident(ident: str) -> TokenKind:
    """Return the keyword kind for ``ident``, or IDENT if it is not a keyword."""
    return KEYWORDS.get(ident, TokenKind.IDENT)

"""
Monkey Lexer Package

Implements the lexical analyzer for the Monkey language. Source text is
converted into tokens on demand, one per call, with exact 1-based line and
column tracking.

Key Features:
- Pull-based tokenization over an in-memory string
- Two-character operators (==, !=) recognized with one character of peek
- Maximal munch for identifiers and integers
- Unrecognized characters surface as ILLEGAL tokens instead of exceptions
"""

from .tokens import Token, TokenKind, SourceLocation, KEYWORDS, lookup_ident
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "SourceLocation",
    "KEYWORDS",
    "lookup_ident",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
]

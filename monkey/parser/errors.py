"""
Error handling for the Monkey parser.

The parser collects diagnostics instead of raising. ParseError wraps one
of those diagnostics for the convenience entry points that want a single
exception (``parse_string`` / ``parse_file``).
"""

from typing import List

from ..lexer.tokens import Token, TokenKind
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """Raised by the convenience entry points when parsing produced diagnostics."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return str(self.diagnostic)


def suggest_missing_token(expected: TokenKind) -> List[str]:
    """Suggest what token might be missing."""
    token_suggestions = {
        TokenKind.IDENT: ["Add a name after 'let', e.g. 'let x = 5;'"],
        TokenKind.ASSIGN: ["Add an assignment operator '='"],
        TokenKind.SEMICOLON: ["Add a semicolon ';' to end the statement"],
    }
    return list(token_suggestions.get(expected, []))


def create_unexpected_token_error(expected: TokenKind, found: Token,
                                  filename: str = "<string>") -> Diagnostic:
    """
    Create the diagnostic (code P001) for a failed lookahead expectation.

    The message names both kinds and is what ``Parser.errors()`` reports.
    """
    expected_str = expected.name
    found_str = found.kind.name

    return Diagnostic(
        message=f"expected next token to be {expected_str}, got {found_str} instead",
        location=found.location(filename),
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=suggest_missing_token(expected)
    )

"""
Error handling for the Monkey lexer.

The lexer itself never raises: an unrecognized character becomes an ILLEGAL
token. LexerError exists for callers that want to treat ILLEGAL tokens as
fatal (see ``tokenize_string(strict=True)``).
"""

from typing import Optional, List
from dataclasses import dataclass, field

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single error, warning or note attached to a source location."""
    message: str
    location: SourceLocation
    severity: str = "error"  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        header = self.severity if self.code is None else f"{self.severity}[{self.code}]"
        lines = [f"{header}: {self.message}", f"  --> {self.location}"]

        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        lines.extend(f"  suggestion: {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """Raised when an ILLEGAL token is treated as fatal."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return str(self.diagnostic)


# Characters people commonly type expecting an operator Monkey lacks
_OPERATOR_HINTS = {
    "&": ["Monkey has no '&' or '&&' operator"],
    "|": ["Monkey has no '|' or '||' operator"],
    "%": ["Monkey has no modulo operator"],
    '"': ["Monkey has no string literals"],
    "[": ["Monkey has no array literals"],
    "]": ["Monkey has no array literals"],
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error (code L001) for an invalid character."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Monkey source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(Diagnostic(
        message=f"Invalid character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=list(_OPERATOR_HINTS.get(char, [])),
    ))

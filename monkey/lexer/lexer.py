"""
Monkey Lexer - turns source text into tokens, one token per call.

The lexer works over a complete in-memory string. It keeps two cursors,
``position`` (the character under examination) and ``read_position`` (the
next character to load), and tracks the 1-based line and column of the
current character as it goes.
"""

import logging
from typing import Iterator, List

from .tokens import Token, TokenKind, SINGLE_CHAR_TOKENS, lookup_ident
from .errors import create_invalid_character_error

logger = logging.getLogger(__name__)

# Loaded into ``ch`` once the input is exhausted
EOF_CHAR = ""

WHITESPACE = (" ", "\t", "\n", "\r")


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """
    Monkey lexical analyzer.

    ``next_token()`` pulls one token at a time. The lexer is forward-only:
    once the input is exhausted every further call returns an EOF token at
    the same position.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR
        self.column = 0
        self.line = 1

        # Load the first character so next_token() starts on valid state
        self._read_char()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def next_token(self) -> Token:
        """Read and return the next token from the input."""
        self._skip_whitespace()

        ch = self.ch

        if ch == "=":
            if self._peek_char() == "=":
                self._read_char()
                # Column of the first '='
                token = Token(TokenKind.EQ, "==", self.line, self.column - 1)
            else:
                token = self._new_token(TokenKind.ASSIGN)
        elif ch == "!":
            if self._peek_char() == "=":
                self._read_char()
                token = Token(TokenKind.NOT_EQ, "!=", self.line, self.column - 1)
            else:
                token = self._new_token(TokenKind.BANG)
        elif ch in SINGLE_CHAR_TOKENS:
            token = self._new_token(SINGLE_CHAR_TOKENS[ch])
        elif ch == EOF_CHAR:
            token = Token(TokenKind.EOF, "", self.line, self.column - 1)
        elif _is_letter(ch):
            # The scan already moved past the run, so no trailing advance
            literal = self._read_identifier()
            token = Token(lookup_ident(literal), literal, self.line, self.column - len(literal))
            logger.debug("%s at %d:%d", token, token.line, token.column)
            return token
        elif _is_digit(ch):
            literal = self._read_number()
            token = Token(TokenKind.INT, literal, self.line, self.column - len(literal))
            logger.debug("%s at %d:%d", token, token.line, token.column)
            return token
        else:
            token = Token(TokenKind.ILLEGAL, ch, self.line, self.column - 1)

        self._read_char()
        logger.debug("%s at %d:%d", token, token.line, token.column)
        return token

    def _new_token(self, kind: TokenKind) -> Token:
        return Token(kind, self.ch, self.line, self.column)

    def _read_char(self):
        """
        Advance to the next character.

        A newline is attributed to the line it ends: the line counter moves
        only when the character being left behind is '\\n', so the character
        after it lands on column 1 of the next line.
        """
        if self.read_position > len(self.source):
            # EOF_CHAR is already loaded; the cursor stays where it is
            return

        if self.ch == "\n":
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.source):
            self.ch = EOF_CHAR
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def _peek_char(self) -> str:
        """Look at the next character without advancing."""
        if self.read_position >= len(self.source):
            return EOF_CHAR
        return self.source[self.read_position]

    def _read_identifier(self) -> str:
        start = self.position
        while _is_letter(self.ch):
            self._read_char()
        return self.source[start:self.position]

    def _read_number(self) -> str:
        start = self.position
        while _is_digit(self.ch):
            self._read_char()
        return self.source[start:self.position]

    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()


def tokenize_string(source: str, filename: str = "<string>", strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        strict: Raise on the first ILLEGAL token instead of returning it

    Returns:
        List of tokens ending with the EOF token

    Raises:
        LexerError: If ``strict`` is set and an ILLEGAL token is produced
    """
    lexer = Lexer(source, filename)
    tokens = list(lexer)

    if strict:
        for token in tokens:
            if token.kind == TokenKind.ILLEGAL:
                raise create_invalid_character_error(token.literal, token.location(filename))

    return tokens


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If ``strict`` is set and an ILLEGAL token is produced
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, strict=strict)

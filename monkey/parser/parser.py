"""
Monkey recursive descent parser.

Pulls tokens from a Lexer through a two-token window (current + peek) and
builds a Program. Grammar violations are collected as diagnostics; parsing
always continues with the next statement.

Only ``let`` and ``return`` statements are parsed. Their right-hand sides
are skipped up to the terminating ';' until expression parsing exists.
"""

import logging
from typing import List, Optional

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenKind
from ..lexer.errors import Diagnostic
from .ast_nodes import Program, Statement, LetStatement, ReturnStatement, Identifier
from .errors import ParseError, create_unexpected_token_error

logger = logging.getLogger(__name__)


class Parser:
    """
    Monkey parser.

    A parser is driven once, start to finish: ``parse_program()`` consumes
    the lexer up to EOF, so a second call returns an empty Program.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser over a lexer.

        Args:
            lexer: Lexer to pull tokens from; the parser takes it over
        """
        self.lexer = lexer
        self._diagnostics: List[Diagnostic] = []
        self.cur_token: Optional[Token] = None
        self.peek_token: Optional[Token] = None

        # Read two tokens, so cur_token and peek_token are both set
        self._next_token()
        self._next_token()

    def errors(self) -> List[str]:
        """Messages of the diagnostics collected so far, in order."""
        return [diagnostic.message for diagnostic in self._diagnostics]

    def diagnostics(self) -> List[Diagnostic]:
        """Structured diagnostics collected so far, in order."""
        return list(self._diagnostics)

    def has_errors(self) -> bool:
        """Check if parser recorded any diagnostics."""
        return len(self._diagnostics) > 0

    def parse_program(self) -> Program:
        """
        Parse the remaining input into a Program.

        Returns:
            Program holding every statement that parsed, in source order
        """
        statements: List[Statement] = []

        while not self._cur_token_is(TokenKind.EOF):
            statement = self._parse_statement()
            if statement is not None:
                statements.append(statement)
            self._next_token()

        return Program(tuple(statements))

    def _parse_statement(self) -> Optional[Statement]:
        # Unsupported statement starts are dropped without a diagnostic
        if self.cur_token.kind == TokenKind.LET:
            return self._parse_let_statement()
        elif self.cur_token.kind == TokenKind.RETURN:
            return self._parse_return_statement()

        logger.debug("skipping unsupported token %s at %d:%d",
                     self.cur_token, self.cur_token.line, self.cur_token.column)
        return None

    def _parse_let_statement(self) -> Optional[LetStatement]:
        """Parse ``let <ident> = ...;``. Returns None if the header is malformed."""
        token = self.cur_token

        if not self._expect_peek(TokenKind.IDENT):
            return None

        name = Identifier(token=self.cur_token, value=self.cur_token.literal)

        if not self._expect_peek(TokenKind.ASSIGN):
            return None

        # TODO: parse the value expression instead of skipping to ';'
        self._skip_to_semicolon()

        return LetStatement(token=token, name=name)

    def _parse_return_statement(self) -> ReturnStatement:
        """Parse ``return ...;``."""
        token = self.cur_token

        self._skip_to_semicolon()

        return ReturnStatement(token=token)

    # Utility methods

    def _next_token(self):
        """Slide the lookahead window forward by one token."""
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def _skip_to_semicolon(self):
        # Stops at EOF too, the lexer would return EOF forever
        while not self._cur_token_is(TokenKind.SEMICOLON) and not self._cur_token_is(TokenKind.EOF):
            self._next_token()

    def _cur_token_is(self, kind: TokenKind) -> bool:
        return self.cur_token.kind == kind

    def _peek_token_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind == kind

    def _expect_peek(self, kind: TokenKind) -> bool:
        """Advance if the peek token is ``kind``, otherwise record a diagnostic."""
        if self._peek_token_is(kind):
            self._next_token()
            return True

        self._peek_error(kind)
        return False

    def _peek_error(self, kind: TokenKind):
        diagnostic = create_unexpected_token_error(kind, self.peek_token, self.lexer.filename)
        logger.debug("%s at %s", diagnostic.message, diagnostic.location)
        self._diagnostics.append(diagnostic)


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Program AST

    Raises:
        ParseError: If parsing recorded any diagnostic (the first one is raised)
    """
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()

    if parser.has_errors():
        raise ParseError(parser.diagnostics()[0])

    return program


def parse_file(filepath: str) -> Program:
    """
    Convenience function to parse a source file.

    Raises:
        ParseError: If parsing recorded any diagnostic
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath)

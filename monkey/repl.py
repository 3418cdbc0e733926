"""
Interactive loop: read a line, lex it, print its tokens.

Each line gets a fresh Lexer, so line numbers always start at 1. The loop
does no parsing.
"""

import sys
from typing import TextIO

from .lexer.lexer import Lexer
from .lexer.tokens import Token, TokenKind

PROMPT = ">> "


def format_token(token: Token) -> str:
    """Render a token as ``{Type:LET Literal:let Line:1 Column:1}``."""
    return f"{{Type:{token.kind.name} Literal:{token.literal} Line:{token.line} Column:{token.column}}}"


def start(input_stream: TextIO = sys.stdin, output_stream: TextIO = sys.stdout,
          prompt: str = PROMPT):
    """Run the loop until ``input_stream`` is exhausted."""
    while True:
        output_stream.write(prompt)
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            return

        lexer = Lexer(line.rstrip("\r\n"), "<stdin>")
        token = lexer.next_token()
        while token.kind != TokenKind.EOF:
            output_stream.write(format_token(token) + "\n")
            token = lexer.next_token()

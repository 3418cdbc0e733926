"""
Monkey Parser Package

Implements a recursive descent parser with two tokens of lookahead for the
Monkey language, producing an immutable AST.

Key Features:
- Pull-based token consumption straight from the lexer
- Multi-error collection: a malformed statement is abandoned, parsing goes on
- Closed AST node set with a tag-dispatched visitor
"""

from .ast_nodes import *
from .parser import Parser, parse_string, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",
    "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType",
    "Program", "Statement", "Expression",
    "LetStatement", "ReturnStatement", "Identifier",
    "ASTVisitor", "ASTPrinter",

    # Error handling
    "ParseError",
]

"""
Monkey Language Front End

Lexer, parser and AST for Monkey, a small C-like scripting language.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis and AST generation
    ├── repl.py          # Interactive token printer
    └── cli.py           # Command line entry point

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind
from .parser import Parser, Program, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "Program",
    "parse_string",

    # Version info
    "__version__",
    "__license__",
]

"""
Command line entry point for the Monkey front end.

    monkey repl                  # interactive token printer
    monkey tokenize FILE         # print every token in FILE
    monkey parse FILE            # print the AST of FILE and any diagnostics
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer.errors import LexerError
from .lexer.lexer import Lexer, tokenize_file
from .parser.ast_nodes import ASTPrinter
from .parser.parser import Parser
from .repl import PROMPT, format_token, start

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_IO = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str = "WARNING"):
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey language lexer and parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    monkey repl                    # Start the interactive token printer
    monkey tokenize program.mk     # Print the tokens of a file
    monkey parse program.mk        # Print the AST of a file
        """
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--log-level', choices=LOG_LEVELS, default="WARNING",
                        help='Logging verbosity (default: WARNING)')

    subcommands = parser.add_subparsers(dest='command', required=True)

    repl_parser = subcommands.add_parser('repl', help='Read lines and print their tokens')
    repl_parser.add_argument('--prompt', default=PROMPT,
                             help=f'Prompt string (default: {PROMPT!r})')

    tokenize_parser = subcommands.add_parser('tokenize', help='Print the tokens of a file')
    tokenize_parser.add_argument('file', help='Source file')
    tokenize_parser.add_argument('--strict', action='store_true',
                                 help='Fail on the first illegal character')

    parse_parser = subcommands.add_parser('parse', help='Print the AST of a file')
    parse_parser.add_argument('file', help='Source file')

    return parser


def _read_source(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _run_tokenize(args) -> int:
    try:
        tokens = tokenize_file(args.file, strict=args.strict)
    except LexerError as e:
        print(e, file=sys.stderr)
        return EXIT_ERRORS

    for token in tokens:
        print(format_token(token))
    return EXIT_OK


def _run_parse(args) -> int:
    source = _read_source(args.file)
    parser = Parser(Lexer(source, args.file))
    program = parser.parse_program()

    print(ASTPrinter().render(program))

    for diagnostic in parser.diagnostics():
        print(diagnostic, file=sys.stderr, end="")

    return EXIT_ERRORS if parser.has_errors() else EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == 'repl':
            start(sys.stdin, sys.stdout, prompt=args.prompt)
            return EXIT_OK
        elif args.command == 'tokenize':
            return _run_tokenize(args)
        else:
            return _run_parse(args)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", getattr(args, 'file', '<stdin>'), e)
        return EXIT_IO


if __name__ == "__main__":
    sys.exit(main())

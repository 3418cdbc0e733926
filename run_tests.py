#!/usr/bin/env python3
"""
Main test runner for the Monkey front end.

Runs a quick lexer/parser smoke check, then the unittest suite in tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_check():
    """Drive the lexer and parser over a small program."""

    print("🚀 Monkey Front End Test Suite")
    print("=" * 60)

    try:
        from monkey.lexer.lexer import Lexer, tokenize_string
        from monkey.parser.parser import Parser

        print("✅ All modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import modules: {e}")
        return False

    code = """
    let five = 5;
    let ten = 10;
    return five;
    """

    print("  🔧 Lexing...")
    tokens = tokenize_string(code)
    print(f"     Generated {len(tokens)} tokens")

    print("  🔧 Parsing...")
    parser = Parser(Lexer(code))
    program = parser.parse_program()
    print(f"     Generated AST with {len(program.statements)} statements")

    if parser.errors():
        print(f"     ❌ Parser errors: {len(parser.errors())}")
        for message in parser.errors():
            print(f"        {message}")
        return False

    print("  ❌ Testing error collection...")
    parser = Parser(Lexer("let = 1;\nlet y 2;\nlet z = 3;"))
    program = parser.parse_program()
    if len(parser.errors()) != 2 or len(program.statements) != 1:
        print(f"     ❌ Expected 2 errors and 1 statement, got "
              f"{len(parser.errors())} errors and {len(program.statements)} statements")
        return False
    print(f"     ✅ Collected {len(parser.errors())} expected errors")
    print()

    return True


def run_all_tests():
    """Run the smoke check and every test module under tests/."""
    if not run_smoke_check():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)

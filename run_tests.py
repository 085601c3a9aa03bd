#!/usr/bin/env python3
"""
Main test runner for the minilang lexer tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Lex a small program end to end before running the suites."""
    from minilang.lexer.lexer import Lexer
    from minilang.lexer.errors import LexerError

    code = """
    fn add(a: i64, b: i64) -> i64 {
        return a + b
    }
    """

    print("Testing simple lexing pipeline...")
    try:
        lexer = Lexer(code)
        tokens = lexer.tokenize()
    except LexerError as e:
        print(f"  ❌ Lexing failed:\n{e}")
        return False

    print(f"  ✅ Generated {len(tokens)} tokens over {lexer.current_line_count()} lines")
    return True


def run_all_tests():
    """Run all minilang test suites."""

    print("🚀 minilang Lexer Test Suite")
    print("=" * 60)

    try:
        import minilang  # noqa: F401
        print("✅ minilang imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import minilang: {e}")
        return False

    if not run_smoke_test():
        return False
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)

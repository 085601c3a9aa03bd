"""
minilang Compiler Front End

Lexical analysis for minilang, a small statically-typed language with
64-bit integer types, classes, structs and impl blocks. The parser and
later stages consume the token stream produced here.

Architecture:
    minilang/
    ├── lexer/           # Tokenization and lexical analysis
    ├── utils/           # Logging helpers
    └── cli.py           # minilang-lex command

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@minilang.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]

"""
minilang Lexer Package

Implements the lexical analyzer (tokenizer) for the minilang language.
Source text goes in, an ordered stream of typed, positioned tokens comes
out, ready for the parser.

Key Features:
- Longest-match scanning over an explicit priority-ordered rule table
- Suffixed integer literals (42i64, 7u64) with range checking
- Comments and newlines kept as tokens for downstream tools
- Byte-offset positions plus line/column lookup for diagnostics
- Caller-driven error recovery

Author: xwest
"""

from .tokens import Token, TokenKind, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexerError, UnexpectedCharacterError, NumericLiteralOverflowError

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "SourceLocation",
    "LexerError",
    "UnexpectedCharacterError",
    "NumericLiteralOverflowError",
    "tokenize_string",
    "tokenize_file",
]

"""
minilang-lex: dump the token stream of a minilang source file.

Examples:
    minilang-lex program.ml                 # one token per line
    minilang-lex program.ml --json          # JSON array of tokens
    minilang-lex program.ml --keep-going    # report every error, not just the first
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import Lexer, LexerError, Token, TokenKind
from .utils.logger import get_logger

logger = get_logger(__name__)


def format_token(lexer: Lexer, token: Token) -> str:
    location = lexer.location_of(token.position)
    if token.value is None:
        return f"{location.line}:{location.column}\t{token.kind.name}"
    return f"{location.line}:{location.column}\t{token.kind.name}\t{token.value!r}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang-lex",
        description="Tokenize a minilang source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument('file', help='Source file to tokenize')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens as a JSON array')
    parser.add_argument('--keep-going', action='store_true',
                        help='Skip past lexer errors and report all of them')
    parser.add_argument('--no-comments', action='store_true',
                        help='Leave comment tokens out of the output')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for minilang-lex"""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s:%(name)s:%(message)s')

    try:
        with open(args.file, 'r', encoding='utf-8', newline='') as f:
            source = f.read()
    except OSError as e:
        print(f"minilang-lex: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    lexer = Lexer(source, args.file)
    try:
        tokens = lexer.tokenize(recover=args.keep_going)
    except LexerError as e:
        print(e, file=sys.stderr, end="")
        return 1

    logger.debug("%s: %d tokens, %d lines, %d errors",
                 args.file, len(tokens), lexer.current_line_count(), len(lexer.errors))

    if args.no_comments:
        tokens = [t for t in tokens if t.kind != TokenKind.COMMENT]

    if args.json:
        print(json.dumps([t.to_dict() for t in tokens], indent=2))
    else:
        for token in tokens:
            print(format_token(lexer, token))

    for diagnostic in lexer.get_diagnostics():
        print(diagnostic, file=sys.stderr, end="")

    return 1 if lexer.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())

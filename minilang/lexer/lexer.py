"""
minilang Lexer - turns source text into a stream of tokens

Works off the rule table in rules.py: at every position all rules are
tried, the longest match wins, and ties go to the earlier rule. That keeps
"if" a keyword and "iffy" an identifier without any special casing here.

Tokens are produced on demand. next_token() returns None once the input
is used up, so end of stream is never ambiguous.

xwest
"""

from bisect import bisect_right
from typing import Iterator, List, Optional, Tuple

from .tokens import Token, TokenKind, SourceLocation
from .rules import Rule, RULES, SUFFIX_LENGTH
from .errors import (
    LexerError, NumericLiteralOverflowError, UnexpectedCharacterError,
    create_unexpected_character_error, create_numeric_overflow_error
)
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """
    minilang lexical analyzer.

    Owns a cursor into an immutable source buffer and a line counter. One
    instance handles exactly one buffer; instances share no state, so
    separate files can be scanned independently.
    """

    def __init__(self, source: str, filename: str = "<unknown>", rules: Optional[List[Rule]] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            rules: Priority-ordered rule table (defaults to the language's)
        """
        self.source = source
        self.filename = filename
        self.rules = RULES if rules is None else rules
        self.errors: List[LexerError] = []

        self._pos = 0           # character index into source
        self._offset = 0        # UTF-8 byte offset matching _pos
        self._line_count = 0

        # Built on first location_of() call
        self._encoded: Optional[bytes] = None
        self._line_starts: Optional[List[int]] = None

    @property
    def position(self) -> int:
        """Current byte offset of the cursor."""
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self.source)

    def current_line_count(self) -> int:
        """Number of newline tokens produced so far."""
        return self._line_count

    def next_token(self) -> Optional[Token]:
        """
        Produce the next token.

        Returns:
            The next token, or None when the input is exhausted

        Raises:
            UnexpectedCharacterError: No rule matches at the cursor
            NumericLiteralOverflowError: A suffixed literal is out of range

        On error the cursor stops at the offending input, so calling again
        raises the same error until recover() is used.
        """
        while self._pos < len(self.source):
            rule, length = self._longest_match()

            if rule is None:
                raise create_unexpected_character_error(
                    self.source[self._pos],
                    self.location_of(self._offset)
                )

            lexeme = self.source[self._pos:self._pos + length]

            if rule.skip:
                self._advance(lexeme)
                continue

            start = self._offset
            value = self._build_value(rule, lexeme, start)
            self._advance(lexeme)

            if rule.kind == TokenKind.NEWLINE:
                self._line_count += 1

            return Token(rule.kind, lexeme, value, start)

        return None

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def _longest_match(self) -> Tuple[Optional[Rule], int]:
        """Find the rule with the longest match; earliest rule wins ties."""
        best_rule = None
        best_length = 0

        for rule in self.rules:
            length = rule.match(self.source, self._pos)
            # Strictly greater: an equal-length later rule never displaces an earlier one
            if length > best_length:
                best_rule = rule
                best_length = length

        return best_rule, best_length

    def _build_value(self, rule: Rule, lexeme: str, start: int):
        if rule.build is None:
            return None
        try:
            return rule.build(lexeme)
        except OverflowError:
            raise create_numeric_overflow_error(
                lexeme,
                lexeme[-SUFFIX_LENGTH:],
                self.location_of(start)
            ) from None

    def _advance(self, text: str):
        """Move the cursor past ``text``, which must be the text at the cursor."""
        self._pos += len(text)
        self._offset += len(text.encode("utf-8"))

    def location_of(self, offset: int) -> SourceLocation:
        """Line/column location of a byte offset, for diagnostics."""
        if self._line_starts is None:
            self._index_lines()

        index = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[index]
        column = len(self._encoded[line_start:offset].decode("utf-8", errors="replace")) + 1
        return SourceLocation(self.filename, index + 1, column, offset)

    def _index_lines(self):
        """Cache the encoded source and the byte offset of every line start."""
        self._encoded = self.source.encode("utf-8")
        self._line_starts = [0]
        start = self._encoded.find(b'\n')
        while start != -1:
            self._line_starts.append(start + 1)
            start = self._encoded.find(b'\n', start + 1)

    def recover(self, error: LexerError):
        """
        Skip past the input that caused ``error`` so scanning can go on.

        An unexpected character is skipped on its own; an out-of-range
        literal is skipped as a whole. The error has to be the one raised
        at the cursor's current position.
        """
        if error.position != self._offset:
            raise ValueError(
                f"Cannot recover from error at offset {error.position}; "
                f"lexer is at offset {self._offset}"
            )

        if isinstance(error, NumericLiteralOverflowError):
            self._advance(error.text)
        elif isinstance(error, UnexpectedCharacterError):
            self._advance(error.char)
        else:
            raise TypeError(f"Don't know how to recover from {type(error).__name__}")

    def tokenize(self, recover: bool = False) -> List[Token]:
        """
        Tokenize the rest of the source.

        Args:
            recover: Collect errors in ``self.errors`` and keep scanning
                instead of raising the first one

        Returns:
            List of tokens (no end marker; the list simply ends)
        """
        tokens: List[Token] = []

        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                if not recover:
                    raise
                self.errors.append(e)
                self.recover(e)
                continue

            if token is None:
                break
            tokens.append(token)

        return tokens

    def has_errors(self) -> bool:
        """Check if a recovering tokenize() run hit any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self):
        """Get the diagnostics of all collected errors."""
        return [error.diagnostic for error in self.errors]


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        source = f.read()

    logger.debug("read %d characters from %s", len(source), filepath)
    tokens = tokenize_string(source, filepath)
    logger.debug("%s: %d tokens", filepath, len(tokens))
    return tokens

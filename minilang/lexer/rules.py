"""
The minilang lexical rule table.

Rules are kept in an explicit, priority-ordered list. The scanner picks
the rule with the longest match at the cursor; when several rules match
the same length, the one declared first wins. Fixed keyword and type-name
rules therefore come before the identifier rule.

Author: xwest
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Pattern

from .tokens import TokenKind, KEYWORDS, TYPE_NAMES, PUNCTUATION


# Length of the "i64" / "u64" literal suffixes
SUFFIX_LENGTH = 3

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
U64_MIN = 0
U64_MAX = (1 << 64) - 1

# No 64-bit value has more significant digits than this
MAX_DIGITS = len(str(U64_MAX))


@dataclass(frozen=True)
class Rule:
    """
    A single lexical rule.

    ``kind`` is None for skip rules (whitespace). ``build`` turns the
    matched text into the token payload; fixed-text rules have none.
    """
    name: str
    pattern: Pattern[str]
    kind: Optional[TokenKind]
    build: Optional[Callable[[str], Any]] = None

    @property
    def skip(self) -> bool:
        return self.kind is None

    def match(self, source: str, pos: int) -> int:
        """Return the length of this rule's match at ``pos`` (0 if none)."""
        m = self.pattern.match(source, pos)
        if m is None:
            return 0
        return m.end() - pos


def _suffixed_integer(low: int, high: int) -> Callable[[str], int]:
    """Build a payload constructor for an "i64"/"u64" suffixed literal."""

    def build(text: str) -> int:
        digits = text[:-SUFFIX_LENGTH]
        if len(digits.lstrip("-").lstrip("0")) > MAX_DIGITS:
            raise OverflowError(text)
        value = int(digits)
        if not low <= value <= high:
            raise OverflowError(text)
        return value

    return build


def _string_contents(text: str) -> str:
    return text[1:-1]


def _comment_text(text: str) -> str:
    return text[1:]


def _fixed(text: str, kind: TokenKind) -> Rule:
    return Rule(repr(text), re.compile(re.escape(text)), kind)


def build_rules() -> List[Rule]:
    """Assemble the rule table in priority order."""
    rules: List[Rule] = []

    # Keywords and type names must precede the identifier rule
    for text, kind in KEYWORDS.items():
        rules.append(_fixed(text, kind))
    for text, kind in TYPE_NAMES.items():
        rules.append(_fixed(text, kind))
    for text, kind in PUNCTUATION.items():
        rules.append(_fixed(text, kind))

    rules.extend([
        Rule("int64", re.compile(r'-?[0-9]+i64'), TokenKind.INT64,
             _suffixed_integer(I64_MIN, I64_MAX)),
        Rule("uint64", re.compile(r'-?[0-9]+u64'), TokenKind.UINT64,
             _suffixed_integer(U64_MIN, U64_MAX)),
        Rule("integer", re.compile(r'-?[0-9]+'), TokenKind.INTEGER, str),
        Rule("string", re.compile(r'"[^"\n]*"'), TokenKind.STRING, _string_contents),
        Rule("comment", re.compile(r'#[^\n]*'), TokenKind.COMMENT, _comment_text),
        Rule("identifier", re.compile(r'[A-Za-z_][A-Za-z0-9_]*'), TokenKind.IDENTIFIER, str),
        Rule("newline", re.compile(r'\n'), TokenKind.NEWLINE),
        Rule("whitespace", re.compile(r'[ \t]+'), None),
    ])

    return rules


RULES: List[Rule] = build_rules()

"""
Token definitions for the minilang lexer.

This module defines every token kind the scanner can produce:
- Keywords and literal keywords (true, false, null)
- Built-in type names (u64, i64, str, ...)
- Punctuation and operators
- Value-carrying literals (integers, strings, identifiers, comments)
- The structural newline token

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenKind(Enum):
    """
    Enumeration of all token kinds in minilang.

    Organized by category; the grouping matches the order in which the
    rule table is declared.
    """

    # ========================================================================
    # Keywords
    # ========================================================================
    IF = auto()                     # if
    ELIF = auto()                   # elif
    ELSE = auto()                   # else
    FOR = auto()                    # for
    IN = auto()                     # in
    TO = auto()                     # to (range upper bound)
    WHILE = auto()                  # while
    BREAK = auto()                  # break
    CONTINUE = auto()               # continue
    RETURN = auto()                 # return
    CLASS = auto()                  # class
    STRUCT = auto()                 # struct
    IMPL = auto()                   # impl
    FUNCTION = auto()               # fn
    EXTERN = auto()                 # extern
    PUBLIC = auto()                 # pub
    VAL = auto()                    # val (immutable binding)
    VAR = auto()                    # var (mutable binding)

    # Literal keywords
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    NULL = auto()                   # null

    # ========================================================================
    # Type names
    # ========================================================================
    U64 = auto()                    # u64
    I64 = auto()                    # i64
    STR = auto()                    # str
    PTR = auto()                    # ptr
    USIZE = auto()                  # usize
    BOOL = auto()                   # bool

    # ========================================================================
    # Punctuation and Operators
    # ========================================================================
    PAREN_OPEN = auto()             # (
    PAREN_CLOSE = auto()            # )
    BRACE_OPEN = auto()             # {
    BRACE_CLOSE = auto()            # }
    BRACKET_OPEN = auto()           # [
    BRACKET_CLOSE = auto()          # ]
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    UNDERSCORE = auto()             # _
    EXCLAMATION = auto()            # !
    EQUAL = auto()                  # =
    DOUBLE_EQUAL = auto()           # ==
    NOT_EQUAL = auto()              # !=
    LE = auto()                     # <=
    LT = auto()                     # <
    GE = auto()                     # >=
    GT = auto()                     # >
    DOUBLE_AND = auto()             # &&
    DOUBLE_OR = auto()              # ||
    AND = auto()                    # &
    DOUBLE_COLON = auto()           # ::
    ARROW = auto()                  # ->
    IADD = auto()                   # +
    ISUB = auto()                   # -
    IMUL = auto()                   # *
    IDIV = auto()                   # /

    # ========================================================================
    # Value-carrying tokens
    # ========================================================================
    INT64 = auto()                  # -5i64        -> int
    UINT64 = auto()                 # 42u64        -> int
    INTEGER = auto()                # -5, 123      -> str (unparsed)
    STRING = auto()                 # "abc"        -> str (inner text)
    IDENTIFIER = auto()             # name, _tmp1  -> str
    COMMENT = auto()                # # text       -> str (after marker)

    # ========================================================================
    # Structural
    # ========================================================================
    NEWLINE = auto()                # \n


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Lines and columns are 1-based; offset is the UTF-8 byte offset.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of file

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in minilang.

    Contains the token kind, lexeme (raw matched text), payload value for
    value-carrying kinds, and the byte offset where the lexeme starts.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source
    value: Any                      # Payload (None for fixed tokens)
    position: int                   # Byte offset of the first character

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.kind.name}({self.value!r})"
        return self.kind.name

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.position})")

    @property
    def end(self) -> int:
        """Byte offset just past the end of the lexeme."""
        return self.position + len(self.lexeme.encode("utf-8"))

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in LITERAL_KINDS

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword (literal keywords included)."""
        return self.kind in KEYWORD_KINDS

    @property
    def is_type_name(self) -> bool:
        return self.kind in TYPE_NAME_KINDS

    @property
    def is_trivia(self) -> bool:
        """Comments and newlines, which a parser may choose to ignore."""
        return self.kind in (TokenKind.COMMENT, TokenKind.NEWLINE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.name,
            "lexeme": self.lexeme,
            "value": self.value,
            "position": self.position,
        }


# Lookup tables for the fixed-text rules.
# Declaration order matters: the rule table is built from these in order,
# and equal-length matches go to whichever rule comes first.

KEYWORDS: Dict[str, TokenKind] = {
    "if": TokenKind.IF,
    "elif": TokenKind.ELIF,
    "else": TokenKind.ELSE,
    "for": TokenKind.FOR,
    "in": TokenKind.IN,
    "to": TokenKind.TO,
    "while": TokenKind.WHILE,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "return": TokenKind.RETURN,
    "class": TokenKind.CLASS,
    "struct": TokenKind.STRUCT,
    "impl": TokenKind.IMPL,
    "fn": TokenKind.FUNCTION,
    "extern": TokenKind.EXTERN,
    "pub": TokenKind.PUBLIC,
    "val": TokenKind.VAL,
    "var": TokenKind.VAR,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
}

TYPE_NAMES: Dict[str, TokenKind] = {
    "u64": TokenKind.U64,
    "i64": TokenKind.I64,
    "str": TokenKind.STR,
    "ptr": TokenKind.PTR,
    "usize": TokenKind.USIZE,
    "bool": TokenKind.BOOL,
}

PUNCTUATION: Dict[str, TokenKind] = {
    "(": TokenKind.PAREN_OPEN,
    ")": TokenKind.PAREN_CLOSE,
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
    "[": TokenKind.BRACKET_OPEN,
    "]": TokenKind.BRACKET_CLOSE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "::": TokenKind.DOUBLE_COLON,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "_": TokenKind.UNDERSCORE,
    "!=": TokenKind.NOT_EQUAL,
    "!": TokenKind.EXCLAMATION,
    "==": TokenKind.DOUBLE_EQUAL,
    "=": TokenKind.EQUAL,
    "<=": TokenKind.LE,
    "<": TokenKind.LT,
    ">=": TokenKind.GE,
    ">": TokenKind.GT,
    "&&": TokenKind.DOUBLE_AND,
    "||": TokenKind.DOUBLE_OR,
    "&": TokenKind.AND,
    "->": TokenKind.ARROW,
    "+": TokenKind.IADD,
    "-": TokenKind.ISUB,
    "*": TokenKind.IMUL,
    "/": TokenKind.IDIV,
}

KEYWORD_KINDS = frozenset(KEYWORDS.values())
TYPE_NAME_KINDS = frozenset(TYPE_NAMES.values())
LITERAL_KINDS = frozenset({
    TokenKind.INT64, TokenKind.UINT64, TokenKind.INTEGER, TokenKind.STRING,
    TokenKind.TRUE, TokenKind.FALSE, TokenKind.NULL,
})



"""
Error handling for the minilang lexer.

Every lexical anomaly becomes an exception carrying a position-tagged
diagnostic. The scanner never repairs input on its own; deciding whether
to stop or resynchronize is left to the caller.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot produce a token.

    Contains detailed diagnostic information for error reporting.
    ``position`` is the byte offset the scanner was at when it failed.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def position(self) -> int:
        return self.diagnostic.location.offset

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharacterError(LexerError):
    """No rule matches any non-empty prefix at the current position."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(f"Unexpected character: '{char}'", location, **kwargs)
        self.char = char


class NumericLiteralOverflowError(LexerError):
    """A suffixed integer literal does not fit its target width."""

    def __init__(self, text: str, target: str, location: SourceLocation, **kwargs):
        super().__init__(f"Numeric literal out of range for {target}: '{text}'", location, **kwargs)
        self.text = text
        self.target = target


TYPE_RANGES = {
    "i64": "-9223372036854775808 to 9223372036854775807",
    "u64": "0 to 18446744073709551615",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, location: SourceLocation) -> UnexpectedCharacterError:
    """Create an error for a character no rule accepts."""
    suggestions = []

    if char == '"':
        help_text = "String literals must be closed by a '\"' on the same line."
        suggestions.append('Add a closing \'"\' before the end of the line')
    elif char == '\r':
        help_text = "Carriage returns are not valid; use '\\n' line endings."
    elif char.isspace():
        help_text = "Only spaces, tabs and '\\n' are accepted as whitespace."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in minilang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    if char == '|':
        suggestions.append("Use '||' for logical or")

    return UnexpectedCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions or None
    )


def create_numeric_overflow_error(text: str, target: str, location: SourceLocation) -> NumericLiteralOverflowError:
    """Create an error for a suffixed literal outside its type's range."""
    suggestions = None
    if target == "u64" and text.startswith('-'):
        suggestions = ["Use an 'i64' suffix for negative values"]

    return NumericLiteralOverflowError(
        text,
        target,
        location,
        code="L007",
        help_text=f"Values of type {target} must be in the range {TYPE_RANGES[target]}.",
        suggestions=suggestions
    )

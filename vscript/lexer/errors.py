"""
Error handling for the VScript lexer.

Scanning problems are collected as Diagnostic values instead of being
printed or raised, so callers decide where they end up. LexerError exists
for the convenience wrappers that want to fail on the first error.
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import Position, TokenType


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal report produced while scanning."""
    message: str
    position: Position
    severity: str  # "error" or "warning"
    expected: Optional[TokenType] = None
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.position}: {self.severity}: "
        if self.expected is not None:
            result += f"expected {self.expected.name}, "
        result += self.message
        if self.code:
            result += f" [{self.code}]"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Exception carrying a lexer diagnostic.

    The lexer itself never raises this; it is used by wrappers that turn
    the first reported error into a failure.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L003": "Number literal too long",
}


def create_invalid_character_error(char: str, position: Position) -> Diagnostic:
    """Create a diagnostic for a character outside the grammar."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in VScript source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=f"Invalid character: '{char}'",
        position=position,
        severity="error",
        code="L001",
        help_text=help_text,
    )


def create_number_too_long_warning(digits: str, position: Position) -> Diagnostic:
    """Create a warning for a number literal too long to convert."""
    return Diagnostic(
        message=f"Number literal has {len(digits)} digits; its value is not computed",
        position=position,
        severity="warning",
        code="L003",
        help_text="The token keeps its text; value is None.",
    )

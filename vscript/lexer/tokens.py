"""
Token definitions for the VScript lexer.

This module defines the token kinds VScript understands, the position
model used for diagnostics, and the operator table the scanner uses to
pick the longest matching operator:
- Keywords and identifiers
- Punctuation and delimiters
- Arithmetic and assignment operators
- String and number literals
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in VScript.

    NONE is the "not yet classified" sentinel and never appears in a
    lexer's emitted token stream.
    """

    NONE = auto()

    # ========================================================================
    # Identifiers and Keywords
    # ========================================================================
    KEYWORD = auto()                # fn, return
    IDENT = auto()                  # main, some_name

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    OPEN_BRACE = auto()             # {
    CLOSE_BRACE = auto()            # }
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    ARROW = auto()                  # ->

    # ========================================================================
    # Literals
    # ========================================================================
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    EQUALS = auto()                 # =

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Position:
    """
    Represents where a token starts in the source.

    Row and column are stored 0-based and displayed 1-based.
    """
    filename: str = ""
    row: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.filename}:{self.row + 1}:{self.column + 1}"

    def __repr__(self) -> str:
        return f"Position({self.filename!r}, {self.row}, {self.column})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the VScript language.

    `text` is the slice of source that produced the token; for string
    literals it is the body without the quotes. `value` carries the parsed
    value where there is one (the int of a number literal, the keyword
    identity of a keyword).
    """
    type: TokenType = TokenType.NONE
    position: Position = field(default_factory=Position)
    text: str = ""
    value: Any = None

    def __str__(self) -> str:
        return f"<{self.type.name} {self.position}> {self.text}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.text!r}, "
                f"{self.value!r}, {self.position!r})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type == TokenType.KEYWORD

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATOR_TYPES


LITERAL_TYPES = frozenset({TokenType.STRING, TokenType.NUMBER})

# Maximal-munch table: first character -> candidates, longest spelling first.
# New multi-character operators only need an entry here.
OPERATOR_RULES: Dict[str, Tuple[Tuple[str, TokenType], ...]] = {
    "{": (("{", TokenType.OPEN_BRACE),),
    "}": (("}", TokenType.CLOSE_BRACE),),
    "(": (("(", TokenType.OPEN_PAREN),),
    ")": ((")", TokenType.CLOSE_PAREN),),
    ":": ((":", TokenType.COLON),),
    ";": ((";", TokenType.SEMICOLON),),
    "+": (("+", TokenType.PLUS),),
    "*": (("*", TokenType.MULTIPLY),),
    "/": (("/", TokenType.DIVIDE),),
    "=": (("=", TokenType.EQUALS),),
    "-": (
        ("->", TokenType.ARROW),
        ("-", TokenType.MINUS),
    ),
}

OPERATOR_TYPES = frozenset(
    token_type
    for candidates in OPERATOR_RULES.values()
    for _, token_type in candidates
)

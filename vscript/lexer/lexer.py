"""
VScript Lexer - turns source lines into tokens

The source model is line oriented: the driver feeds one line at a time
and nothing carries over between lines except the row counter. Problems
are collected as diagnostics; scanning always runs to the end of the line.
"""

import logging
import os
from enum import Enum, auto
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple

from .tokens import Token, TokenType, Position, OPERATOR_RULES
from .keywords import KeywordTable, DEFAULT_KEYWORDS
from .errors import (
    Diagnostic, LexerError, create_invalid_character_error, create_number_too_long_warning
)


logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")

# Number literals longer than this keep value=None
MAX_NUMBER_DIGITS = 4300


class CharCategory(Enum):
    """Category of the character that starts a token."""
    BRACE = auto()                  # { }
    PAREN = auto()                  # ( )
    PUNCT = auto()                  # : ;
    OPERATOR = auto()               # + * / =
    DASH = auto()                   # - (may start ->)
    QUOTE = auto()                  # "
    DIGIT = auto()                  # 0-9
    ALPHA = auto()                  # a-z A-Z
    OTHER = auto()                  # anything else


# Checked top to bottom; the first match wins.
CATEGORY_ORDER: Tuple[Tuple[CharCategory, Callable[[str], bool]], ...] = (
    (CharCategory.BRACE, lambda c: c in "{}"),
    (CharCategory.PAREN, lambda c: c in "()"),
    (CharCategory.PUNCT, lambda c: c in ":;"),
    (CharCategory.OPERATOR, lambda c: c in "+*/="),
    (CharCategory.DASH, lambda c: c == "-"),
    (CharCategory.QUOTE, lambda c: c == '"'),
    (CharCategory.DIGIT, lambda c: c in DIGITS),
    (CharCategory.ALPHA, lambda c: _is_alnum(c)),
)


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _is_word_char(char: str) -> bool:
    return _is_alnum(char) or char == "_"


def classify(char: str) -> CharCategory:
    """Classify the character that starts a token."""
    for category, test in CATEGORY_ORDER:
        if test(char):
            return category
    return CharCategory.OTHER


class Lexer:
    """
    VScript lexical analyzer.

    Accumulates tokens across successive scan_line() calls, one call per
    source line, and records diagnostics without ever stopping a scan.
    """

    def __init__(
        self,
        filename: str = "<unknown>",
        keywords: KeywordTable = DEFAULT_KEYWORDS,
        strict: bool = False,
    ):
        """
        Initialize the lexer.

        Args:
            filename: Name shown in token positions and diagnostics
            keywords: Reserved words used to tell keywords from identifiers
            strict: Report characters outside the grammar instead of
                skipping them silently
        """
        self._filename = filename
        self._keywords = keywords
        self._strict = strict
        self._row = 0
        self._tokens: List[Token] = []
        self.diagnostics: List[Diagnostic] = []

        # Per-call state, reset by scan_line()
        self._line = ""
        self._cursor = 0

        self._scanners: Dict[CharCategory, Callable[[Position], Optional[Token]]] = {
            CharCategory.BRACE: self._scan_operator,
            CharCategory.PAREN: self._scan_operator,
            CharCategory.PUNCT: self._scan_operator,
            CharCategory.OPERATOR: self._scan_operator,
            CharCategory.DASH: self._scan_operator,
            CharCategory.QUOTE: self._scan_string,
            CharCategory.DIGIT: self._scan_number,
            CharCategory.ALPHA: self._scan_word,
            CharCategory.OTHER: self._skip_other,
        }

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def keywords(self) -> KeywordTable:
        return self._keywords

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def row(self) -> int:
        """Row the next scanned line will get (0-based)."""
        return self._row

    @property
    def tokens(self) -> Tuple[Token, ...]:
        """All tokens emitted so far, in emission order."""
        return tuple(self._tokens)

    def scan_line(self, line: str) -> List[Token]:
        """
        Tokenize one line of source and append the tokens.

        Args:
            line: Source line without its newline

        Returns:
            The tokens this call appended
        """
        self._line = line
        self._cursor = 0
        first_new = len(self._tokens)

        try:
            while self._cursor < len(self._line):
                self._skip_whitespace()
                if self._cursor >= len(self._line):
                    break

                start = self._current_position()
                category = classify(self._line[self._cursor])
                token = self._scanners[category](start)
                if token is not None:
                    self._tokens.append(token)
        finally:
            self._line = ""
            self._row += 1

        emitted = self._tokens[first_new:]
        logger.debug("%s:%d: %d token(s)", self._filename, self._row, len(emitted))
        return emitted

    def report_expected(
        self,
        expected: TokenType,
        message: str,
        position: Position,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ) -> Diagnostic:
        """Record that a token of kind `expected` could not be completed."""
        diagnostic = Diagnostic(
            message=message,
            position=position,
            severity="error",
            expected=expected,
            code=code,
            help_text=help_text,
        )
        self._report(diagnostic)
        return diagnostic

    def has_errors(self) -> bool:
        """Check if lexer reported any errors."""
        return any(d.severity == "error" for d in self.diagnostics)

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get all diagnostics in the order they were reported."""
        return list(self.diagnostics)

    # ------------------------------------------------------------------
    # Scanners. Each starts with the cursor on the token's first character
    # and leaves it just past the last character it consumed.
    # ------------------------------------------------------------------

    def _scan_operator(self, start: Position) -> Token:
        """Longest spelling from OPERATOR_RULES wins."""
        for spelling, token_type in OPERATOR_RULES[self._line[self._cursor]]:
            if self._line.startswith(spelling, self._cursor):
                self._cursor += len(spelling)
                return Token(token_type, start, spelling)
        raise AssertionError(f"no operator rule matched at {start}")

    def _scan_string(self, start: Position) -> Token:
        self._cursor += 1  # Skip opening quote
        body = self._take_while(_is_word_char)

        if self._peek() == '"':
            self._cursor += 1  # Skip closing quote
        else:
            self.report_expected(
                TokenType.STRING,
                "unterminated string literal",
                self._current_position(),
                code="L002",
                help_text='String literals must be closed with a matching " quote.',
            )

        return Token(TokenType.STRING, start, body)

    def _scan_number(self, start: Position) -> Token:
        digits = self._take_while(lambda c: c in DIGITS)
        if len(digits) > MAX_NUMBER_DIGITS:
            self._report(create_number_too_long_warning(digits, start))
            return Token(TokenType.NUMBER, start, digits)
        return Token(TokenType.NUMBER, start, digits, int(digits))

    def _scan_word(self, start: Position) -> Token:
        spelling = self._take_while(_is_word_char)
        keyword: Optional[Hashable] = self._keywords.lookup(spelling)
        if keyword is not None:
            return Token(TokenType.KEYWORD, start, spelling, keyword)
        return Token(TokenType.IDENT, start, spelling)

    def _skip_other(self, start: Position) -> None:
        char = self._line[self._cursor]
        self._cursor += 1
        if self._strict:
            self._report(create_invalid_character_error(char, start))
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _skip_whitespace(self):
        while self._cursor < len(self._line) and self._line[self._cursor].isspace():
            self._cursor += 1

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        begin = self._cursor
        while self._cursor < len(self._line) and predicate(self._line[self._cursor]):
            self._cursor += 1
        return self._line[begin:self._cursor]

    def _peek(self) -> str:
        if self._cursor < len(self._line):
            return self._line[self._cursor]
        return ""

    def _current_position(self) -> Position:
        return Position(self._filename, self._row, self._cursor)

    def _report(self, diagnostic: Diagnostic):
        self.diagnostics.append(diagnostic)
        logger.debug("diagnostic: %s", diagnostic)


def tokenize_lines(lines: Iterable[str], filename: str = "<string>", **options) -> Lexer:
    """
    Feed each line to a fresh lexer, in order.

    Trailing line terminators are stripped, so lines read straight from a
    file object can be passed through.

    Returns:
        The lexer, holding the tokens and diagnostics
    """
    lexer = Lexer(filename, **options)
    for line in lines:
        lexer.scan_line(line.rstrip("\r\n"))
    return lexer


def tokenize_string(source: str, filename: str = "<string>", **options) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for positions and diagnostics

    Returns:
        List of tokens

    Raises:
        LexerError: If any error diagnostic was reported
    """
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    lexer = tokenize_lines(lines, filename, **options)

    for diagnostic in lexer.diagnostics:
        if diagnostic.severity == "error":
            raise LexerError(diagnostic)

    return list(lexer.tokens)


def tokenize_file(filepath: str, **options) -> Lexer:
    """
    Convenience function to tokenize a source file.

    Positions use the file's base name. Only a newline character ends a
    line, and bytes that are not valid UTF-8 become U+FFFD, which the
    scanner skips.

    Raises:
        OSError: If the file cannot be read
    """
    filename = os.path.basename(filepath)
    with open(filepath, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        return tokenize_lines(f, filename, **options)

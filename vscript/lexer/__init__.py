"""
VScript Lexer Package

Implements a line-oriented lexical analyzer (tokenizer) for the VScript
language.

Key Features:
- One call per source line, tokens accumulated in file order
- Longest-match operator table (`->` before `-`)
- Injectable, immutable keyword table
- Non-fatal diagnostics collected for the caller
- Optional strict mode for characters outside the grammar
"""

from .tokens import Token, TokenType, Position
from .keywords import Keyword, KeywordTable, DEFAULT_KEYWORDS
from .lexer import Lexer, CharCategory, classify, tokenize_lines, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "Position",
    "Keyword",
    "KeywordTable",
    "DEFAULT_KEYWORDS",
    "CharCategory",
    "classify",
    "tokenize_lines",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
]

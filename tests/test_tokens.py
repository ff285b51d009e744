"""
Tests for VScript token types, positions and the keyword table.
"""

import unittest
import dataclasses
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from vscript.lexer.tokens import Token, TokenType, Position, OPERATOR_RULES
from vscript.lexer.keywords import Keyword, KeywordTable, DEFAULT_KEYWORDS
from vscript.lexer.errors import Diagnostic, LexerError, ERROR_CODES, create_invalid_character_error


class TestPosition(unittest.TestCase):
    """Position storage and display."""

    def test_renders_one_based(self):
        pos = Position("main.vs", 0, 0)
        self.assertEqual(str(pos), "main.vs:1:1")
        self.assertEqual(str(Position("a.vs", 4, 10)), "a.vs:5:11")

    def test_rendering_is_idempotent(self):
        pos = Position("main.vs", 2, 7)
        self.assertEqual(str(pos), str(pos))
        self.assertEqual(str(pos), str(Position("main.vs", 2, 7)))

    def test_is_immutable(self):
        pos = Position("main.vs", 1, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            pos.row = 3

    def test_default(self):
        pos = Position()
        self.assertEqual((pos.filename, pos.row, pos.column), ("", 0, 0))


class TestToken(unittest.TestCase):
    """Token value type."""

    def test_default_is_sentinel(self):
        token = Token()
        self.assertEqual(token.type, TokenType.NONE)
        self.assertEqual(token.text, "")
        self.assertEqual(token.position, Position())
        self.assertIsNone(token.value)

    def test_listing_line(self):
        token = Token(TokenType.ARROW, Position("main.vs", 0, 9), "->")
        self.assertEqual(str(token), "<ARROW main.vs:1:10> ->")

    def test_type_name(self):
        self.assertEqual(str(TokenType.OPEN_PAREN), "OPEN_PAREN")
        self.assertEqual(str(TokenType.NONE), "NONE")

    def test_predicates(self):
        pos = Position("t", 0, 0)
        self.assertTrue(Token(TokenType.KEYWORD, pos, "fn").is_keyword)
        self.assertTrue(Token(TokenType.NUMBER, pos, "1", 1).is_literal)
        self.assertTrue(Token(TokenType.STRING, pos, "s").is_literal)
        self.assertTrue(Token(TokenType.MINUS, pos, "-").is_operator)
        self.assertTrue(Token(TokenType.OPEN_BRACE, pos, "{").is_operator)
        self.assertFalse(Token(TokenType.IDENT, pos, "x").is_operator)

    def test_is_immutable(self):
        token = Token(TokenType.IDENT, Position(), "x")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.text = "y"


class TestOperatorRules(unittest.TestCase):
    """Maximal-munch rule table."""

    def test_longest_spelling_first(self):
        for first, candidates in OPERATOR_RULES.items():
            lengths = [len(spelling) for spelling, _ in candidates]
            self.assertEqual(lengths, sorted(lengths, reverse=True), first)
            for spelling, _ in candidates:
                self.assertTrue(spelling.startswith(first))

    def test_every_rule_ends_with_single_character(self):
        for first, candidates in OPERATOR_RULES.items():
            self.assertEqual(candidates[-1][0], first)

    def test_dash_rules(self):
        self.assertEqual(OPERATOR_RULES["-"], (("->", TokenType.ARROW), ("-", TokenType.MINUS)))


class TestKeywordTable(unittest.TestCase):
    """Reserved word lookup."""

    def test_default_keywords(self):
        self.assertEqual(DEFAULT_KEYWORDS.lookup("fn"), Keyword.FN)
        self.assertEqual(DEFAULT_KEYWORDS.lookup("return"), Keyword.RETURN)
        self.assertEqual(len(DEFAULT_KEYWORDS), 2)
        self.assertEqual(sorted(DEFAULT_KEYWORDS), ["fn", "return"])

    def test_exact_match_only(self):
        for spelling in ("Fn", "FN", "f", "fnx", "ret", "returns", ""):
            self.assertIsNone(DEFAULT_KEYWORDS.lookup(spelling), spelling)
            self.assertNotIn(spelling, DEFAULT_KEYWORDS)

    def test_source_mapping_is_copied(self):
        entries = {"let": "LET"}
        table = KeywordTable(entries)
        entries["var"] = "VAR"
        self.assertIsNone(table.lookup("var"))
        self.assertEqual(table.lookup("let"), "LET")

    def test_table_cannot_be_mutated(self):
        with self.assertRaises(TypeError):
            DEFAULT_KEYWORDS._entries["while"] = "WHILE"


class TestDiagnostics(unittest.TestCase):
    """Diagnostic values and LexerError."""

    def test_rendering(self):
        diagnostic = Diagnostic(
            message="unterminated string literal",
            position=Position("main.vs", 0, 4),
            severity="error",
            expected=TokenType.STRING,
            code="L002",
        )
        self.assertEqual(
            str(diagnostic),
            "main.vs:1:5: error: expected STRING, unterminated string literal [L002]",
        )

    def test_invalid_character_error(self):
        diagnostic = create_invalid_character_error("@", Position("main.vs", 0, 2))
        self.assertEqual(diagnostic.code, "L001")
        self.assertEqual(diagnostic.severity, "error")
        self.assertIsNone(diagnostic.expected)
        self.assertIn("'@'", diagnostic.message)
        self.assertIn("L001", ERROR_CODES)
        self.assertIn("L003", ERROR_CODES)

    def test_invalid_character_error_non_printable(self):
        diagnostic = create_invalid_character_error("\x07", Position())
        self.assertIn("U+0007", diagnostic.help_text)

    def test_lexer_error_wraps_diagnostic(self):
        diagnostic = create_invalid_character_error("#", Position("a.vs", 1, 1))
        error = LexerError(diagnostic)
        self.assertIs(error.diagnostic, diagnostic)
        self.assertEqual(str(error), str(diagnostic))


if __name__ == '__main__':
    unittest.main()

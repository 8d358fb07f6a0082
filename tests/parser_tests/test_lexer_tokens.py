# tests/parser_tests/test_lexer_tokens.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for the RPN formula lexer.

Verifies that every glyph of the formula language maps onto the right token
type and that characters outside the grammar are rejected with their position.
"""

import pytest
from rpn.lexer import FormulaLexer
from rpn.exceptions import ParseError, UnrecognizedSymbol
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = FormulaLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text."""
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        # Constants and variables
        ("0", ["FALSE"]),
        ("1", ["TRUE"]),
        ("A", ["VARIABLE"]),
        ("z", ["VARIABLE"]),
        ("AB", ["VARIABLE", "VARIABLE"]),
        # Every ASCII operator
        ("!&|^>=", ["NOT", "AND", "OR", "XOR", "IMPLIES", "IFF"]),
        # A complete formula
        ("AB&C|!", ["VARIABLE", "VARIABLE", "AND", "VARIABLE", "OR", "NOT"]),
        ("10>", ["TRUE", "FALSE", "IMPLIES"]),
        # Unicode aliases
        ("⊤⊥", ["TRUE", "FALSE"]),
        ("¬∧∨⊕⇒⇔", ["NOT", "AND", "OR", "XOR", "IMPLIES", "IFF"]),
        ("AB∧¬", ["VARIABLE", "VARIABLE", "AND", "NOT"]),
        # Non-ASCII letters are variables
        ("é", ["VARIABLE"]),
        ("", []),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid formula syntax."""
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Got: {actual_types}"
        )

    def test_one_token_per_character(self):
        """Every token covers exactly one character at its own index."""
        tokens = list(self.lexer.tokenize("AB&C⇒"))

        assert [t.value for t in tokens] == ["A", "B", "&", "C", "⇒"]
        assert [t.index for t in tokens] == [0, 1, 2, 3, 4]

    INVALID_CHARACTER_CASES = [
        ("A B", " ", 1),
        (" ", " ", 0),
        ("AB&2", "2", 3),
        ("_", "_", 0),
        ("A(B", "(", 1),
        ("AB+", "+", 2),
        ("A\n", "\n", 1),
    ]

    @pytest.mark.parametrize("input_text, bad_char, position", INVALID_CHARACTER_CASES)
    def test_invalid_characters(self, input_text, bad_char, position):
        """Test lexer rejects characters outside the grammar."""
        with pytest.raises(UnrecognizedSymbol) as exc_info:
            self._tokenize_to_types(input_text)

        assert exc_info.value.character == bad_char
        assert exc_info.value.position == position
        assert isinstance(exc_info.value, ParseError)

    def test_error_message_mentions_character(self):
        """Error messages name the offending character and its position."""
        with pytest.raises(UnrecognizedSymbol, match=r"'\+' at position 2"):
            self._tokenize_to_types("AB+")

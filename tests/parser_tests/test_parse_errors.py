# tests/parser_tests/test_parse_errors.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Test suite for parser error detection and resource bounds

"""Test suite for parser error handling.

Each malformed formula must fail with the typed error matching the first
problem met by the left-to-right scan.
"""

import pytest
from rpn import parse
from rpn.exceptions import (
    IncompleteFormula,
    LimitExceededError,
    MissingOperand,
    ParseError,
    UnrecognizedSymbol,
)
from utils.limits import EngineLimits, UNLIMITED
from utils.logger import get_logger


class TestParseErrors:
    """Test cases for malformed formulas."""

    def setup_method(self):
        self.logger = get_logger()

    def test_empty_formula(self):
        """The empty string leaves nothing on the stack."""
        with pytest.raises(IncompleteFormula) as exc_info:
            parse("")

        assert exc_info.value.expected == 1
        assert exc_info.value.actual == 0

    INCOMPLETE_CASES = [
        ("AB", 2),
        ("10", 2),
        ("10x", 3),
        ("AB&C", 2),
        ("ABCD&", 3),
    ]

    @pytest.mark.parametrize("formula, remaining", INCOMPLETE_CASES)
    def test_incomplete_formula(self, formula, remaining):
        """Test that leftover operands are reported with their count."""
        with pytest.raises(IncompleteFormula) as exc_info:
            parse(formula)

        assert exc_info.value.expected == 1
        assert exc_info.value.actual == remaining

    MISSING_OPERAND_CASES = [
        ("!", "!", 0),
        ("&", "&", 0),
        ("A|", "|", 1),
        ("A^", "^", 1),
        ("AB&>", ">", 3),
        ("A=B", "=", 1),
        ("¬", "¬", 0),
        ("A∧", "∧", 1),
    ]

    @pytest.mark.parametrize("formula, operator, position", MISSING_OPERAND_CASES)
    def test_missing_operand(self, formula, operator, position):
        """Test operators applied to too few operands."""
        with pytest.raises(MissingOperand) as exc_info:
            parse(formula)

        self.logger.debug(f"{formula!r} -> {exc_info.value}")
        assert exc_info.value.character == operator
        assert exc_info.value.position == position

    UNRECOGNIZED_CASES = [
        ("A B&", " "),
        ("AB&2", "2"),
        ("AB&;", ";"),
        ("A_", "_"),
        ("(AB&)", "("),
        ("²", "²"),
    ]

    @pytest.mark.parametrize("formula, character", UNRECOGNIZED_CASES)
    def test_unrecognized_symbol(self, formula, character):
        """Test characters outside the grammar."""
        with pytest.raises(UnrecognizedSymbol) as exc_info:
            parse(formula)

        assert exc_info.value.character == character

    def test_first_error_wins(self):
        """The scan aborts at the first problem it meets."""
        # The operator is reached before the invalid character
        with pytest.raises(MissingOperand):
            parse("&x?")

        # The invalid character is reached before the end-of-input check
        with pytest.raises(UnrecognizedSymbol):
            parse("AB?")

    @pytest.mark.parametrize("formula", ["", "A!&", "AB#", "AB"])
    def test_all_errors_are_parse_errors(self, formula):
        """Every malformed-input error derives from ParseError."""
        with pytest.raises(ParseError):
            parse(formula)


class TestParserLimits:
    """Test cases for the depth bound enforced while parsing."""

    def test_depth_within_limit(self):
        limits = EngineLimits(max_depth=4)
        expr = parse("A!!!", limits)

        assert expr.operand.operand.operand.name == "A"

    def test_depth_over_limit(self):
        limits = EngineLimits(max_depth=4)

        with pytest.raises(LimitExceededError) as exc_info:
            parse("A!!!!", limits)

        assert exc_info.value.limit == "max_depth"
        assert exc_info.value.bound == 4
        assert exc_info.value.value == 5

    def test_depth_counts_deepest_branch(self):
        limits = EngineLimits(max_depth=3)

        parse("AB&CD&|", limits)
        with pytest.raises(LimitExceededError):
            parse("AB&C&D|", limits)

    def test_limit_error_is_not_a_parse_error(self):
        with pytest.raises(LimitExceededError) as exc_info:
            parse("A" + "!" * 300)

        assert not isinstance(exc_info.value, ParseError)

    def test_unlimited_depth(self):
        formula = "A" + "!" * 300
        expr = parse(formula, UNLIMITED)

        assert isinstance(expr.operand, type(expr))

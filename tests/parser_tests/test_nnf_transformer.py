# tests/parser_tests/test_nnf_transformer.py
# This file is part of Veritas - A Propositional Logic Engine
#
# NNF transformation test suite

"""Test suite for the NNF (Negation Normal Form) transformer.

Tests verify the exact rewrite output, the structural restriction of NNF and
that the transformation is idempotent.
"""

import pytest
from rpn import negation_normal_form, parse, parse_and_nnf, to_rpn
from rpn.ast_nodes import Constant, Not, Variable
from rpn.nnf_transformer import NNFTransformer, is_nnf
from utils.logger import get_logger


class TestNNFTransformation:
    """Test cases for NNF transformation correctness and properties."""

    # Test cases: (input_formula, expected_nnf_output)
    TEST_CASES = [
        # Leaves pass through
        ("A", "A"),
        ("A!", "A!"),
        ("1", "1"),
        # Double negation
        ("A!!", "A"),
        ("A!!!", "A!"),
        # Negated constants fold
        ("1!", "0"),
        ("0!!", "0"),
        # Material conditional
        ("AB>", "A!B|"),
        # De Morgan's laws
        ("AB&!", "A!B!|"),
        ("AB|!", "A!B!&"),
        # Equivalence and exclusive or
        ("AB=", "A!B|B!A|&"),
        ("AB^", "AB!&A!B&|"),
        # Negated compound operators
        ("AB^!", "AB&A!B!&|"),
        ("AB>!", "AB!&"),
        ("AB=!", "AB!&A!B&|"),
        # Nested negation pushed to the leaves
        ("AB|C&!", "A!B!&C!|"),
        ("AB&!C!|!", "AB&C&"),
        ("AB>C>", "AB!&C|"),
        ("AB>!C|", "AB!&C|"),
    ]

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_nnf_transformation_correctness(self, input_formula, expected_output):
        """Test NNF transformation produces the expected RPN."""
        logger = get_logger()

        result = negation_normal_form(input_formula)
        logger.debug(f"Input: {input_formula} Output: {result} Expected: {expected_output}")

        assert result == expected_output, (
            f"Transformation mismatch:\n"
            f"Input: {input_formula}\n"
            f"Got: {result}\n"
            f"Expected: {expected_output}"
        )

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_nnf_structure_validity(self, input_formula, expected_output):
        """Test that transformed formulas only use &, | and negated leaves."""
        result = parse_and_nnf(input_formula)

        assert is_nnf(result), f"Invalid NNF structure: {result}"

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_nnf_transformation_idempotence(self, input_formula, expected_output):
        """Applying the transformation twice yields the same tree."""
        first = parse_and_nnf(input_formula)
        second = parse_and_nnf(to_rpn(first))

        assert first == second

    def test_input_tree_is_not_modified(self):
        """The transformer builds a new tree and leaves its input intact."""
        original = parse("AB=!")
        snapshot = to_rpn(original)

        NNFTransformer().transform(original)

        assert to_rpn(original) == snapshot

    def test_negated_leaf_nodes(self):
        assert NNFTransformer().transform(Not(Constant(False))) == Constant(True)
        assert NNFTransformer().transform(Not(Variable("q"))) == Not(Variable("q"))

    @pytest.mark.parametrize("formula", ["AB^", "AB>", "AB=", "AB&!", "A!!", "AB=!"])
    def test_is_nnf_rejects_raw_formulas(self, formula):
        assert not is_nnf(parse(formula))

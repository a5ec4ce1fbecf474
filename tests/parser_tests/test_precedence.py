# tests/parser_tests/test_precedence.py
# This file is part of Entail - A Propositional Argument Validator
#
# Test suite for postfix conversion precedence and associativity

"""Test suite for infix-to-postfix conversion.

This module verifies that the converter orders operators according to the
precedence rules and associativity, and that the resulting postfix formulas
evaluate exactly like the conventional reading of the infix text.

Operator precedence (highest to lowest):
1. () - parentheses for grouping
2. ! - negation (right-associative)
3. & - conjunction (left-associative)
4. | - disjunction (left-associative)
5. > - implication (right-associative)
"""

from itertools import product

import pytest

from logic.evaluator import evaluate
from logic.formula import Formula
from logic.variables import VariableSet
from parser import parse, to_postfix, tokenize
from parser.tokens import format_tokens
from utils.logger import get_logger


class TestPostfixPrecedence:
    """Test cases for operator precedence and associativity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # Test cases: (infix expression, expected postfix text)
    PRECEDENCE_TEST_CASES = [
        # NOT binds tighter than AND
        ("! p & q", "p ! q &"),
        ("!p | q", "p ! q |"),
        # AND binds tighter than OR
        ("p | q & r", "p q r & |"),
        ("p & q | r", "p q & r |"),
        # OR binds tighter than IMPLIES
        ("p > q | r", "p q r | >"),
        ("p | q > r", "p q | r >"),
        # Mixed chain
        ("p & !q > r | s", "p q ! & r s | >"),
        # Left associativity for AND/OR
        ("p & q & r", "p q & r &"),
        ("p | q | r", "p q | r |"),
        # Right associativity for NOT/IMPLIES
        ("!!p", "p ! !"),
        ("p > q > r", "p q r > >"),
        # Parentheses override precedence
        ("!(p & q)", "p q & !"),
        ("( p | q ) > ! r", "p q | r ! >"),
        ("(p > q) > r", "p q > r >"),
        ("p > (q > r)", "p q r > >"),
        ("(k | m) > !a", "k m | a ! >"),
        ("((p))", "p"),
    ]

    @pytest.mark.parametrize("expression, expected_postfix", PRECEDENCE_TEST_CASES)
    def test_postfix_order(self, expression, expected_postfix):
        """Test that conversion emits operators in precedence order.

        Args:
            expression: Infix expression
            expected_postfix: Expected postfix tokens joined by spaces
        """
        self.logger.debug(f"Testing precedence for: {expression}")
        actual = format_tokens(to_postfix(tokenize(expression)))

        assert actual == expected_postfix, (
            f"Postfix mismatch for '{expression}':\n"
            f"Expected: {expected_postfix}\n"
            f"Actual: {actual}"
        )

    # Test cases: (infix expression, conventional reading as a Python function)
    SEMANTIC_TEST_CASES = [
        ("! p & q", lambda p, q, r: (not p) and q),
        ("p | q & r", lambda p, q, r: p or (q and r)),
        ("p & q | r", lambda p, q, r: (p and q) or r),
        ("p > q | r", lambda p, q, r: (not p) or (q or r)),
        ("p & q > r", lambda p, q, r: (not (p and q)) or r),
        ("p > q > r", lambda p, q, r: (not p) or ((not q) or r)),
        ("!(p | q) > r", lambda p, q, r: (p or q) or r),
        ("!p | !q & r", lambda p, q, r: (not p) or ((not q) and r)),
        ("(p > q) & (q > r) > (p > r)", lambda p, q, r: True),
        ("p & (q | !r)", lambda p, q, r: p and (q or not r)),
    ]

    @pytest.mark.parametrize("expression, reference", SEMANTIC_TEST_CASES)
    def test_evaluation_matches_conventional_reading(self, expression, reference):
        """Test postfix evaluation agrees with the conventional truth value.

        Args:
            expression: Infix expression over p, q, r
            reference: Function computing the expected value
        """
        variables = VariableSet(["p", "q", "r"])
        formula = Formula.compile("F", expression)

        for values in product([False, True], repeat=3):
            actual = evaluate(formula, variables, values)
            assert actual == reference(*values), (
                f"'{expression}' evaluated to {actual} for p,q,r={values}"
            )

    def test_not_binds_tighter_than_and(self):
        """Test '! p & q' reads as (not p) and q."""
        variables = VariableSet(["p", "q"])
        formula = Formula.compile("F", "! p & q")

        assert evaluate(formula, variables, (True, False)) is False
        # Under not (p and q) this row would be true
        assert evaluate(formula, variables, (False, False)) is False
        assert evaluate(formula, variables, (False, True)) is True

    def test_implication_is_right_associative(self):
        """Test 'p > q > r' reads as p > (q > r)."""
        variables = VariableSet(["p", "q", "r"])
        formula = Formula.compile("F", "p > q > r")

        assert evaluate(formula, variables, (True, False, False)) is True
        # Left grouping would give (F > F) > F = F here
        assert evaluate(formula, variables, (False, False, False)) is True

    def test_english_parse(self):
        """Test the full parse pipeline with English keywords."""
        assert format_tokens(parse("p and q then not r", english=True)) == "p q & r ! >"
        assert format_tokens(parse("(P OR Q) implies NO R", english=True)) == "p q | r ! >"

    def test_symbol_mode_keeps_words_as_identifiers(self):
        """Test English words are plain identifiers outside English mode."""
        assert format_tokens(parse("p and q")) == "p and q"

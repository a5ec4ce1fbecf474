# tests/parser_tests/test_parse_errors.py
# This file is part of Entail - A Propositional Argument Validator
#
# Test suite for postfix conversion error handling

"""Test suite for converter error handling.

Unbalanced parentheses are the only failure detected before evaluation.
Other malformed shapes (dangling operators, juxtaposed variables, empty
input) convert without complaint and are rejected by the evaluator.
"""

import pytest

from parser import ParseError, UnbalancedParenthesesError, parse, to_postfix, tokenize
from utils.logger import get_logger


class TestConverterErrors:
    """Test cases for unbalanced parenthesis detection."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    UNBALANCED_CASES = [
        ("( p & q", "Unclosed parenthesis"),
        ("p & q )", "Unopened parenthesis"),
        ("(p | (q & r)", "Unclosed outer parenthesis"),
        ("p) & (q", "Close before open"),
        (")(", "Reversed pair"),
        ("(()", "Extra open parenthesis"),
        ("())", "Extra close parenthesis"),
        ("(", "Lone open parenthesis"),
        (")", "Lone close parenthesis"),
    ]

    @pytest.mark.parametrize("expression, description", UNBALANCED_CASES)
    def test_unbalanced_parentheses(self, expression, description):
        """Test unbalanced input raises UnbalancedParenthesesError.

        Args:
            expression: Expression with unbalanced parentheses
            description: Description of the defect
        """
        self.logger.debug(f"Testing parse error for: '{expression}' ({description})")

        with pytest.raises(UnbalancedParenthesesError) as exc_info:
            to_postfix(tokenize(expression))

        assert len(str(exc_info.value)) > 0, "Error should carry a message"

    def test_unbalanced_error_is_parse_error(self):
        """Test the converter failure belongs to the ParseError family."""
        assert issubclass(UnbalancedParenthesesError, ParseError)

        with pytest.raises(ParseError):
            parse("( p & q")

    def test_english_mode_unbalanced(self):
        """Test English-mode input is checked the same way."""
        with pytest.raises(UnbalancedParenthesesError):
            parse("(p and q", english=True)

    CONVERTIBLE_MALFORMED_CASES = [
        "p &",
        "p q",
        "& p",
        "!",
        "()",
        "",
    ]

    @pytest.mark.parametrize("expression", CONVERTIBLE_MALFORMED_CASES)
    def test_structural_defects_pass_conversion(self, expression):
        """Test converter only checks parentheses, not operator arity."""
        postfix = to_postfix(tokenize(expression))
        assert isinstance(postfix, tuple)

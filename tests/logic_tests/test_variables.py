# tests/logic_tests/test_variables.py
# This file is part of Entail - A Propositional Argument Validator
#
# Test suite for variable declarations and row assignments

"""Test suite for VariableSet.

Covers declaration validation (capacity, duplicates, unusable names) and the
mask-to-assignment mapping that fixes row order in every truth table.
"""

import pytest

from logic.exceptions import (
    ArgumentError,
    CapacityError,
    DuplicateVariableError,
    InvalidVariableNameError,
)
from logic.limits import MAX_VARIABLES
from logic.variables import VariableSet


class TestVariableDeclaration:
    """Test cases for declaring variables."""

    def test_names_are_lowercased_and_ordered(self):
        variables = VariableSet(["K", " m ", "Alpha"])

        assert variables.names == ("k", "m", "alpha")
        assert list(variables) == ["k", "m", "alpha"]
        assert len(variables) == 3
        assert variables.index_of("alpha") == 2
        assert variables.index_of("z") is None
        assert "m" in variables

    @pytest.mark.parametrize("names", [["p", "P"], ["rain", "snow", "RAIN"]])
    def test_duplicates_rejected(self, names):
        with pytest.raises(DuplicateVariableError):
            VariableSet(names)

    def test_capacity_bounds(self):
        VariableSet([f"v{i}" for i in range(MAX_VARIABLES)])

        with pytest.raises(CapacityError):
            VariableSet([])
        with pytest.raises(CapacityError):
            VariableSet([f"v{i}" for i in range(MAX_VARIABLES + 1)])

    @pytest.mark.parametrize("name", ["", "   ", "p q", "p&", "(x)", "!p", "a>b", "x|y"])
    def test_unusable_names_rejected(self, name):
        """Test names that would not lex back as one identifier."""
        with pytest.raises(InvalidVariableNameError):
            VariableSet([name])

    @pytest.mark.parametrize("name", ["and", "NOT", "then", "if", "no", "~x"])
    def test_english_keywords_rejected_in_english_mode(self, name):
        with pytest.raises(InvalidVariableNameError):
            VariableSet([name], english=True)

        # The same names are ordinary identifiers in symbol mode
        VariableSet([name])

    def test_declaration_errors_share_a_base(self):
        for error in (CapacityError, DuplicateVariableError, InvalidVariableNameError):
            assert issubclass(error, ArgumentError)
            assert issubclass(error, ValueError)


class TestAssignments:
    """Test cases for the mask-to-assignment mapping."""

    def setup_method(self):
        self.variables = VariableSet(["a", "b", "c"])

    MASK_CASES = [
        (0, (False, False, False)),
        (1, (False, False, True)),
        (2, (False, True, False)),
        (4, (True, False, False)),
        (6, (True, True, False)),
        (7, (True, True, True)),
    ]

    @pytest.mark.parametrize("mask, expected", MASK_CASES)
    def test_first_variable_is_most_significant_bit(self, mask, expected):
        assert self.variables.assignment(mask) == expected

    def test_assignments_cover_every_mask_in_order(self):
        rows = list(self.variables.assignments())

        assert self.variables.row_count == 8
        assert len(rows) == 8
        assert len(set(rows)) == 8
        assert rows == [self.variables.assignment(mask) for mask in range(8)]
        # First variable changes slowest
        assert [row[0] for row in rows] == [False] * 4 + [True] * 4
        assert [row[2] for row in rows] == [False, True] * 4

    @pytest.mark.parametrize("mask", [-1, 8, 100])
    def test_mask_out_of_range(self, mask):
        with pytest.raises(ValueError):
            self.variables.assignment(mask)

    def test_bind_from_mapping(self):
        assert self.variables.bind({"A": True, "b": 0, "c": 1}) == (True, False, True)

    def test_bind_rejects_missing_or_extra_names(self):
        with pytest.raises(KeyError):
            self.variables.bind({"a": True, "b": False})
        with pytest.raises(KeyError):
            self.variables.bind({"a": True, "b": False, "c": True, "d": True})

# logic/truth_table.py
# This file is part of Entail - A Propositional Argument Validator
#
# Truth table construction over every assignment of the declared variables

"""Truth table construction.

Rows are produced in ascending mask order, one per assignment, so row ``r``
always holds the assignment encoded by the integer ``r``. Each row lists the
variable values (declaration order) followed by every formula's value
(premises in declaration order, conclusion last).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from utils.logger import get_logger

from .evaluator import evaluate
from .exceptions import EvaluationError
from .formula import Formula
from .variables import VariableSet

Row = Tuple[bool, ...]


@dataclass(frozen=True)
class TruthTable:
    """Read-only table of 2^N rows by N + F boolean columns.

    Attributes:
        variables: Variable names, one column each
        formulas: Formula display names, one column each after the variables
        rows: Row ``r`` is the assignment for mask ``r`` plus formula values
    """

    variables: Tuple[str, ...]
    formulas: Tuple[str, ...]
    rows: Tuple[Row, ...]

    @property
    def variable_count(self) -> int:
        return len(self.variables)

    @property
    def formula_count(self) -> int:
        return len(self.formulas)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def headers(self) -> Tuple[str, ...]:
        return self.variables + self.formulas

    def column(self, index: int) -> Tuple[bool, ...]:
        return tuple(row[index] for row in self.rows)

    def variable_values(self, row: int) -> Row:
        return self.rows[row][: self.variable_count]

    def formula_values(self, row: int) -> Row:
        return self.rows[row][self.variable_count :]

    def assignment_of(self, row: int) -> Dict[str, bool]:
        """Map each variable name to its value in ``row``."""
        return dict(zip(self.variables, self.variable_values(row)))


def build(variables: VariableSet, formulas: Sequence[Formula]) -> TruthTable:
    """Evaluate every formula on every assignment of ``variables``.

    Args:
        variables: Declared variables; their order fixes the columns
        formulas: Premises in order, then the conclusion

    Returns:
        Completed truth table

    Raises:
        EvaluationError: Any formula fails on any row; no partial table is
            returned
    """
    logger = get_logger()
    rows = []

    for mask in range(variables.row_count):
        assignment = variables.assignment(mask)
        values = []
        for formula in formulas:
            try:
                values.append(evaluate(formula, variables, assignment))
            except EvaluationError:
                logger.debug(f"Evaluation of {formula.name} failed on row {mask}")
                raise
        rows.append(assignment + tuple(values))

    table = TruthTable(
        variables=variables.names,
        formulas=tuple(formula.name for formula in formulas),
        rows=tuple(rows),
    )
    logger.table_built(table.row_count, len(table.headers))
    return table

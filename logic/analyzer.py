# logic/analyzer.py
# This file is part of Entail - A Propositional Argument Validator
#
# Validity and satisfiability analysis over a completed truth table

"""Argument analysis.

Scans a truth table whose formula columns are the premises followed by the
conclusion. Validity fails on any row where every premise holds and the
conclusion does not; the first such row (lowest mask) is reported as the
counterexample. The premise set is satisfiable when some row makes every
premise and the conclusion true. With no premises both questions reduce to
the conclusion alone: valid iff it is a tautology, satisfiable iff it holds
somewhere.
"""

from typing import Optional

from utils.logger import get_logger

from .truth_table import TruthTable
from .verdict import Verdict


def analyze(table: TruthTable, premise_count: Optional[int] = None) -> Verdict:
    """Decide validity and satisfiability from ``table``.

    Args:
        table: Truth table with the conclusion as its last formula column
        premise_count: Number of premise columns; defaults to every formula
            column but the last

    Returns:
        Verdict with the first counterexample row, if any

    Raises:
        ValueError: The table has no formula columns, or ``premise_count``
            does not leave exactly the conclusion after the premises
    """
    formula_count = table.formula_count
    if formula_count == 0:
        raise ValueError("Truth table has no conclusion column")
    if premise_count is None:
        premise_count = formula_count - 1
    if premise_count != formula_count - 1:
        raise ValueError(
            f"Expected {formula_count - 1} premises before the conclusion, got {premise_count}"
        )

    first_premise = table.variable_count
    conclusion_index = table.variable_count + formula_count - 1

    satisfiable = False
    counterexample_row: Optional[int] = None

    for index, row in enumerate(table.rows):
        all_premises = all(row[first_premise : first_premise + premise_count])
        if not all_premises:
            continue
        if row[conclusion_index]:
            satisfiable = True
        elif counterexample_row is None:
            counterexample_row = index

    verdict = Verdict(
        satisfiable=satisfiable,
        valid=counterexample_row is None,
        counterexample_row=counterexample_row,
    )
    get_logger().verdict_reached(verdict.satisfiable, verdict.valid, verdict.counterexample_row)
    return verdict

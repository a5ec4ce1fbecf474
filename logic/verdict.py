# logic/verdict.py
# This file is part of Entail - A Propositional Argument Validator
#
# Outcome of analyzing an argument's truth table

"""
Verdict for an argument, derived from its truth table and recomputed whenever
the table changes.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Verdict:
    """
    Satisfiability and validity of an argument.

    Attributes:
        satisfiable: some row makes every premise and the conclusion true.
        valid: no row makes every premise true and the conclusion false.
        counterexample_row: lowest row disproving validity, None when valid.
    """
    satisfiable: bool
    valid: bool
    counterexample_row: Optional[int] = None

    def __post_init__(self):
        if self.valid != (self.counterexample_row is None):
            raise ValueError("An invalid verdict needs exactly one counterexample row")

    def __str__(self) -> str:
        if self.valid:
            validity = "VALID"
        else:
            validity = f"INVALID (counterexample row {self.counterexample_row})"
        satisfiable = "SATISFIABLE" if self.satisfiable else "UNSATISFIABLE"
        return f"{validity}, {satisfiable}"

# logic/argument.py
# This file is part of Entail - A Propositional Argument Validator
#
# Argument declaration: capacity checks, formula compilation, analysis

"""
Argument: the caller-side boundary of the engine.

Declaring an Argument checks every capacity limit, validates the variable
names and compiles each premise and the conclusion exactly once. Building
the truth table and analyzing it happen on demand through ``evaluate``.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from utils.logger import get_logger

from .analyzer import analyze
from .exceptions import CapacityError
from .formula import Formula
from .limits import MAX_PREMISES
from .truth_table import TruthTable, build
from .variables import VariableSet
from .verdict import Verdict

CONCLUSION_NAME = "Conclusion"


def premise_name(index: int) -> str:
    """Display name of the premise at zero-based ``index``."""
    return f"P{index + 1}"


@dataclass(frozen=True)
class ArgumentReport:
    """Truth table of an argument together with its verdict."""
    table: TruthTable
    verdict: Verdict

    @property
    def counterexample(self) -> Optional[Dict[str, bool]]:
        """Variable values of the first counterexample row, if invalid."""
        if self.verdict.counterexample_row is None:
            return None
        return self.table.assignment_of(self.verdict.counterexample_row)


class Argument:
    """
    Premises and a conclusion over a declared set of variables.

    Args:
        variables: Variable names; their order fixes the table columns.
        premises: Premise texts, in order (may be empty).
        conclusion: Conclusion text.
        english: Normalize English connective words before parsing.

    Raises:
        CapacityError: too many premises, variables or tokens.
        DuplicateVariableError / InvalidVariableNameError: bad declarations.
        ParseError: a formula has unbalanced parentheses.
    """

    def __init__(
        self,
        variables: Sequence[str],
        premises: Sequence[str],
        conclusion: str,
        english: bool = False,
    ):
        if len(premises) > MAX_PREMISES:
            raise CapacityError(
                f"At most {MAX_PREMISES} premises are supported, got {len(premises)}"
            )

        self.english = english
        self.variables = VariableSet(variables, english=english)
        self.premises: Tuple[Formula, ...] = tuple(
            Formula.compile(premise_name(i), text, english=english)
            for i, text in enumerate(premises)
        )
        self.conclusion = Formula.compile(CONCLUSION_NAME, conclusion, english=english)

    @property
    def formulas(self) -> Tuple[Formula, ...]:
        """Premises in declaration order followed by the conclusion."""
        return self.premises + (self.conclusion,)

    def truth_table(self) -> TruthTable:
        """Build the full truth table; raises EvaluationError on a bad formula."""
        return build(self.variables, self.formulas)

    def evaluate(self) -> ArgumentReport:
        """Build the truth table and analyze it."""
        get_logger().debug(
            f"Evaluating argument with {len(self.premises)} premises over {len(self.variables)} variables"
        )
        table = self.truth_table()
        return ArgumentReport(table=table, verdict=analyze(table, len(self.premises)))

    def __repr__(self) -> str:
        premises = [p.source for p in self.premises]
        return (
            f"Argument(variables={list(self.variables.names)!r}, premises={premises!r}, "
            f"conclusion={self.conclusion.source!r}, english={self.english!r})"
        )

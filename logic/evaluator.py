# logic/evaluator.py
# This file is part of Entail - A Propositional Argument Validator
#
# Stack-based evaluation of postfix formulas

"""Postfix formula evaluation.

Evaluates a compiled Formula against one assignment of the declared
variables using a boolean stack that is local to the call. Binary operators
pop their right operand first, so the value pushed earlier (the operand that
appears earlier in the source) is always the left one; for IMPLIES that is
the antecedent.

The evaluator is the only place where an identifier outside the declared
VariableSet is detected, because the lexer accepts any text as a name.
"""

from typing import List, Sequence

from parser.tokens import Operator, Variable

from .exceptions import (
    ArityError,
    EvaluationError,
    MalformedResultError,
    UnknownVariableError,
)
from .formula import Formula
from .variables import VariableSet


def evaluate(formula: Formula, variables: VariableSet, assignment: Sequence[bool]) -> bool:
    """Compute the truth value of ``formula`` under ``assignment``.

    Args:
        formula: Compiled postfix formula
        variables: Declared variables, fixing the meaning of each position
            in ``assignment``
        assignment: One boolean per declared variable, in declaration order

    Returns:
        Truth value of the formula

    Raises:
        UnknownVariableError: The formula names an undeclared variable
        ArityError: An operator lacks operands
        MalformedResultError: The stack does not end with exactly one value
    """
    if len(assignment) != len(variables):
        raise ValueError(
            f"Assignment has {len(assignment)} values for {len(variables)} variables"
        )

    stack: List[bool] = []

    for token in formula.postfix:
        if isinstance(token, Variable):
            index = variables.index_of(token.name)
            if index is None:
                raise UnknownVariableError(token.name)
            stack.append(bool(assignment[index]))

        elif isinstance(token, Operator):
            if len(stack) < token.arity:
                raise ArityError(
                    f"'{token}' needs {token.arity} operand(s), found {len(stack)}"
                )
            operands = stack[-token.arity:]
            del stack[-token.arity:]
            stack.append(token.apply(*operands))

        else:
            raise EvaluationError(f"Unexpected token '{token}' in postfix formula")

    if len(stack) != 1:
        raise MalformedResultError(len(stack))

    return stack[0]

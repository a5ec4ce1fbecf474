# logic/exceptions.py
# This file is part of Entail - A Propositional Argument Validator
#
# Exceptions for formula evaluation and argument declaration

"""Exceptions raised while evaluating formulas or declaring arguments.

Evaluation errors are deterministic defects of a formula (or of the variable
declaration it is checked against); the engine never substitutes a default
truth value for them. Declaration errors are raised before the engine runs.
"""


class EvaluationError(RuntimeError):
    """Base class for failures while evaluating a postfix formula.

    Reported to the user as "malformed expression or unknown variable".
    """

    pass


class ArityError(EvaluationError):
    """An operator found fewer operands on the stack than it needs."""

    pass


class UnknownVariableError(EvaluationError):
    """A formula references an identifier that was never declared."""

    def __init__(self, name: str):
        super().__init__(f"Unknown variable '{name}'")
        self.name = name


class MalformedResultError(EvaluationError):
    """Evaluation finished with a stack depth other than one."""

    def __init__(self, depth: int):
        super().__init__(f"Formula left {depth} values on the stack (expected 1)")
        self.depth = depth


class ArgumentError(ValueError):
    """Base class for invalid argument declarations."""

    pass


class CapacityError(ArgumentError):
    """A variable, premise or token count exceeds the supported maximum."""

    pass


class DuplicateVariableError(ArgumentError):
    """The same variable name (case-insensitively) was declared twice."""

    pass


class InvalidVariableNameError(ArgumentError):
    """A variable name cannot be referenced as a single identifier."""

    pass

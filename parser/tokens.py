# parser/tokens.py
# This file is part of Entail - A Propositional Argument Validator
#
# Token variants produced by the lexer and consumed by the converter/evaluator

"""Token classes for propositional formulas.

Tokens form a small closed set of immutable variants. Operator tokens carry
everything the converter and the evaluator need at class level (symbol,
precedence, associativity, arity and truth function) so neither stage has to
compare strings.

Token Types:
    Variable: Identifier with a lowercased name payload
    Not, And, Or, Implies: Logical operators
    LeftParen, RightParen: Grouping punctuation

Precedence (highest to lowest): Not (3), And (2), Or (1), Implies (0).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all formula tokens.

    Two tokens are equal when they have the same concrete type and, for
    variables, the same name.
    """

    symbol: ClassVar[str] = ""

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class Variable(Token):
    """Propositional variable reference.

    Attributes:
        name: Lowercased identifier text
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Operator(Token):
    """Base class for logical connectives.

    Subclasses set ``precedence``, ``right_associative`` and ``arity`` and
    implement ``apply`` with exactly ``arity`` boolean operands, given in
    source order.
    """

    precedence: ClassVar[int] = -1
    right_associative: ClassVar[bool] = False
    arity: ClassVar[int] = 2

    def apply(self, *operands: bool) -> bool:
        """Compute the truth function for the given operands.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def yields_to(self, top: Operator) -> bool:
        """Return True if ``top`` must be emitted before this operator is pushed.

        Equal precedence pops only for left-associative incoming operators.
        """
        if top.precedence > self.precedence:
            return True
        return top.precedence == self.precedence and not self.right_associative


@dataclass(frozen=True, slots=True)
class Not(Operator):
    """Logical negation."""

    symbol = "!"
    precedence = 3
    right_associative = True
    arity = 1

    def apply(self, operand: bool) -> bool:
        return not operand


@dataclass(frozen=True, slots=True)
class And(Operator):
    """Logical conjunction."""

    symbol = "&"
    precedence = 2

    def apply(self, left: bool, right: bool) -> bool:
        return left and right


@dataclass(frozen=True, slots=True)
class Or(Operator):
    """Inclusive disjunction."""

    symbol = "|"
    precedence = 1

    def apply(self, left: bool, right: bool) -> bool:
        return left or right


@dataclass(frozen=True, slots=True)
class Implies(Operator):
    """Material implication; ``left`` is the antecedent."""

    symbol = ">"
    precedence = 0
    right_associative = True

    def apply(self, left: bool, right: bool) -> bool:
        return (not left) or right


@dataclass(frozen=True, slots=True)
class LeftParen(Token):
    symbol = "("


@dataclass(frozen=True, slots=True)
class RightParen(Token):
    symbol = ")"


def format_tokens(tokens) -> str:
    """Join tokens with single spaces, e.g. ``p q | r ! >``."""
    return " ".join(str(token) for token in tokens)

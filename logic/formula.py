# logic/formula.py
# This file is part of Entail - A Propositional Argument Validator
#
# Named postfix formula compiled once from its source text

"""
Encapsulates a premise or conclusion after parsing.

A Formula is compiled exactly once, when the argument is declared: the source
text is normalized, lexed and converted to postfix, and only the postfix
tokens are kept for evaluation. The truth-table builder never goes back to
the text.
"""

from dataclasses import dataclass
from typing import Tuple

from parser.converter import to_postfix
from parser.lexer import tokenize
from parser.normalizer import normalize
from parser.tokens import Token, format_tokens
from utils.logger import get_logger

from .exceptions import CapacityError
from .limits import MAX_TOKENS


@dataclass(frozen=True)
class Formula:
    """
    A display name plus the postfix form of the formula.

    Attributes:
        name: Column header, e.g. "P1" or "Conclusion".
        postfix: Tokens in Reverse Polish order.
        source: Text the formula was compiled from.
    """
    name: str
    postfix: Tuple[Token, ...]
    source: str = ""

    @classmethod
    def compile(
        cls,
        name: str,
        source: str,
        english: bool = False,
        max_tokens: int = MAX_TOKENS,
    ) -> "Formula":
        """
        Parse ``source`` into a Formula.

        Raises:
            CapacityError: the expression has more than ``max_tokens`` tokens.
            ParseError: parentheses are unbalanced.
        """
        tokens = tokenize(normalize(source, english))
        if len(tokens) > max_tokens:
            raise CapacityError(
                f"{name} has {len(tokens)} tokens; at most {max_tokens} are supported"
            )
        formula = cls(name=name, postfix=to_postfix(tokens), source=source)
        get_logger().formula_compiled(name, source, format_tokens(formula.postfix))
        return formula

    def __str__(self) -> str:
        return format_tokens(self.postfix)

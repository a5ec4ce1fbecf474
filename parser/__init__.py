# parser/__init__.py
# This file is part of Entail - A Propositional Argument Validator
#
# Formula lexing, normalization and postfix conversion

"""Propositional formula parsing for argument validation.

This package turns the text of a premise or conclusion into the postfix token
sequence that the evaluator runs once per truth-table row. The pipeline has
three stages, each usable on its own:

    normalize: optional English keyword mapping (``and`` -> ``&`` ...)
    tokenize: split the expression into Variable/operator/paren tokens
    to_postfix: shunting-yard conversion to Reverse Polish order

Supported Logic:
    - Propositional variables (any identifier, case-insensitive)
    - NOT (!), AND (&), OR (|), IMPLIES (>)
    - Parenthetical grouping

Example:
    >>> from parser import parse
    >>> from parser.tokens import format_tokens
    >>> format_tokens(parse("p and q then not r", english=True))
    'p q & r ! >'
"""

from typing import Tuple

from .converter import to_postfix
from .exceptions import ParseError, UnbalancedParenthesesError
from .lexer import tokenize
from .normalizer import normalize
from .tokens import Token
from utils.logger import get_logger


def parse(source: str, english: bool = False) -> Tuple[Token, ...]:
    """Parse an infix formula string into postfix tokens.

    Args:
        source: Premise or conclusion text
        english: Apply English keyword normalization first

    Returns:
        Postfix token sequence

    Raises:
        ParseError: Parentheses are unbalanced
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    postfix = to_postfix(tokenize(normalize(source, english)))

    logger.debug(f"Formula parsed into {len(postfix)} postfix tokens")
    return postfix


__all__ = [
    "parse",
    "normalize",
    "tokenize",
    "to_postfix",
    "ParseError",
    "UnbalancedParenthesesError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula lexing and postfix conversion"

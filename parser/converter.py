# parser/converter.py
# This file is part of Entail - A Propositional Argument Validator
#
# Infix to postfix conversion using the shunting-yard algorithm

"""Infix-to-postfix conversion for propositional formulas.

Converts the lexer's token sequence into Reverse Polish order with an
explicit operator stack, so evaluation needs no recursion and no
parentheses. Precedence and associativity come from the operator token
classes:

Operator precedence (highest to lowest):
- ! (NOT): right-associative
- & (AND): left-associative
- | (OR): left-associative
- > (IMPLIES): right-associative
"""

from typing import List, Sequence, Tuple

from .exceptions import UnbalancedParenthesesError
from .tokens import LeftParen, Operator, RightParen, Token, Variable, format_tokens
from utils.logger import get_logger


def to_postfix(tokens: Sequence[Token]) -> Tuple[Token, ...]:
    """Convert infix tokens to postfix order.

    Variables go straight to the output. An incoming operator first emits
    every stacked operator it yields to, then is pushed. ``(`` is pushed
    unconditionally and ``)`` unwinds the stack down to its partner.

    Args:
        tokens: Infix tokens as produced by ``tokenize``

    Returns:
        Equivalent postfix token sequence

    Raises:
        UnbalancedParenthesesError: A ``)`` has no partner or a ``(`` is
            still open at end of input

    Example:
        >>> format_tokens(to_postfix(tokenize("(p | q) > !r")))
        'p q | r ! >'
    """
    logger = get_logger()
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if isinstance(token, Variable):
            output.append(token)

        elif isinstance(token, LeftParen):
            stack.append(token)

        elif isinstance(token, RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                logger.debug("Unmatched ')' while converting to postfix")
                raise UnbalancedParenthesesError("Unmatched ')' in expression")
            stack.pop()

        elif isinstance(token, Operator):
            while (
                stack
                and isinstance(stack[-1], Operator)
                and token.yields_to(stack[-1])
            ):
                output.append(stack.pop())
            stack.append(token)

        else:
            raise TypeError(f"Unexpected token {token!r}")

    while stack:
        top = stack.pop()
        if not isinstance(top, Operator):
            logger.debug(f"Leftover '{top}' on operator stack")
            raise UnbalancedParenthesesError("Unclosed '(' in expression")
        output.append(top)

    logger.debug(f"Postfix form: {format_tokens(output)}")
    return tuple(output)

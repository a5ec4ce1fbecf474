# parser/exceptions.py
# This file is part of Entail - A Propositional Argument Validator
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing.

Lexing never fails: any character that is not whitespace, an operator or a
parenthesis becomes part of an identifier. The only structural error caught
before evaluation is an unbalanced parenthesis, detected by the converter.
"""


class ParseError(RuntimeError):
    """Exception raised when a formula cannot be turned into postfix form.

    Base class for every "malformed expression" failure raised before a
    formula is ever evaluated.
    """

    pass


class UnbalancedParenthesesError(ParseError):
    """Raised on an unmatched ``)`` or a ``(`` left open at end of input."""

    pass

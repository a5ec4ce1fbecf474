# parser/lexer.py
# This file is part of Entail - A Propositional Argument Validator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks an (already keyword-normalized) expression string into
tokens for the infix-to-postfix converter. The lexer never rejects input:
every character that is not whitespace, an operator symbol or a parenthesis
is accumulated into an identifier, so out-of-scope names are only caught
later, when the formula is evaluated against the declared variables.

Supported Tokens:
- Operators: !, &, |, >
- Punctuation: (, )
- Identifiers: maximal runs of any other characters, lowercased
- Whitespace: space, tab, newline and carriage return separate identifiers
"""

from typing import Tuple

from sly import Lexer

from .tokens import (
    And,
    Implies,
    LeftParen,
    Not,
    Or,
    RightParen,
    Token,
    Variable,
)
from utils.logger import get_logger


class PropLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier rule that case-folds its text
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    IMPLIES = r">"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Anything else up to the next separator is part of the identifier
    @_(r"[^ \t\r\n()!&|>]+")
    def ID(self, t):
        t.value = t.value.lower()
        return t


_SYMBOL_TOKENS = {
    "NOT": Not(),
    "AND": And(),
    "OR": Or(),
    "IMPLIES": Implies(),
    "LPAREN": LeftParen(),
    "RPAREN": RightParen(),
}


def tokenize(expression: str) -> Tuple[Token, ...]:
    """Split an infix expression into formula tokens.

    Args:
        expression: Single-line expression using ``! & | > ( )``

    Returns:
        Tokens in source order; identifiers become lowercased Variable tokens

    Example:
        >>> tokenize("(P | q) > !r")
        (LeftParen(), Variable(name='p'), Or(), Variable(name='q'), RightParen(),
         Implies(), Not(), Variable(name='r'))
    """
    result = []
    for tok in PropLexer().tokenize(expression):
        if tok.type == "ID":
            result.append(Variable(tok.value))
        else:
            result.append(_SYMBOL_TOKENS[tok.type])

    get_logger().debug(f"Tokenized '{expression}' into {len(result)} tokens")
    return tuple(result)

# parser/normalizer.py
# This file is part of Entail - A Propositional Argument Validator
#
# Keyword-to-symbol normalization for English-mode input

"""English keyword normalization for formula input.

The formula lexer only understands the single-character operators. When the
user types in English mode, this pass rewrites connective words and the
doubled/arrow spellings into those symbols before lexing:

    not, no, ~, !           ->  !
    and, &&, &              ->  &
    or, ||, |               ->  |
    implies, then, if, =>, >  ->  >

Everything else passes through lowercased, one item per space-terminated
slot, so ``"P and Q then not R"`` becomes ``"p & q > ! r "``.
"""

from sly import Lexer

from utils.logger import get_logger


class KeywordLexer(Lexer):
    """SLY-based lexer that splits English-mode input into words and symbols.

    Connective words are remapped onto operator token types, the same way
    reserved words are distinguished from identifiers in a formula grammar.
    Input is lowercased before it reaches this lexer, so the keyword table
    only lists lowercase spellings.
    """

    tokens = {
        "WORD",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"
    NOT = r"!|~"
    AND = r"&&|&"
    OR = r"\|\||\|"
    IMPLIES = r"=>|>"

    # A lone '=' belongs to the word; '=>' always splits it
    WORD = r"(?:[^ \t\r\n()!~&|>=]|=(?!>))+"

    WORD["not"] = "NOT"
    WORD["no"] = "NOT"
    WORD["and"] = "AND"
    WORD["or"] = "OR"
    WORD["implies"] = "IMPLIES"
    WORD["then"] = "IMPLIES"
    WORD["if"] = "IMPLIES"


_SYMBOLS = {
    "NOT": "!",
    "AND": "&",
    "OR": "|",
    "IMPLIES": ">",
    "LPAREN": "(",
    "RPAREN": ")",
}

def normalize(text: str, english: bool = False) -> str:
    """Rewrite user input into the symbol syntax understood by the lexer.

    Args:
        text: Raw premise or conclusion text
        english: Map connective words to symbols when True; otherwise the
            text is only lowercased

    Returns:
        Normalized expression string
    """
    lowered = text.lower()
    if not english:
        return lowered

    parts = []
    for tok in KeywordLexer().tokenize(lowered):
        if tok.type == "WORD":
            parts.append(tok.value + " ")
        else:
            parts.append(_SYMBOLS[tok.type] + " ")

    normalized = "".join(parts)
    get_logger().debug(f"Normalized '{text}' to '{normalized}'")
    return normalized

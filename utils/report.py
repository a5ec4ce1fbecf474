# utils/report.py
# This file is part of Entail - A Propositional Argument Validator
#
# Plain-text rendering of truth tables and argument verdicts

"""Text rendering for validation results.

Produces the fixed-width table and the analysis block printed by the command
line front end. Cells are ``T``/``F`` left-justified to a common column
width; headers are the variable names followed by the formula names.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from logic.truth_table import TruthTable
    from logic.verdict import Verdict

COLUMN_WIDTH = 10
BANNER_WIDTH = 45


def bool_to_cell(value: bool) -> str:
    return "T" if value else "F"


def _banner(title: str) -> str:
    return title.center(BANNER_WIDTH).rstrip()


def format_truth_table(table: "TruthTable", width: int = COLUMN_WIDTH) -> str:
    """Render ``table`` as a banner, a header line and one line per row."""
    lines: List[str] = [_banner("TRUTH TABLE")]
    # Names longer than the column width widen their own column
    widths = [max(width, len(name) + 1) for name in table.headers]
    lines.append("".join(name.ljust(w) for name, w in zip(table.headers, widths)).rstrip())
    for row in table.rows:
        cells = [bool_to_cell(value).ljust(w) for value, w in zip(row, widths)]
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def format_analysis(table: "TruthTable", verdict: "Verdict") -> str:
    """Render the verdict, listing the counterexample assignment if invalid."""
    lines: List[str] = [_banner("ANALYSIS")]
    lines.append(f"Satisfiable: {'Yes' if verdict.satisfiable else 'No'}")

    if verdict.valid:
        lines.append("Valid: Yes (no counterexample)")
    else:
        lines.append("Valid: Falsifiable (counterexample found)")
        lines.append("Counterexample:")
        for name, value in table.assignment_of(verdict.counterexample_row).items():
            lines.append(f"  {name} = {bool_to_cell(value)}")

    return "\n".join(lines)


def format_report(table: "TruthTable", verdict: "Verdict", show_table: bool = True) -> str:
    """Full report: optional truth table, then the analysis."""
    parts = []
    if show_table:
        parts.append(format_truth_table(table))
    parts.append(format_analysis(table, verdict))
    return "\n\n".join(parts)

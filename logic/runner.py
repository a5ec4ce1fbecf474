# logic/runner.py

"""
ArgumentFileRunner: glue code that reads an argument file, declares the
Argument, evaluates it and prints the truth table and analysis.

Argument file format (one directive per line, '#' starts a comment):

    mode: english
    variables: p, q
    premise: p implies q
    premise: not q
    conclusion: not p

'mode' is optional ("symbols" or "english", default "symbols"); 'premise'
may appear any number of times, in order; 'variables' and 'conclusion'
appear exactly once.
"""

from pathlib import Path
from typing import List, Optional

from utils.logger import get_logger
from utils.report import format_report

from .argument import Argument, ArgumentReport


class ArgumentFormatError(Exception):
    """Raised when the argument file cannot be read or parsed."""


_MODES = {"symbols": False, "english": True}


def _read_file_or_error(path: Path) -> str:
    """
    Read a text file into a string, raising ArgumentFormatError on failure.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ArgumentFormatError(f"Argument file not found: {path}")
    except Exception as e:
        raise ArgumentFormatError(f"Could not read argument file {path}: {e}")


def _strip_comment(line: str) -> str:
    return line.split("#", 1)[0].strip()


def _split_names(field: str) -> List[str]:
    return [name for name in field.replace(",", " ").split() if name]


def parse_argument_text(text: str, source: str = "<string>") -> Argument:
    """
    Parse argument-file text into an Argument.

    Raises:
        ArgumentFormatError: unknown directive, missing or repeated
            'variables'/'conclusion', bad mode.
        ParseError, ArgumentError: propagated from the Argument declaration.
    """
    english = False
    variables: Optional[List[str]] = None
    premises: List[str] = []
    conclusion: Optional[str] = None
    seen_mode = False

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = _strip_comment(raw)
        if not line:
            continue
        key, sep, value = line.partition(":")
        if not sep:
            raise ArgumentFormatError(f"{source}:{lineno}: expected 'key: value', got {raw.strip()!r}")
        key = key.strip().lower()
        value = value.strip()

        if key == "mode":
            if seen_mode:
                raise ArgumentFormatError(f"{source}:{lineno}: multiple mode directives")
            if value.lower() not in _MODES:
                raise ArgumentFormatError(
                    f"{source}:{lineno}: unknown mode {value!r} (use 'symbols' or 'english')"
                )
            english = _MODES[value.lower()]
            seen_mode = True
        elif key == "variables":
            if variables is not None:
                raise ArgumentFormatError(f"{source}:{lineno}: multiple variables directives")
            variables = _split_names(value)
        elif key == "premise":
            premises.append(value)
        elif key == "conclusion":
            if conclusion is not None:
                raise ArgumentFormatError(f"{source}:{lineno}: multiple conclusion directives")
            conclusion = value
        else:
            raise ArgumentFormatError(f"{source}:{lineno}: unknown directive {key!r}")

    if variables is None:
        raise ArgumentFormatError(f"{source}: missing 'variables' directive")
    if conclusion is None:
        raise ArgumentFormatError(f"{source}: missing 'conclusion' directive")

    argument = Argument(variables, premises, conclusion, english=english)
    get_logger().argument_loaded(argument.variables.names, len(premises), source)
    return argument


def load_argument(path_str: str) -> Argument:
    """Read and parse an argument file."""
    path = Path(path_str)
    return parse_argument_text(_read_file_or_error(path), source=str(path))


class ArgumentFileRunner:
    """
    Given an argument file, declares the Argument up front (so format and
    parse errors surface immediately) and evaluates it on ``run``.
    """

    def __init__(self, argument_path_str: str):
        self.path = Path(argument_path_str)
        self.argument = load_argument(argument_path_str)

    def run(self, *, show_table: bool = True) -> ArgumentReport:
        """
        Build the truth table, analyze it and print the report.
        Raises EvaluationError if a formula is malformed or names an
        undeclared variable.
        """
        report = self.argument.evaluate()
        print(format_report(report.table, report.verdict, show_table=show_table))
        return report

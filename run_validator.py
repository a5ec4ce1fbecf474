#!/usr/bin/env python3
# run_validator.py
# This file is part of Entail - A Propositional Argument Validator
#
# Command-line interface for argument validation: file mode and interactive mode

import sys
import argparse
from pathlib import Path
from typing import Callable, List, Optional

from logic.analyzer import analyze
from logic.argument import CONCLUSION_NAME, ArgumentReport, premise_name
from logic.exceptions import ArgumentError, CapacityError, EvaluationError
from logic.formula import Formula
from logic.limits import MAX_PREMISES, MAX_VARIABLES
from logic.runner import ArgumentFileRunner, ArgumentFormatError
from logic.truth_table import build
from logic.variables import VariableSet
from parser.exceptions import ParseError
from utils.logger import configure_logging, get_logger
from utils.report import format_report

EXIT_OK = 0
EXIT_FORMAT_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_EVALUATION_ERROR = 3
EXIT_INTERRUPTED = 4
EXIT_UNEXPECTED = 5
EXIT_DECLARATION_ERROR = 6

EVALUATION_FAILURE_MESSAGE = "Error: malformed expression or unknown variable."

LEGEND = """Operators: ! (NOT)  & (AND)  | (OR)  > (IMPLIES)
You can type symbols directly, or choose English keywords
(not/no, and, or, implies/then)
Example symbols: ( p | q ) > ! r
Example English: p and q then not r"""

InputFn = Callable[[str], str]


def _ask_count(ask: InputFn, prompt: str, low: int, high: int, error: str) -> int:
    """Prompt until the answer is an integer in [low, high]."""
    while True:
        answer = ask(prompt).strip()
        try:
            value = int(answer)
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        print(error)


def _ask_yes_no(ask: InputFn, prompt: str) -> bool:
    return ask(prompt).strip().lower() in ("yes", "y")


def _ask_variables(ask: InputFn, count: int, english: bool) -> VariableSet:
    names: List[str] = []
    while len(names) < count:
        name = ask(f"Name for variable {len(names) + 1}: ")
        try:
            VariableSet(names + [name], english=english)
        except ArgumentError as e:
            print(f"{e}. Please try again.")
            continue
        names.append(name)
    return VariableSet(names, english=english)


def _ask_formula(ask: InputFn, name: str, prompt: str, label: str, english: bool) -> Formula:
    while True:
        text = ask(prompt)
        try:
            return Formula.compile(name, text, english=english)
        except ParseError:
            print(f"Malformed {label}.")
        except CapacityError as e:
            print(f"{e}.")


def interactive_session(english: Optional[bool] = None, ask: InputFn = input) -> int:
    """Collect an argument from the user, then print its table and analysis.

    Args:
        english: Use English keywords; asks the user when None
        ask: Prompt function, ``input`` by default

    Returns:
        Exit code
    """
    logger = get_logger()
    print(LEGEND)

    var_count = _ask_count(
        ask,
        f"How many variables? (1-{MAX_VARIABLES}): ",
        1,
        MAX_VARIABLES,
        "Invalid variable count.",
    )
    if english is None:
        english = _ask_yes_no(ask, "Use English keywords instead of symbols? (yes or no): ")

    variables = _ask_variables(ask, var_count, english)

    premise_count = _ask_count(
        ask,
        f"Number of premises (0-{MAX_PREMISES}): ",
        0,
        MAX_PREMISES,
        "Invalid premise count.",
    )
    formulas = [
        _ask_formula(ask, premise_name(i), f"Premise {i + 1}: ", "premise", english)
        for i in range(premise_count)
    ]
    formulas.append(_ask_formula(ask, CONCLUSION_NAME, "Conclusion: ", "conclusion", english))
    logger.argument_loaded(variables.names, premise_count)

    try:
        table = build(variables, formulas)
    except EvaluationError as e:
        logger.debug(f"Truth table construction failed: {e}")
        print(EVALUATION_FAILURE_MESSAGE)
        return EXIT_EVALUATION_ERROR

    report = ArgumentReport(table=table, verdict=analyze(table, premise_count))
    print()
    print(format_report(report.table, report.verdict))
    return EXIT_OK


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Entail propositional argument validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_validator.py                       # interactive session
  python run_validator.py --english             # interactive, English keywords
  python run_validator.py -a modus_tollens.arg
  python run_validator.py -a modus_tollens.arg --no-table -v

Argument file format:
  mode: english
  variables: p, q
  premise: p implies q
  premise: not q
  conclusion: not p
        """,
    )

    parser.add_argument(
        "-a", "--argument", type=Path, help="Path to argument file (omit for interactive mode)"
    )

    parser.add_argument(
        "-e",
        "--english",
        action="store_true",
        help="Interactive mode: use English keywords without asking",
    )

    parser.add_argument(
        "--no-table", action="store_true", help="Print only the analysis, not the truth table"
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only check that the argument file declares a well-formed argument",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the argument validator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.argument is None:
            print("ARGUMENT VALIDATOR".center(45).rstrip())
            code = interactive_session(english=True if args.english else None)
            print("Thank You!")
            return code

        runner = ArgumentFileRunner(str(args.argument))

        if args.validate_only:
            logger.validation_result(True, f"{args.argument} declares a well-formed argument")
            print(f"OK: {args.argument}")
            return EXIT_OK

        runner.run(show_table=not args.no_table)
        return EXIT_OK

    except ArgumentFormatError as e:
        logger.error(f"Argument file error: {e}")
        return EXIT_FORMAT_ERROR

    except ParseError as e:
        logger.error(f"Malformed expression: {e}")
        return EXIT_PARSE_ERROR

    except EvaluationError as e:
        logger.error(f"{EVALUATION_FAILURE_MESSAGE} ({e})")
        return EXIT_EVALUATION_ERROR

    except ArgumentError as e:
        logger.error(f"Invalid argument declaration: {e}")
        return EXIT_DECLARATION_ERROR

    except (KeyboardInterrupt, EOFError):
        logger.error("Input ended; validation aborted")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())

# logic/__init__.py

"""Argument evaluation engine.

This package provides:
  • Formula: a named postfix formula compiled once from text
  • VariableSet: ordered variable declarations and row assignments
  • evaluate: stack-based evaluation of one formula on one assignment
  • build / TruthTable: every assignment, every formula
  • analyze / Verdict: validity, satisfiability and the first counterexample
  • Argument / ArgumentReport: capacity-checked declaration plus evaluation
  • ArgumentFileRunner: CLI-style runner for an argument file
"""

from .analyzer import analyze
from .argument import Argument, ArgumentReport
from .evaluator import evaluate
from .exceptions import (
    ArgumentError,
    ArityError,
    CapacityError,
    DuplicateVariableError,
    EvaluationError,
    InvalidVariableNameError,
    MalformedResultError,
    UnknownVariableError,
)
from .formula import Formula
from .runner import ArgumentFileRunner, ArgumentFormatError, load_argument
from .truth_table import TruthTable, build
from .variables import VariableSet
from .verdict import Verdict

__all__ = [
    "Argument",
    "ArgumentReport",
    "ArgumentFileRunner",
    "ArgumentFormatError",
    "Formula",
    "TruthTable",
    "VariableSet",
    "Verdict",
    "analyze",
    "build",
    "evaluate",
    "load_argument",
    "ArgumentError",
    "ArityError",
    "CapacityError",
    "DuplicateVariableError",
    "EvaluationError",
    "InvalidVariableNameError",
    "MalformedResultError",
    "UnknownVariableError",
]

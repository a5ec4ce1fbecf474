# utils/__init__.py
# This file is part of Entail - A Propositional Argument Validator
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level
from .report import format_analysis, format_report, format_truth_table

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "format_analysis",
    "format_report",
    "format_truth_table",
]

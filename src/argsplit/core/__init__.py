"""Core functionality: string arrays, classifier, styles and diagnostics."""

from argsplit.core.array import StringArray
from argsplit.core.classifier import (
    ArgumentClassifier,
    ParsedCommandLine,
    ParseResult,
    Scope,
    classify,
    parse,
)
from argsplit.core.diagnostics import Diagnostics
from argsplit.core.errors import (
    AllocationError,
    ArgsplitError,
    CapacityError,
    FatalError,
    Outcome,
    SeparatorError,
    UserError,
)
from argsplit.core.style import STYLE, Style, toggle_colors

__all__ = [
    "StringArray",
    "ArgumentClassifier",
    "ParsedCommandLine",
    "ParseResult",
    "Scope",
    "classify",
    "parse",
    "Diagnostics",
    "ArgsplitError",
    "UserError",
    "SeparatorError",
    "FatalError",
    "AllocationError",
    "CapacityError",
    "Outcome",
    "STYLE",
    "Style",
    "toggle_colors",
]

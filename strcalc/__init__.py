"""strcalc — string calculator.

Sums the integers in a comma/newline separated string, with optional custom
delimiters declared in a `//[...]` header. Negatives are rejected (all of them
are reported) and numbers above 1000 are ignored.

Usage:
    >>> from strcalc import add
    >>> add("//[;][,]\\n1;2,3")
    6

    python -m strcalc add "1,2,3"                # 6
    python -m strcalc add "//[***]\\n1***2***3"   # 6
    python -m strcalc explain "1,-2,1001"        # per-token breakdown
"""

from strcalc.calculator import MAX_VALUE, StringCalculator, add, evaluate
from strcalc.errors import (
    CalculatorError,
    CannotFindCustomDelimiter,
    CannotParseNumber,
    NegativeNumbersNotAllowed,
)
from strcalc.models import CalculationResult, ErrorKind

__all__ = [
    "MAX_VALUE",
    "CalculationResult",
    "CalculatorError",
    "CannotFindCustomDelimiter",
    "CannotParseNumber",
    "ErrorKind",
    "NegativeNumbersNotAllowed",
    "StringCalculator",
    "add",
    "evaluate",
]

"""Data models for the string calculator.

ErrorKind, TokenStatus, TokenReport, CalculationResult — the typed structures
that flow from calculator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from strcalc.errors import CalculatorError


class ErrorKind(str, Enum):
    """The three ways a calculation can fail."""

    CANNOT_PARSE_NUMBER = "cannot-parse-number"
    CANNOT_FIND_CUSTOM_DELIMITER = "cannot-find-custom-delimiter"
    NEGATIVE_NUMBERS_NOT_ALLOWED = "negative-numbers-not-allowed"


class TokenStatus(str, Enum):
    """What happened to a single token on its way to the sum."""

    KEPT = "kept"
    DROPPED = "dropped"
    NEGATIVE = "negative"
    INVALID = "invalid"


@dataclass
class TokenReport:
    """One token of the body, as seen by StringCalculator.explain()."""

    token: str
    value: Optional[int]
    status: TokenStatus
    # set only for INVALID tokens
    error: Optional[CalculatorError] = None

    def to_dict(self) -> dict:
        d = {
            "token": self.token,
            "value": self.value,
            "status": self.status.value,
        }
        if self.error is not None:
            d["error"] = self.error.to_dict()
        return d


@dataclass
class CalculationResult:
    """Outcome of one calculation: either a total or an error, never both."""

    input: str
    total: Optional[int] = None
    error: Optional[CalculatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def verdict(self) -> str:
        if self.error is None:
            return "ok"
        return self.error.kind.value

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d = {
            "input": self.input,
            "verdict": self.verdict,
            "total": self.total,
        }
        if self.error is not None:
            d["error"] = self.error.to_dict()
        return d

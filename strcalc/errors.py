"""Exceptions raised by the string calculator.

One class per ErrorKind. Each carries the payload needed to rebuild the
failure, and all of them are ValueErrors so callers that only care about
"bad input" can catch that.
"""

from __future__ import annotations

from strcalc.models import ErrorKind


class CalculatorError(ValueError):
    """Base class for every calculation failure."""

    kind: ErrorKind

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": str(self)}


class CannotParseNumber(CalculatorError):
    """A token could not be read as a base-10 integer."""

    kind = ErrorKind.CANNOT_PARSE_NUMBER

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"cannot parse number {token!r}: {reason}")
        self.token = token
        self.reason = reason

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update({"token": self.token, "reason": self.reason})
        return d


class CannotFindCustomDelimiter(CalculatorError):
    """Input started with '//' but the delimiter header is unusable."""

    kind = ErrorKind.CANNOT_FIND_CUSTOM_DELIMITER

    def __init__(self, header: str, reason: str) -> None:
        super().__init__(f"cannot find custom delimiter in {header!r}: {reason}")
        self.header = header
        self.reason = reason

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update({"header": self.header, "reason": self.reason})
        return d


class NegativeNumbersNotAllowed(CalculatorError):
    """One or more negative numbers; all of them, in input order."""

    kind = ErrorKind.NEGATIVE_NUMBERS_NOT_ALLOWED

    def __init__(self, negatives: list[int]) -> None:
        super().__init__(f"negatives not allowed: {','.join(map(str, negatives))}")
        self.negatives = list(negatives)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["negatives"] = self.negatives
        return d

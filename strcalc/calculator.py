"""String calculator — sums the integers encoded in a delimited string.

Data flow per call:
1. Empty input → 0
2. Decode the optional '//' delimiter header (strcalc.delimiters)
3. Split the body, trim each token, parse it as a base-10 integer
4. Reject negatives, reporting every one of them
5. Drop numbers above max_value, sum the rest
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from strcalc.delimiters import parse_header, split_body
from strcalc.errors import CalculatorError, CannotParseNumber, NegativeNumbersNotAllowed
from strcalc.models import CalculationResult, TokenReport, TokenStatus

logger = logging.getLogger(__name__)

MAX_VALUE = 1000

# ASCII digits only; int() alone would also take "1_000" and non-ASCII digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_token(token: str) -> int:
    """Parse one trimmed token, or raise CannotParseNumber."""
    text = token.strip()
    if not text:
        raise CannotParseNumber(text, "empty token")
    if not _INTEGER_RE.fullmatch(text):
        raise CannotParseNumber(text, "not a base-10 integer")
    return int(text)


@dataclass(frozen=True)
class StringCalculator:
    """Sums delimited numbers.

    Args:
        max_value: Numbers strictly greater than this are left out of the sum.
        legacy_delimiters: Also accept the bracket-free `//;\\n` header form.
    """

    max_value: int = MAX_VALUE
    legacy_delimiters: bool = False

    def _tokens(self, numbers: str) -> list[str]:
        delimiters = parse_header(numbers, legacy=self.legacy_delimiters)
        if not delimiters.body:
            return []
        return split_body(delimiters)

    def parse_numbers(self, numbers: str) -> list[int]:
        """Turn `numbers` into its integer sequence, before any validation.

        The first token that is not an integer (left to right) stops the parse.

        Raises:
            CannotFindCustomDelimiter: malformed '//' header.
            CannotParseNumber: a token is not a base-10 integer.
        """
        if not numbers:
            return []
        return [_parse_token(token) for token in self._tokens(numbers)]

    def add(self, numbers: str) -> int:
        """Sum the numbers in `numbers`.

        Raises:
            CannotFindCustomDelimiter: malformed '//' header.
            CannotParseNumber: a token is not a base-10 integer.
            NegativeNumbersNotAllowed: any negatives, listed in input order.
        """
        return self._reduce(self.parse_numbers(numbers))

    def _reduce(self, values: list[int]) -> int:
        """Reject negatives, drop numbers above max_value, sum the rest."""
        negatives = [n for n in values if n < 0]
        if negatives:
            raise NegativeNumbersNotAllowed(negatives)

        kept = [n for n in values if n <= self.max_value]
        if len(kept) != len(values):
            logger.debug("dropped %d number(s) above %d", len(values) - len(kept), self.max_value)
        return sum(kept)

    def evaluate(self, numbers: str) -> CalculationResult:
        """Like add(), but return the failure instead of raising it."""
        try:
            total = self.add(numbers)
        except CalculatorError as e:
            logger.debug("calculation failed: %s", e)
            return CalculationResult(input=numbers, error=e)
        return CalculationResult(input=numbers, total=total)

    def explain(self, numbers: str) -> list[TokenReport]:
        """Report what happens to each token, without stopping at bad ones.

        Raises:
            CannotFindCustomDelimiter: malformed '//' header.
        """
        if not numbers:
            return []

        reports = []
        for token in self._tokens(numbers):
            try:
                value = _parse_token(token)
            except CannotParseNumber as e:
                reports.append(TokenReport(token=token, value=None, status=TokenStatus.INVALID, error=e))
                continue

            if value < 0:
                status = TokenStatus.NEGATIVE
            elif value > self.max_value:
                status = TokenStatus.DROPPED
            else:
                status = TokenStatus.KEPT
            reports.append(TokenReport(token=token, value=value, status=status))
        return reports

    def summarize(self, numbers: str, reports: list[TokenReport]) -> CalculationResult:
        """Fold explain() reports into the result evaluate() would give."""
        for r in reports:
            if r.error is not None:
                return CalculationResult(input=numbers, error=r.error)
        try:
            total = self._reduce([r.value for r in reports])
        except NegativeNumbersNotAllowed as e:
            return CalculationResult(input=numbers, error=e)
        return CalculationResult(input=numbers, total=total)


_default = StringCalculator()


def add(numbers: str) -> int:
    """Sum `numbers` with the default rules. See StringCalculator.add()."""
    return _default.add(numbers)


def evaluate(numbers: str) -> CalculationResult:
    """Evaluate `numbers` with the default rules. See StringCalculator.evaluate()."""
    return _default.evaluate(numbers)

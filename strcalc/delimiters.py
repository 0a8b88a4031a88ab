"""Delimiter header parsing and body splitting.

Input may open with a header that replaces the default separators:

    //[;]\\n1;2           one custom delimiter
    //[***][%]\\n1***2%3  several, any length

The header runs from the '//' marker to the first newline. Only the bracketed
form is accepted unless the caller opts into the legacy single-delimiter form
(`//;\\n1;2`). A bracketed header must consist of `[...]` segments only;
anything between or around them (`//[;]x[%]`) is rejected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from strcalc.errors import CannotFindCustomDelimiter

logger = logging.getLogger(__name__)

MARKER = "//"
DEFAULT_DELIMITERS = (",", "\n")

# "[...]" segments; a delimiter may not itself contain ']'
_BRACKETED_RE = re.compile(r"\[([^\]]+)\]")
_HEADER_RE = re.compile(r"(?:\[[^\]]+\])+")


@dataclass
class Delimiters:
    """The active separators and the text they apply to."""

    separators: list[str] = field(default_factory=lambda: list(DEFAULT_DELIMITERS))
    body: str = ""


def parse_header(numbers: str, legacy: bool = False) -> Delimiters:
    """Work out which separators apply to `numbers`.

    Three stages, each of which can stop the parse:
    1. No '//' marker → default separators over the whole input.
    2. Marker but no newline, or nothing between marker and newline → error.
    3. Header that is not all `[delimiter]` segments → error (or, with
       `legacy`, a bracket-free header is itself the one delimiter).

    Raises:
        CannotFindCustomDelimiter: the header is missing or malformed.
    """
    if not numbers.startswith(MARKER):
        return Delimiters(body=numbers)

    rest = numbers[len(MARKER):]
    newline = rest.find("\n")
    if newline == -1:
        raise CannotFindCustomDelimiter(rest, "no newline after the delimiter header")

    header = rest[:newline]
    body = rest[newline + 1:]
    if not header:
        raise CannotFindCustomDelimiter(header, "delimiter header is empty")

    if _HEADER_RE.fullmatch(header):
        separators = _BRACKETED_RE.findall(header)
    elif legacy and "[" not in header:
        separators = [header]
    else:
        raise CannotFindCustomDelimiter(header, "expected only [delimiter] segments")

    logger.debug("custom delimiters %r from header %r", separators, header)
    return Delimiters(separators=separators, body=body)


def split_body(delimiters: Delimiters) -> list[str]:
    """Split the body on every separator, each matched literally.

    Longer separators are tried first so that '**' wins over '*' when both
    are declared.
    """
    ordered = sorted(set(delimiters.separators), key=len, reverse=True)
    pattern = "|".join(re.escape(sep) for sep in ordered)
    return re.split(pattern, delimiters.body)

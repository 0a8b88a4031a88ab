"""Environment-driven settings for the strcalc command line.

The library itself reads no environment; only the CLI calls load_settings(),
and its command-line options override what is found here.

    STRCALC_MAX_VALUE          numbers above this are ignored (default 1000)
    STRCALC_LEGACY_DELIMITERS  1/true/yes/on to accept `//;\\n` headers
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from strcalc.calculator import MAX_VALUE, StringCalculator

_ENV_PREFIX = "STRCALC_"
_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


@dataclass
class Settings:
    """Resolved CLI settings."""

    max_value: int = MAX_VALUE
    legacy_delimiters: bool = False

    def build_calculator(self) -> StringCalculator:
        return StringCalculator(
            max_value=self.max_value,
            legacy_delimiters=self.legacy_delimiters,
        )


def _parse_bool(key: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ValueError(f"{key} must be a boolean (1/0, true/false, yes/no, on/off), got {value!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from STRCALC_* variables.

    Args:
        env: Variables to read. Defaults to os.environ.

    Raises:
        ValueError: a variable is set to something unusable.
    """
    env = os.environ if env is None else env
    settings = Settings()

    key = f"{_ENV_PREFIX}MAX_VALUE"
    raw = env.get(key)
    if raw is not None and raw.strip():
        try:
            settings.max_value = int(raw.strip())
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {raw!r}") from None

    key = f"{_ENV_PREFIX}LEGACY_DELIMITERS"
    raw = env.get(key)
    if raw is not None:
        settings.legacy_delimiters = _parse_bool(key, raw)

    return settings

"""Input validation helpers shared by the use cases and the shell."""

from __future__ import annotations

import math
import re

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def is_integer_in_range(
    value: object,
    minimum: float = 0,
    maximum: float = math.inf,
) -> bool:
    """Return True if *value* is an integer within ``[minimum, maximum]``.

    Integral floats such as ``5.0`` count as integers; booleans do not.
    Never raises.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
    elif not isinstance(value, int):
        return False
    return minimum <= value <= maximum


def parse_int(raw: object) -> int | None:
    """Parse raw shell input into an int, or None if it is not one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if is_integer_in_range(raw, -math.inf) else None
    if isinstance(raw, str):
        text = raw.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # Longer than the interpreter allows for str -> int
                return None
    return None


def require_text(raw: str | None) -> str | None:
    """Return the stripped text, or None when it is absent or blank."""
    if raw is None:
        return None
    text = raw.strip()
    return text or None

"""Price and context-size formatting.

Upstream prices are decimal strings in dollars per token; the table shows
dollars per million tokens. Context lengths are shown as scaled labels
("128K", "1.5M"). None of these helpers raise on bad input.
"""
from __future__ import annotations

import math
import re

NOT_AVAILABLE = "N/A"
TOKENS_PER_UNIT = 1_000_000

_CONTEXT_RE = re.compile(r"(\d+(?:\.\d+)?)([KM])?")
_MULTIPLIERS = {"K": 1_000, "M": 1_000_000, None: 1}


def format_price(raw: str | float | None) -> str:
    """Convert a per-token rate into a ``$`` per-million-token label.

    Returns ``"N/A"`` when the rate is missing, unparseable or negative.
    Zero is a valid price and renders as ``"$0.0"``.
    """
    try:
        rate = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return NOT_AVAILABLE
    if not math.isfinite(rate) or rate < 0:
        return NOT_AVAILABLE

    scaled = rate * TOKENS_PER_UNIT
    if scaled == 0:
        return "$0.0"
    if scaled < 0.001:
        places = 3
    elif scaled < 0.01:
        places = 2
    else:
        places = 1
    return f"${scaled:.{places}f}"


def format_optional_price(raw: str | None) -> str:
    """Like :func:`format_price`, but an absent or empty field is ``"N/A"``."""
    if raw is None or raw == "":
        return NOT_AVAILABLE
    return format_price(raw)


def parse_price(label: str) -> float:
    """Numeric value of a price label; ``nan`` for ``"N/A"``."""
    try:
        return float(label.replace("$", ""))
    except (AttributeError, ValueError):
        return math.nan


def _plain_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_context_size(size: int) -> str:
    if size >= 1_000_000:
        return f"{_plain_number(size / 1_000_000)}M"
    if size >= 1_000:
        return f"{_plain_number(size / 1_000)}K"
    return str(size)


def parse_context_size(label: str) -> int:
    """Inverse of :func:`format_context_size`, used for sorting.

    Returns 0 when the label does not start with a number.
    """
    match = _CONTEXT_RE.match(label or "")
    if match is None:
        return 0
    number, unit = match.groups()
    return round(float(number) * _MULTIPLIERS[unit])


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]

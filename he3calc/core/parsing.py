"""Lenient numeric parsing for free-form text fields.

Two policies:
    parse_lenient     — parameter drafts. Leading numeric prefix is used
                        ("12abc" → 12, "1,5" → 1); empty or invalid text → 0.
    parse_axis_value  — axis range fields. The whole trimmed text must be a
                        number literal; empty, invalid or zero text → the
                        chart default.

Only '.' is a decimal separator. "Infinity" is recognised with exactly that
spelling; "inf", "nan" and digit separators ("1_0") are not numbers here.
"""

from __future__ import annotations

import math
import re

from he3calc.models.parameters import AxisRange

_DECIMAL = r"[+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"

_NUMBER_PREFIX = re.compile(rf"^\s*({_DECIMAL})", re.ASCII)
_NUMBER_LITERAL = re.compile(
    rf"(?:{_DECIMAL}|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+)",
    re.ASCII,
)


def _to_float(token: str) -> float:
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    if token[:2].lower() in ("0x", "0o", "0b"):
        try:
            return float(int(token, 0))
        except OverflowError:
            return math.inf
    return float(token)


def parse_lenient(text: str | float | int | None) -> float:
    """Parse a draft field. Never raises.

    Args:
        text: Raw field text (numbers pass through).

    Returns:
        Parsed value, 0.0 when nothing numeric is found.
    """
    if text is None:
        return 0.0
    if isinstance(text, (int, float)):
        value = float(text)
        return 0.0 if math.isnan(value) else value
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    return _to_float(match.group(1))


def parse_axis_value(text: str | None, default: float) -> float:
    """Parse an axis range field.

    Args:
        text: Raw field text.
        default: Value used when text is empty, invalid or zero.

    Returns:
        Parsed limit.
    """
    if text is None:
        return default
    token = text.strip()
    if not _NUMBER_LITERAL.fullmatch(token):
        return default
    value = _to_float(token)
    if value == 0.0:
        return default
    return value


def resolve_range(
    axis_range: AxisRange,
    fallback: AxisRange,
) -> tuple[float, float, float, float]:
    """Numeric (x_min, x_max, y_min, y_max) for a chart.

    Args:
        axis_range: User-edited limits.
        fallback: Default limits of the same chart.

    Returns:
        Parsed limits. Reversed or degenerate ranges are returned as is.
    """
    return (
        parse_axis_value(axis_range.x_min, parse_lenient(fallback.x_min)),
        parse_axis_value(axis_range.x_max, parse_lenient(fallback.x_max)),
        parse_axis_value(axis_range.y_min, parse_lenient(fallback.y_min)),
        parse_axis_value(axis_range.y_max, parse_lenient(fallback.y_max)),
    )

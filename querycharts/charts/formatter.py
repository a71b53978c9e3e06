"""
Value Formatter

Coerces a raw query-result cell into a chart-safe primitive (number,
string, or 0/1) from its declared semantic type and display format.

Total function: every input maps to a defined output, nothing raises.
Missing numeric data becomes 0, which is a known approximation rather
than a faithful rendering of sparse data.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from querycharts.charts.constants import enum_value
from querycharts.charts.types import SemanticType, ValueFormat

ChartPrimitive = int | float | str

_DATE_TYPES = frozenset({SemanticType.DATE.value, SemanticType.DATETIME.value})


def to_number(value: Any) -> int | float:
    """
    Numeric coercion that never fails.

    bool -> 0/1, int/float/Decimal -> number, numeric strings -> number.
    Anything unparseable, nan or infinite becomes 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(number):
        return 0
    return number


def is_truthy(value: Any) -> bool:
    """Truthiness where NaN counts as falsy"""
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def round_half_away_from_zero(number: int | float) -> int:
    """2.5 -> 3, -2.5 -> -3, 3.7 -> 4"""
    if isinstance(number, int):
        return number
    # Exact binary value; to_integral_value is not bound by the context precision
    return int(Decimal(number).to_integral_value(rounding=ROUND_HALF_UP))


def format_value(
    value: Any,
    semantic_type: SemanticType | str,
    display_format: ValueFormat | str | None = None,
    *,
    falsy_as_empty: bool = False,
) -> ChartPrimitive:
    """
    Coerce a raw cell value for chart rendering.

    Args:
        value: Raw cell value (None, str, number, bool, date, anything)
        semantic_type: Declared column type; unknown strings use the categorical arm
        display_format: Only "integer" changes the value; percentage, currency
            and decimal formatting are left to the presentation layer
        falsy_as_empty: Legacy categorical behaviour where 0, False and ""
            render as "" instead of their string form

    Returns:
        int/float for numeric and boolean types, str otherwise
    """
    semantic_type = enum_value(semantic_type)
    display_format = enum_value(display_format)

    if value is None:
        return 0 if semantic_type == SemanticType.NUMERIC.value else ""

    if semantic_type == SemanticType.NUMERIC.value:
        number = to_number(value)
        if display_format == ValueFormat.INTEGER.value:
            return round_half_away_from_zero(number)
        return number

    if semantic_type in _DATE_TYPES:
        # No timezone normalization here
        return str(value)

    if semantic_type == SemanticType.BOOLEAN.value:
        return 1 if is_truthy(value) else 0

    if falsy_as_empty and not is_truthy(value):
        return ""
    return str(value)


def format_label(value: Any, label_type: SemanticType | str | None = None, *, falsy_as_empty: bool = False) -> str:
    """
    Category/x-axis label text for a cell.

    Integral floats drop their trailing ".0" so numeric labels read the
    same way the renderer would print them.
    """
    formatted = format_value(value, label_type or SemanticType.STRING, falsy_as_empty=falsy_as_empty)
    if isinstance(formatted, float) and formatted.is_integer():
        return str(int(formatted))
    return str(formatted)

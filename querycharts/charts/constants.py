"""
Chart Hydration Defaults

Single source of truth for the literal defaults the hydration pipeline
falls back to.
"""
from enum import Enum

DEFAULT_CHART_TITLE = "Chart"
DEFAULT_DATASET_LABEL = "Value"
EMPTY_DATASET_LABEL = "No data"
DEFAULT_BORDER_WIDTH = 1

# Pie/doughnut: one value series, no axes
PROPORTIONAL_CHART_TYPES: frozenset[str] = frozenset({"pie", "doughnut"})

PROPORTIONAL_LEGEND_POSITION = "right"
CARTESIAN_LEGEND_POSITION = "top"

DEFAULT_PALETTE: tuple[str, ...] = (
    "#4361ee",
    "#3a0ca3",
    "#7209b7",
    "#f72585",
    "#4cc9f0",
    "#4895ef",
    "#560bad",
    "#f15bb5",
    "#fee440",
    "#00bbf9",
)


def enum_value(value):
    """Plain string for a str-Enum member, anything else unchanged"""
    return value.value if isinstance(value, Enum) else value


def is_proportional_type(chart_type) -> bool:
    """True for pie/doughnut, given either a ChartType member or its string"""
    return enum_value(chart_type) in PROPORTIONAL_CHART_TYPES

"""
Dataset Builder

Projects query rows into named chart series. Proportional charts
(pie/doughnut) get exactly one series from the first value mapping;
cartesian charts get one series per value mapping, in mapping order.

Rows are read in the order given. No sorting, grouping or
deduplication happens here; aggregation belongs upstream in SQL.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from querycharts.charts.constants import DEFAULT_BORDER_WIDTH, DEFAULT_DATASET_LABEL
from querycharts.charts.formatter import format_value
from querycharts.charts.types import ChartColumnMapping, Dataset, ValueMapping
from querycharts.core.logging import get_logger

logger = get_logger(__name__)


def _series(value_mapping: ValueMapping, rows: Sequence[Mapping[str, Any]], falsy_as_empty: bool) -> list:
    return [
        format_value(
            row.get(value_mapping.column),
            value_mapping.type,
            value_mapping.format,
            falsy_as_empty=falsy_as_empty,
        )
        for row in rows
    ]


def build_datasets(
    mapping: ChartColumnMapping,
    rows: Sequence[Mapping[str, Any]],
    *,
    falsy_as_empty: bool = False,
) -> list[Dataset]:
    """
    Build the chart series for a mapping.

    Args:
        mapping: Column mapping (chart type + value mappings)
        rows: Query result rows, already in display order
        falsy_as_empty: Passed through to the value formatter

    Returns:
        One dataset for pie/doughnut, one per value mapping otherwise.
        Empty rows still yield labelled datasets with empty data.
    """
    rows = rows or []

    if mapping.is_proportional:
        if not mapping.value_mappings:
            logger.debug("Proportional mapping has no value columns, no datasets built")
            return []

        # Slice colors are assigned downstream
        first = mapping.value_mappings[0]
        return [
            Dataset(
                label=first.label or DEFAULT_DATASET_LABEL,
                data=_series(first, rows, falsy_as_empty),
                border_width=DEFAULT_BORDER_WIDTH,
            )
        ]

    return [
        Dataset(
            label=value_mapping.label or value_mapping.column or DEFAULT_DATASET_LABEL,
            data=_series(value_mapping, rows, falsy_as_empty),
            background_color=value_mapping.color,
            border_color=value_mapping.color,
            border_width=DEFAULT_BORDER_WIDTH,
        )
        for value_mapping in mapping.value_mappings
    ]

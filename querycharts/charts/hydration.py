"""
Chart Config Hydration

Turns a column mapping plus query rows into a complete, renderer-ready
chart configuration. Always returns a structurally valid configuration:
no rows, or a mapping without value columns, yields the "No data"
placeholder instead of None.

Stateless and deterministic. A fresh configuration is built on every call.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from querycharts.charts.constants import EMPTY_DATASET_LABEL, enum_value
from querycharts.charts.datasets import build_datasets
from querycharts.charts.formatter import format_label
from querycharts.charts.options import build_options
from querycharts.charts.types import ChartColumnMapping, ChartConfiguration, ChartData, Dataset
from querycharts.core.logging import get_logger

logger = get_logger(__name__)


def empty_chart_config(mapping: ChartColumnMapping) -> ChartConfiguration:
    """Placeholder configuration with no labels and a single empty "No data" series"""
    return ChartConfiguration(
        type=enum_value(mapping.chart_type),
        data=ChartData(labels=[], datasets=[Dataset(label=EMPTY_DATASET_LABEL, data=[])]),
        options=build_options(mapping, mapping.is_proportional),
    )


def hydrate_chart_config(
    mapping: ChartColumnMapping,
    rows: Sequence[Mapping[str, Any]] | None,
    *,
    falsy_as_empty: bool = False,
) -> ChartConfiguration:
    """
    Hydrate a chart configuration from a mapping and query rows.

    Args:
        mapping: Validated column mapping
        rows: Query result rows in display order; None is treated as empty
        falsy_as_empty: Legacy categorical coercion, see ``format_value``

    Returns:
        ChartConfiguration (use ``.to_dict()`` for the renderer payload)
    """
    is_proportional = mapping.is_proportional

    if not rows:
        logger.debug(f"No rows for {enum_value(mapping.chart_type)} chart, returning placeholder config")
        return empty_chart_config(mapping)

    if not mapping.value_mappings:
        logger.debug("Mapping has no value columns, returning placeholder config")
        return empty_chart_config(mapping)

    labels = [
        format_label(row.get(mapping.label_column), mapping.label_type, falsy_as_empty=falsy_as_empty)
        for row in rows
    ]
    datasets = build_datasets(mapping, rows, falsy_as_empty=falsy_as_empty)

    logger.debug(
        f"Hydrated {enum_value(mapping.chart_type)} chart: {len(rows)} rows, "
        f"{len(datasets)} datasets"
    )

    return ChartConfiguration(
        type=enum_value(mapping.chart_type),
        data=ChartData(labels=labels, datasets=datasets),
        options=build_options(mapping, is_proportional),
    )

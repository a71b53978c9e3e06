"""
Query Result Transforms

Helpers around raw query rows that sit next to the hydration pipeline:
generic row-to-series transform, distinct values for filters, numeric
string coercion, column type inference and palette color assignment.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import ValidationError

from querycharts.charts.constants import DEFAULT_BORDER_WIDTH, DEFAULT_PALETTE, is_proportional_type
from querycharts.charts.types import (
    ChartColumnMapping,
    ChartConfiguration,
    Dataset,
    SemanticType,
    TransformedChartData,
)
from querycharts.core.exceptions import ChartMappingError
from querycharts.core.logging import get_logger

logger = get_logger(__name__)

Row = Mapping[str, Any]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def transform_rows(
    rows: Sequence[Row],
    label_column: str | None = None,
    value_columns: Sequence[str] | None = None,
    colors: Sequence[str] | None = None,
) -> TransformedChartData:
    """
    Transform query rows into labels + datasets without a column mapping.

    Defaults:
    - label column: first column of the first row
    - value columns: every other column whose first-row value is numeric
    - colors: ``colors[i]`` if given, else the default palette, cycled

    Values are passed through unformatted.
    """
    if not rows:
        return TransformedChartData(labels=[], datasets=[])

    columns = list(rows[0].keys())
    label_column = label_column or (columns[0] if columns else None)

    value_columns = list(value_columns or [])
    if not value_columns:
        value_columns = [
            column for column in columns
            if column != label_column and _is_number(rows[0][column])
        ]
        logger.debug(f"Detected value columns: {value_columns}")

    labels = [row.get(label_column) for row in rows]

    datasets = []
    for index, column in enumerate(value_columns):
        color = None
        if colors and index < len(colors):
            color = colors[index]
        color = color or DEFAULT_PALETTE[index % len(DEFAULT_PALETTE)]
        datasets.append(
            Dataset(
                label=column,
                data=[row.get(column) for row in rows],
                background_color=color,
                border_color=color,
                border_width=DEFAULT_BORDER_WIDTH,
            )
        )

    return TransformedChartData(labels=labels, datasets=datasets)


def get_unique_values(rows: Sequence[Row] | None, column: str) -> list[Any]:
    """Distinct values of a column in first-seen order. Rows without the column are skipped."""
    if not rows:
        return []

    seen: dict[Any, None] = {}
    unhashable: list[Any] = []
    for row in rows:
        if column not in row:
            continue
        value = row[column]
        try:
            seen.setdefault(value, None)
        except TypeError:
            if value not in unhashable:
                unhashable.append(value)
    return list(seen) + unhashable


def coerce_numeric_strings(rows: Sequence[Row]) -> list[dict[str, Any]]:
    """
    Return new rows where every string cell that parses as a number is a float.

    Drivers often return NUMERIC/DECIMAL columns as strings; this makes them
    chartable without touching the input rows.
    """
    coerced = []
    for row in rows:
        new_row = {}
        for key, value in row.items():
            if isinstance(value, str) and value.strip():
                try:
                    value = float(value)
                except ValueError:
                    pass
            new_row[key] = value
        coerced.append(new_row)
    return coerced


def infer_semantic_type(value: Any) -> SemanticType:
    """Semantic type of a single non-None cell"""
    if isinstance(value, bool):
        return SemanticType.BOOLEAN
    if _is_number(value):
        return SemanticType.NUMERIC
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return SemanticType.DATETIME
    if isinstance(value, date):
        return SemanticType.DATE
    return SemanticType.STRING


def infer_column_types(rows: Sequence[Row]) -> dict[str, SemanticType]:
    """
    Infer a semantic type per column from its first non-None value.

    Columns that are None in every row are typed as string.
    """
    if not rows:
        return {}

    types: dict[str, SemanticType] = {}
    for column in rows[0].keys():
        sample = next((row.get(column) for row in rows if row.get(column) is not None), None)
        types[column] = infer_semantic_type(sample) if sample is not None else SemanticType.STRING
    return types


def assign_colors(config: ChartConfiguration, palette: Sequence[str] | None = None) -> ChartConfiguration:
    """
    Fill in dataset colors from a palette.

    Pie/doughnut datasets get one color per slice. Cartesian datasets
    without a color get ``palette[i]`` (cycled); explicit colors are kept.
    Returns a new configuration, the input is left untouched.
    """
    palette = list(palette or DEFAULT_PALETTE)
    if not palette:
        return config

    proportional = is_proportional_type(config.type)
    datasets = []
    for index, dataset in enumerate(config.data.datasets):
        if proportional:
            slice_colors = [palette[i % len(palette)] for i in range(len(dataset.data))]
            dataset = dataset.model_copy(update={"background_color": slice_colors})
        elif dataset.background_color is None and dataset.border_color is None:
            color = palette[index % len(palette)]
            dataset = dataset.model_copy(update={"background_color": color, "border_color": color})
        datasets.append(dataset)

    data = config.data.model_copy(update={"datasets": datasets})
    return config.model_copy(update={"data": data})


def parse_column_mapping(payload: Mapping[str, Any]) -> ChartColumnMapping:
    """
    Validate a raw mapping (e.g. model-generated JSON) into a ChartColumnMapping.

    Raises:
        ChartMappingError: If the payload does not match the mapping schema
    """
    try:
        return ChartColumnMapping.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected chart mapping: {e.error_count()} validation errors")
        raise ChartMappingError(
            "Invalid chart column mapping",
            errors=e.errors(include_url=False, include_context=False),
        ) from e


def find_missing_columns(mapping: ChartColumnMapping, rows: Sequence[Row] | None) -> list[str]:
    """Mapping columns (label first, then values) absent from the first row"""
    if not rows:
        return []

    available = set(rows[0].keys())
    wanted = [mapping.label_column] + [value_mapping.column for value_mapping in mapping.value_mappings]
    missing = []
    for column in wanted:
        if column not in available and column not in missing:
            missing.append(column)
    return missing

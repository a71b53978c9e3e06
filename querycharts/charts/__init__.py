"""
Charts Package

Column-mapping driven chart hydration.

Modules:
- constants: Named defaults (titles, labels, palette)
- types: Pydantic mapping and chart configuration models
- formatter: Raw cell value coercion
- datasets: Series construction
- options: Renderer options
- hydration: Mapping + rows -> chart configuration
- transform: Query result helpers (generic transform, colors, validation)
- rows: polars / cursor result adapters
"""

from querycharts.charts.datasets import build_datasets
from querycharts.charts.formatter import format_label, format_value
from querycharts.charts.hydration import empty_chart_config, hydrate_chart_config
from querycharts.charts.options import build_options
from querycharts.charts.types import (
    ChartColumnMapping,
    ChartConfiguration,
    ChartType,
    Dataset,
    SemanticType,
    ValueFormat,
    ValueMapping,
)

__all__ = [
    "build_datasets",
    "build_options",
    "empty_chart_config",
    "format_label",
    "format_value",
    "hydrate_chart_config",
    "ChartColumnMapping",
    "ChartConfiguration",
    "ChartType",
    "Dataset",
    "SemanticType",
    "ValueFormat",
    "ValueMapping",
]

"""
Chart Schemas

Pydantic models for the column-mapping input and the hydrated chart
configuration output. Field names are snake_case in Python and camelCase
on the wire (``chartType``, ``valueMappings``, ``backgroundColor`` ...).
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from querycharts.charts.constants import is_proportional_type


class ChartType(str, Enum):
    LINE = "line"
    BAR = "bar"
    PIE = "pie"
    DOUGHNUT = "doughnut"
    SCATTER = "scatter"
    BUBBLE = "bubble"
    RADAR = "radar"


class SemanticType(str, Enum):
    """Logical type of a result column, aligned with SQL data types"""

    NUMERIC = "numeric"  # INT, FLOAT, DECIMAL, etc.
    STRING = "string"  # VARCHAR, TEXT, CHAR, etc.
    DATE = "date"  # DATE, TIMESTAMP
    DATETIME = "datetime"  # TIMESTAMP WITH TIMEZONE
    BOOLEAN = "boolean"
    CATEGORICAL = "categorical"  # Enum-like strings or numbers
    OTHER = "other"


class ValueFormat(str, Enum):
    DEFAULT = "default"
    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"
    DATETIME = "datetime"
    STRING = "string"


# Base Configuration
class MappingSchema(BaseModel):
    """Base for mapping input models: camelCase or snake_case, enums stored as plain strings"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class ValueMapping(MappingSchema):
    """One value series: which column, how to label it, how to coerce it"""
    column: str
    label: str | None = None
    type: SemanticType = SemanticType.STRING
    format: ValueFormat | None = None
    color: str | None = None


class AxisTitles(MappingSchema):
    x: str | None = None
    y: str | None = None


class ChartColumnMapping(MappingSchema):
    """How to project tabular query rows into a chart"""
    chart_type: ChartType
    label_column: str
    label_type: SemanticType = SemanticType.STRING
    value_mappings: list[ValueMapping] = Field(default_factory=list)
    title: str | None = None
    axis_titles: AxisTitles | None = None

    @model_validator(mode="before")
    @classmethod
    def accept_nested_columns(cls, data: Any) -> Any:
        """
        Accept the stored nested shape as well as the flat one.

        Nested shape::

            {"type": "bar", "title": "...",
             "columns": {"labels": "month", "labelType": "date", "values": [...]},
             "axes": {"x": {"title": "Month"}, "y": {"title": "Sales"}}}
        """
        if not isinstance(data, dict) or "columns" not in data:
            return data

        columns = data.get("columns") or {}
        axes = data.get("axes") or {}
        flat = {
            "chartType": data.get("type"),
            "labelColumn": columns.get("labels"),
            "valueMappings": columns.get("values", []),
            "title": data.get("title"),
        }
        if columns.get("labelType") is not None:
            flat["labelType"] = columns["labelType"]
        if axes:
            flat["axisTitles"] = {
                "x": (axes.get("x") or {}).get("title"),
                "y": (axes.get("y") or {}).get("title"),
            }
        return flat

    @property
    def is_proportional(self) -> bool:
        return is_proportional_type(self.chart_type)


# Hydrated output
class ChartSchema(BaseModel):
    """Base for output models: immutable, camelCase when dumped"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict:
        """Renderer-ready dict: camelCase keys, unset optional blocks omitted"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Dataset(ChartSchema):
    label: str
    data: list[Any] = Field(default_factory=list)
    background_color: str | list[str] | None = None
    border_color: str | list[str] | None = None
    border_width: int | None = None


class ChartData(ChartSchema):
    labels: list[str] = Field(default_factory=list)
    datasets: list[Dataset] = Field(default_factory=list)


class TitleOptions(ChartSchema):
    display: bool = True
    text: str


class AxisTitle(ChartSchema):
    display: bool = True
    text: str


class AxisScale(ChartSchema):
    title: AxisTitle | None = None


class Scales(ChartSchema):
    x: AxisScale
    y: AxisScale


class LegendOptions(ChartSchema):
    display: bool = True
    position: str


class PluginOptions(ChartSchema):
    legend: LegendOptions


class ChartOptions(ChartSchema):
    responsive: bool = True
    maintain_aspect_ratio: bool = False
    title: TitleOptions
    scales: Scales | None = None
    plugins: PluginOptions


class ChartConfiguration(ChartSchema):
    # Plain str: an unsupported type passes through to the renderer untouched
    type: str
    data: ChartData
    options: ChartOptions


class TransformedChartData(ChartSchema):
    """Output of the generic row transform: labels are raw column values"""
    labels: list[Any] = Field(default_factory=list)
    datasets: list[Dataset] = Field(default_factory=list)

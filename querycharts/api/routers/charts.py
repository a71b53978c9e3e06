"""
QueryCharts Charts API Router

Endpoints that hydrate chart configurations from query results.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from querycharts.charts.hydration import hydrate_chart_config
from querycharts.charts.transform import (
    assign_colors,
    find_missing_columns,
    parse_column_mapping,
    transform_rows,
)
from querycharts.core.config import settings
from querycharts.core.exceptions import ChartMappingError
from querycharts.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["charts"])


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HydrateRequest(CamelModel):
    """Request to hydrate a chart from a mapping and rows"""
    mapping: dict[str, Any] = Field(..., description="Chart column mapping (flat or nested shape)")
    rows: list[dict[str, Any]] | None = Field(None, description="Query result rows in display order")
    apply_palette: bool = Field(False, description="Fill missing dataset colors from the palette")


class TransformRequest(CamelModel):
    """Request for the mapping-free row transform"""
    rows: list[dict[str, Any]] = Field(default_factory=list)
    label_column: str | None = None
    value_columns: list[str] | None = None
    colors: list[str] | None = None


class ValidateMappingRequest(CamelModel):
    mapping: dict[str, Any]
    rows: list[dict[str, Any]] | None = None


class ValidateMappingResponse(CamelModel):
    valid: bool
    missing_columns: list[str] = Field(default_factory=list)


def _check_row_limit(rows: list | None) -> None:
    if rows and len(rows) > settings.chart_max_rows:
        raise HTTPException(
            status_code=413,
            detail=f"Too many rows: {len(rows)} (limit {settings.chart_max_rows})",
        )


def _parse_mapping(payload: dict[str, Any]):
    try:
        return parse_column_mapping(payload)
    except ChartMappingError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})


@router.post("/hydrate")
async def hydrate(request: HydrateRequest):
    """
    Hydrate a chart configuration.

    Returns the renderer-ready configuration; empty rows produce the
    "No data" placeholder rather than an error.
    """
    _check_row_limit(request.rows)
    mapping = _parse_mapping(request.mapping)

    config = hydrate_chart_config(
        mapping,
        request.rows,
        falsy_as_empty=settings.chart_categorical_falsy_as_empty,
    )
    if request.apply_palette:
        config = assign_colors(config, settings.chart_palette or None)

    logger.info(f"Hydrated {config.type} chart ({len(request.rows or [])} rows)")
    return config.to_dict()


@router.post("/transform")
async def transform(request: TransformRequest):
    """Generic labels + datasets transform with auto-detected value columns"""
    _check_row_limit(request.rows)
    result = transform_rows(
        request.rows,
        label_column=request.label_column,
        value_columns=request.value_columns,
        colors=request.colors or settings.chart_palette or None,
    )
    return result.to_dict()


@router.post("/mapping/validate", response_model=ValidateMappingResponse, response_model_by_alias=True)
async def validate_mapping(request: ValidateMappingRequest):
    """Validate a mapping and report columns missing from the sample rows"""
    mapping = _parse_mapping(request.mapping)
    missing = find_missing_columns(mapping, request.rows)
    if missing:
        logger.warning(f"Mapping references columns not in result: {missing}")
    return ValidateMappingResponse(valid=not missing, missing_columns=missing)

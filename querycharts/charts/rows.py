"""
Query Result Adapters

Converts tabular query results into the row mappings the chart
pipeline reads.
"""
from __future__ import annotations

from typing import Any

import polars as pl

from querycharts.core.logging import get_logger

logger = get_logger(__name__)


def rows_from_dataframe(df: pl.DataFrame, columns: list[str] | None = None) -> list[dict[str, Any]]:
    """
    Convert a polars DataFrame into row dicts, preserving row order.

    Args:
        df: Query result frame
        columns: Optional subset of columns to keep (in this order)

    Returns:
        List of {column: value} dicts; null cells become None
    """
    if columns:
        missing = [column for column in columns if column not in df.columns]
        if missing:
            logger.debug(f"Ignoring columns not in frame: {missing}")
        df = df.select([column for column in columns if column in df.columns])

    return df.to_dicts()


def rows_from_records(columns: list[str], records: list[tuple | list]) -> list[dict[str, Any]]:
    """Zip a cursor-style (columns, tuples) result into row dicts"""
    df = pl.DataFrame(records, schema=columns, orient="row", strict=False)
    return rows_from_dataframe(df)

"""
Shared pytest fixtures - plain in-memory rows and mappings, no database required
"""
import pytest

from querycharts.charts.types import ChartColumnMapping


@pytest.fixture
def sales_rows() -> list[dict]:
    """Monthly sales rows as a query would return them"""
    return [
        {"month": "Jan", "sales": 120, "profit": 30.5, "region": "North"},
        {"month": "Feb", "sales": 95, "profit": 12.25, "region": "South"},
        {"month": "Mar", "sales": 143, "profit": 41.0, "region": "North"},
    ]


@pytest.fixture
def value_mappings() -> list[dict]:
    """Three value series"""
    return [
        {"column": "sales", "label": "Sales", "type": "numeric", "color": "#4CAF50"},
        {"column": "profit", "label": "Profit", "type": "numeric", "format": "currency", "color": "#2196F3"},
        {"column": "region", "type": "categorical"},
    ]


@pytest.fixture
def bar_mapping(value_mappings) -> ChartColumnMapping:
    """Cartesian mapping with an x axis title only"""
    return ChartColumnMapping.model_validate(
        {
            "chartType": "bar",
            "labelColumn": "month",
            "valueMappings": value_mappings,
            "title": "Monthly Sales",
            "axisTitles": {"x": "Month"},
        }
    )


@pytest.fixture
def pie_mapping(value_mappings) -> ChartColumnMapping:
    """Proportional mapping sharing the same value series"""
    return ChartColumnMapping.model_validate(
        {
            "chartType": "pie",
            "labelColumn": "month",
            "valueMappings": value_mappings,
            "title": "Sales Share",
        }
    )

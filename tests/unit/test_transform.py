"""
Unit tests for Query Result Transforms
"""
from datetime import date, datetime
from decimal import Decimal

import pytest

from querycharts.charts.constants import DEFAULT_PALETTE
from querycharts.charts.hydration import hydrate_chart_config
from querycharts.charts.transform import (
    assign_colors,
    coerce_numeric_strings,
    find_missing_columns,
    get_unique_values,
    infer_column_types,
    parse_column_mapping,
    transform_rows,
)
from querycharts.charts.types import SemanticType
from querycharts.core.exceptions import ChartMappingError, QueryChartsError


class TestTransformRows:
    """Test the mapping-free transform"""

    def test_empty_rows(self):
        result = transform_rows([])
        assert result.labels == []
        assert result.datasets == []

    def test_auto_detects_label_and_numeric_columns(self, sales_rows):
        result = transform_rows(sales_rows)
        assert result.labels == ["Jan", "Feb", "Mar"]
        assert [d.label for d in result.datasets] == ["sales", "profit"]
        assert result.datasets[0].data == [120, 95, 143]

    def test_default_palette(self, sales_rows):
        result = transform_rows(sales_rows)
        assert result.datasets[0].background_color == DEFAULT_PALETTE[0]
        assert result.datasets[1].border_color == DEFAULT_PALETTE[1]
        assert result.datasets[0].border_width == 1

    def test_explicit_columns_and_colors(self, sales_rows):
        result = transform_rows(sales_rows, label_column="region", value_columns=["profit", "sales"], colors=["red"])
        assert result.labels == ["North", "South", "North"]
        assert result.datasets[0].label == "profit"
        assert result.datasets[0].background_color == "red"
        assert result.datasets[1].background_color == DEFAULT_PALETTE[1]

    def test_bool_columns_not_detected(self):
        rows = [{"name": "a", "active": True, "score": 3}]
        assert [d.label for d in transform_rows(rows).datasets] == ["score"]


class TestUniqueValues:
    def test_first_seen_order(self, sales_rows):
        assert get_unique_values(sales_rows, "region") == ["North", "South"]

    def test_skips_rows_without_column(self):
        rows = [{"a": 1}, {"b": 2}, {"a": None}, {"a": 1}]
        assert get_unique_values(rows, "a") == [1, None]

    def test_empty(self):
        assert get_unique_values(None, "a") == []


class TestCoerceNumericStrings:
    def test_numeric_strings_become_floats(self):
        rows = [{"total": "12.50", "name": "Widget", "count": 3, "blank": ""}]
        assert coerce_numeric_strings(rows) == [{"total": 12.5, "name": "Widget", "count": 3, "blank": ""}]

    def test_input_untouched(self):
        rows = [{"total": "1"}]
        coerce_numeric_strings(rows)
        assert rows == [{"total": "1"}]


class TestInferColumnTypes:
    def test_types(self):
        rows = [
            {"n": None, "amount": Decimal("1.5"), "flag": True, "day": date(2024, 1, 1),
             "ts": datetime(2024, 1, 1, 12), "name": "x", "empty": None},
            {"n": 4, "amount": None, "flag": False, "day": None, "ts": None, "name": "y", "empty": None},
        ]
        assert infer_column_types(rows) == {
            "n": SemanticType.NUMERIC,
            "amount": SemanticType.NUMERIC,
            "flag": SemanticType.BOOLEAN,
            "day": SemanticType.DATE,
            "ts": SemanticType.DATETIME,
            "name": SemanticType.STRING,
            "empty": SemanticType.STRING,
        }

    def test_no_rows(self):
        assert infer_column_types([]) == {}


class TestAssignColors:
    def test_pie_slices_get_palette(self, pie_mapping, sales_rows):
        config = hydrate_chart_config(pie_mapping, sales_rows)
        colored = assign_colors(config, ["#a", "#b"])
        assert colored.data.datasets[0].background_color == ["#a", "#b", "#a"]
        assert config.data.datasets[0].background_color is None

    def test_cartesian_keeps_explicit_colors(self, bar_mapping, sales_rows):
        colored = assign_colors(hydrate_chart_config(bar_mapping, sales_rows))
        datasets = colored.data.datasets
        assert datasets[0].background_color == "#4CAF50"
        assert datasets[2].background_color == DEFAULT_PALETTE[2]
        assert datasets[2].border_color == DEFAULT_PALETTE[2]


class TestParseColumnMapping:
    def test_valid(self):
        mapping = parse_column_mapping({"chartType": "radar", "labelColumn": "skill"})
        assert mapping.chart_type == "radar"

    def test_invalid_raises_mapping_error(self):
        with pytest.raises(ChartMappingError) as exc_info:
            parse_column_mapping({"chartType": "bar"})
        assert isinstance(exc_info.value, QueryChartsError)
        assert exc_info.value.errors
        assert exc_info.value.errors[0]["loc"] == ("labelColumn",)


class TestFindMissingColumns:
    def test_none_missing(self, bar_mapping, sales_rows):
        assert find_missing_columns(bar_mapping, sales_rows) == []

    def test_reports_missing(self, bar_mapping):
        assert find_missing_columns(bar_mapping, [{"month": "Jan", "sales": 1}]) == ["profit", "region"]

    def test_no_rows(self, bar_mapping):
        assert find_missing_columns(bar_mapping, []) == []

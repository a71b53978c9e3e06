"""
QueryCharts Custom Exceptions
"""


class QueryChartsError(Exception):
    """Base exception for all QueryCharts errors"""

    pass


class ChartMappingError(QueryChartsError):
    """Column mapping failed schema validation"""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []

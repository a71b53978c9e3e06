"""
QueryCharts Source Package

Turns SQL query results into renderer-ready chart configurations.

Subpackages:
- api: FastAPI REST endpoints
- charts: Mapping models, value formatting, chart hydration
- core: Configuration, logging, exceptions
"""

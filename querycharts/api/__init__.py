"""
API Package

FastAPI REST API for QueryCharts.

Subpackages:
- routers: API route handlers

Main module:
- main: FastAPI application setup
"""

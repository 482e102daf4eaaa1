"""
TechTrends: Sales Spreadsheet Analytics.

This package cleans, validates and aggregates tabular sales records
uploaded as spreadsheets.
"""

from importlib.metadata import version

__version__ = version("techtrends")

__all__ = ["__version__"]

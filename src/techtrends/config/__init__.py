"""
Configuration management with typed Pydantic models.

Provides YAML loading with environment interpolation and defaults for
every section.
"""

from techtrends.config.loader import load_config
from techtrends.config.settings import (
    BrowseConfig,
    DashboardConfig,
    IngestionConfig,
    LoggingConfig,
    SheetLayout,
    TechTrendsConfig,
)

__all__ = [
    "BrowseConfig",
    "DashboardConfig",
    "IngestionConfig",
    "LoggingConfig",
    "SheetLayout",
    "TechTrendsConfig",
    "load_config",
]

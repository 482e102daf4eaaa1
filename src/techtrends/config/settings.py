"""
Typed configuration models using Pydantic.

All tunables of the cleaning pipeline, the dashboard and the record browser
are defined here with explicit typing and validation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SheetLayout(str, Enum):
    """How sales rows are laid out in the uploaded spreadsheet."""

    SINGLE_COLUMN = "single_column"  # One comma-joined row per cell
    COLUMNS = "columns"  # One field per cell


class IngestionConfig(BaseModel):
    """Configuration for reading raw spreadsheets."""

    model_config = ConfigDict(frozen=True)

    layout: SheetLayout = Field(
        default=SheetLayout.SINGLE_COLUMN,
        description="Spreadsheet layout of the sales rows",
    )
    source_column: int = Field(
        default=1,
        ge=0,
        description="Zero-based column holding the joined rows (1 = column B)",
    )
    separator: str = Field(
        default=",",
        description="Field separator inside a joined row",
    )
    has_header: bool = Field(
        default=True,
        description="Whether the first row is a header to be excluded",
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Ensure the separator is not empty."""
        if not v:
            msg = "separator must not be empty"
            raise ValueError(msg)
        return v


class DashboardConfig(BaseModel):
    """Configuration for the aggregate dashboard."""

    model_config = ConfigDict(frozen=True)

    top_products_limit: int = Field(
        default=5,
        ge=1,
        description="Number of products in the top-N ranking",
    )
    preview_rows: int = Field(
        default=5,
        ge=0,
        description="Cleaned records shown in the cleaning preview",
    )


class BrowseConfig(BaseModel):
    """Configuration for the paginated record table."""

    model_config = ConfigDict(frozen=True)

    page_size: int = Field(default=10, ge=1, description="Records per page")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level")
    json_output: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a known logging level."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            msg = f"level must be one of {VALID_LOG_LEVELS}, got: {v!r}"
            raise ValueError(msg)
        return level


class TechTrendsConfig(BaseModel):
    """
    Complete configuration.

    Every section has defaults, so an empty YAML file is a valid config.
    """

    model_config = ConfigDict(frozen=True)

    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
    browse: BrowseConfig = Field(default_factory=BrowseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

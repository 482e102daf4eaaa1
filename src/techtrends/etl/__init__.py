"""
Cleaning pipeline for raw sales tables.

Orchestrates record building, validation and filtering of valid records.
"""

from techtrends.etl.pipeline import (
    CleaningPipeline,
    CleaningResult,
    PipelineState,
    ProcessingStats,
    run_cleaning,
)

__all__ = [
    "CleaningPipeline",
    "CleaningResult",
    "PipelineState",
    "ProcessingStats",
    "run_cleaning",
]

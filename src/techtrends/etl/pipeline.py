"""
Cleaning pipeline implementation.

Sequences record building and validation over one raw table and keeps
the valid subset for the dashboard.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from techtrends.config.settings import TechTrendsConfig
from techtrends.ingestion.spreadsheet import split_header
from techtrends.records.builder import build_records
from techtrends.records.model import SalesRecord
from techtrends.utils.logging import get_logger
from techtrends.validation.core import ValidationVerdict, validate_records

log = get_logger(__name__)

RawRow = Sequence[str | None]


class PipelineState(Enum):
    """Lifecycle of one cleaning run."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ProcessingStats:
    """
    Counts for one cleaning run.

    Attributes:
        total: Data rows received (header excluded).
        valid: Records passing validation.
        invalid: Records failing validation.
        cleaned: Records built.
    """

    total: int
    valid: int
    invalid: int
    cleaned: int

    @property
    def validity_rate(self) -> float:
        """Percentage of valid records over total rows."""
        if self.total == 0:
            return 0.0
        return self.valid / self.total * 100


@dataclass
class CleaningResult:
    """
    Result of a cleaning run.

    Attributes:
        records: Every built record, in input order.
        verdicts: One verdict per record, aligned by position.
        stats: Processing counts.
        state: Pipeline state when the result was produced.
    """

    records: list[SalesRecord]
    verdicts: list[ValidationVerdict]
    stats: ProcessingStats
    state: PipelineState = PipelineState.COMPLETE
    valid_records: list[SalesRecord] = field(init=False)

    def __post_init__(self) -> None:
        if len(self.records) != len(self.verdicts):
            msg = (
                f"records and verdicts must align: "
                f"{len(self.records)} != {len(self.verdicts)}"
            )
            raise ValueError(msg)
        self.valid_records = [
            record
            for record, verdict in zip(self.records, self.verdicts, strict=True)
            if verdict.is_valid
        ]

    @property
    def invalid_records(self) -> list[tuple[SalesRecord, ValidationVerdict]]:
        """Records that failed validation, paired with their verdict."""
        return [
            (record, verdict)
            for record, verdict in zip(self.records, self.verdicts, strict=True)
            if not verdict.is_valid
        ]

    @property
    def has_valid_records(self) -> bool:
        """Whether the run produced anything to aggregate."""
        return bool(self.valid_records)


class CleaningPipeline:
    """
    Cleaning pipeline for raw sales rows.

    Builds a record per row, validates every record and filters the valid
    ones. Row-level problems never abort a run; a run with zero valid
    records is a normal outcome left to the caller to act on.
    """

    def __init__(self, config: TechTrendsConfig | None = None) -> None:
        """
        Initialize cleaning pipeline.

        Args:
            config: Configuration; defaults are used if omitted.
        """
        self.config = config or TechTrendsConfig()
        self.state = PipelineState.IDLE

    def run(self, rows: Sequence[RawRow]) -> CleaningResult:
        """
        Clean and validate data rows.

        Args:
            rows: Data rows only; header rows must be removed beforehand.

        Returns:
            CleaningResult with records, verdicts and counts.
        """
        self.state = PipelineState.PROCESSING
        log.info("Cleaning started", rows=len(rows))

        records = build_records(rows)
        verdicts = validate_records(records)

        valid = sum(1 for v in verdicts if v.is_valid)
        stats = ProcessingStats(
            total=len(rows),
            valid=valid,
            invalid=len(verdicts) - valid,
            cleaned=len(records),
        )

        self.state = PipelineState.COMPLETE
        log.info(
            "Cleaning complete",
            total=stats.total,
            valid=stats.valid,
            invalid=stats.invalid,
        )
        if stats.valid == 0:
            log.warning("No valid records after cleaning", total=stats.total)

        return CleaningResult(
            records=records,
            verdicts=verdicts,
            stats=stats,
            state=self.state,
        )

    def run_table(
        self,
        table: Sequence[RawRow],
        has_header: bool | None = None,
    ) -> CleaningResult:
        """
        Clean a raw table that may start with a header row.

        Args:
            table: Raw rows as read from the spreadsheet.
            has_header: Whether the first row is a header. Defaults to the
                ingestion config.

        Returns:
            CleaningResult over the data rows.
        """
        if has_header is None:
            has_header = self.config.ingestion.has_header

        if not has_header:
            return self.run(table)

        _, rows = split_header(table)
        if not rows:
            log.info("Table has no data rows", rows=len(table))
        return self.run(rows)


def run_cleaning(
    rows: Sequence[RawRow],
    config: TechTrendsConfig | None = None,
) -> CleaningResult:
    """
    Clean data rows with a fresh pipeline.

    Args:
        rows: Data rows (no header).
        config: Optional configuration.

    Returns:
        CleaningResult.
    """
    return CleaningPipeline(config).run(rows)

"""
Console reporter for cleaning results.

Formats processing counts, applied cleaning steps and a record preview
using Rich.
"""

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from techtrends.etl.pipeline import CleaningResult

CLEANING_STEPS: tuple[str, ...] = (
    "Extra whitespace removal",
    "Accent normalization",
    "Special character cleanup",
    "Date format validation",
    "Number validation",
    "Text normalization",
)


class CleaningReporter:
    """Formats and displays a cleaning result to the console."""

    def __init__(self, console: Console, preview_rows: int = 5) -> None:
        """
        Initialize cleaning reporter.

        Args:
            console: Rich Console instance for output.
            preview_rows: Number of cleaned records to preview.
        """
        self.console = console
        self.preview_rows = preview_rows

    def print_results(self, result: "CleaningResult") -> None:
        """
        Print counts, cleaning steps, warnings and a preview.

        Args:
            result: Completed cleaning run.
        """
        self._print_stats(result)
        self._print_steps()

        if result.stats.invalid > 0:
            self.console.print()
            self.console.print(
                f"[yellow]Found {result.stats.invalid} records with problems. "
                "They are excluded from the analysis.[/yellow]"
            )

        self._print_preview(result)

    def _print_stats(self, result: "CleaningResult") -> None:
        """Print the processing counts table."""
        stats = result.stats
        table = Table(title="Data Cleaning and Validation", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Total records", str(stats.total))
        table.add_row("Valid records", f"[green]{stats.valid}[/green]")
        table.add_row("Invalid records", f"[red]{stats.invalid}[/red]")
        table.add_row("Validity rate", f"{stats.validity_rate:.1f}%")

        self.console.print(table)

    def _print_steps(self) -> None:
        """Print the list of cleaning steps applied to every row."""
        self.console.print()
        self.console.print("[bold]Cleaning steps applied:[/bold]")
        for step in CLEANING_STEPS:
            self.console.print(f"  - {step}")

    def _print_preview(self, result: "CleaningResult") -> None:
        """
        Print the first cleaned records with their verdict.

        Args:
            result: Completed cleaning run.
        """
        if self.preview_rows == 0 or not result.records:
            return

        self.console.print()
        self.console.print("[bold]Cleaned data preview:[/bold]")

        shown = list(zip(result.records, result.verdicts, strict=True))[
            : self.preview_rows
        ]
        for record, verdict in shown:
            mark = "[green]✓[/green]" if verdict.is_valid else "[red]✗[/red]"
            self.console.print(
                f"  {mark} {escape(record.transaction_id)} | {escape(record.date)} | "
                f"{escape(record.product_name)} | ${record.total_amount:,.2f}"
            )
            for error in verdict.errors:
                self.console.print(f"      [dim]{error}[/dim]")

        remaining = len(result.records) - len(shown)
        if remaining > 0:
            self.console.print(f"  [dim]... and {remaining} more records[/dim]")

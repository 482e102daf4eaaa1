"""Command-line interface for the techtrends sales pipeline."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from techtrends.aggregation import DashboardSummary
    from techtrends.config.settings import TechTrendsConfig
    from techtrends.etl import CleaningResult

app = typer.Typer(
    name="techtrends",
    help="Clean, validate and summarize spreadsheet sales data.",
    no_args_is_help=True,
)

console = Console()

InputOption = Annotated[
    Path,
    typer.Option(
        "--input",
        "-i",
        help="Sales spreadsheet (.xlsx, .xls or .csv).",
        exists=True,
        dir_okay=False,
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


def _load_settings(config: Path | None) -> "TechTrendsConfig":
    """Load configuration and set up logging."""
    from techtrends.config import TechTrendsConfig, load_config
    from techtrends.utils.logging import configure_logging

    try:
        settings = load_config(config) if config is not None else TechTrendsConfig()
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(settings.logging.level, json_output=settings.logging.json_output)
    return settings


def _clean_file(path: Path, settings: "TechTrendsConfig") -> "CleaningResult":
    """Read and clean a sales file, exiting with a message on read failure."""
    from techtrends.etl import CleaningPipeline
    from techtrends.ingestion import IngestionError, read_raw_table
    from techtrends.utils.logging import log_context

    with log_context(source=path.name):
        try:
            table = read_raw_table(path, settings.ingestion)
        except IngestionError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e

        return CleaningPipeline(settings).run_table(table)


@app.command()
def clean(
    input_path: InputOption,
    config: ConfigOption = None,
) -> None:
    """Clean and validate a sales file and report the results."""
    from techtrends.validation import CleaningReporter

    settings = _load_settings(config)
    console.print(f"[blue]Processing {input_path}[/blue]")

    result = _clean_file(input_path, settings)

    reporter = CleaningReporter(console, preview_rows=settings.dashboard.preview_rows)
    reporter.print_results(result)

    if not result.has_valid_records:
        console.print("\n[red]No valid records to analyze.[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"\n[green]{result.stats.valid} valid records ready for the dashboard[/green]"
    )


def _print_summary(summary: "DashboardSummary") -> None:
    """Render dashboard aggregates as tables."""
    kpis = Table(title="Sales Overview")
    kpis.add_column("Metric", style="cyan")
    kpis.add_column("Value", justify="right", style="green")
    kpis.add_row("Total sales", f"${summary.total_sales:,.2f}")
    kpis.add_row("Transactions", str(summary.total_transactions))
    kpis.add_row("Average ticket", f"${summary.average_ticket:,.2f}")
    console.print(kpis)

    products = Table(title="Top Products")
    products.add_column("Product", style="cyan")
    products.add_column("Revenue", justify="right")
    products.add_column("Units", justify="right")
    for product in summary.top_products:
        products.add_row(
            escape(product.name), f"${product.total:,.2f}", f"{product.quantity:g}"
        )
    console.print(products)

    months = Table(title="Sales by Month")
    months.add_column("Month", style="cyan")
    months.add_column("Revenue", justify="right")
    for month in summary.sales_by_month:
        months.add_row(escape(month.month), f"${month.total:,.2f}")
    console.print(months)

    methods = Table(title="Payment Methods")
    methods.add_column("Method", style="cyan")
    methods.add_column("Transactions", justify="right")
    methods.add_column("Share", justify="right")
    for share in summary.payment_methods:
        methods.add_row(
            escape(share.method), str(share.count), f"{share.percentage:.1f}%"
        )
    console.print(methods)

    countries = Table(title="Sales by Country")
    countries.add_column("Country", style="cyan")
    countries.add_column("Revenue", justify="right")
    countries.add_column("Transactions", justify="right")
    for country in summary.sales_by_country:
        countries.add_row(
            escape(country.country), f"${country.total:,.2f}", str(country.transactions)
        )
    console.print(countries)


@app.command()
def dashboard(
    input_path: InputOption,
    config: ConfigOption = None,
    month: Annotated[
        int | None,
        typer.Option(
            "--month",
            "-m",
            min=1,
            max=12,
            help="Restrict KPIs and breakdowns to one calendar month (1-12).",
        ),
    ] = None,
    top: Annotated[
        int | None,
        typer.Option(
            "--top",
            "-t",
            min=1,
            help="Number of top products. Defaults to the config value.",
        ),
    ] = None,
) -> None:
    """Show sales KPIs and breakdowns over the valid records."""
    from techtrends.aggregation import summarize
    from techtrends.browse import filter_by_month

    settings = _load_settings(config)
    result = _clean_file(input_path, settings)

    if not result.has_valid_records:
        console.print("[red]No valid records to analyze.[/red]")
        raise typer.Exit(code=1)

    filtered = filter_by_month(result.valid_records, month)
    summary = summarize(
        filtered,
        top_n=top or settings.dashboard.top_products_limit,
        monthly_records=result.valid_records,
    )

    scope = f"month {month}" if month is not None else "all months"
    console.print(f"[blue]Dashboard for {len(filtered)} records ({scope})[/blue]")
    _print_summary(summary)


@app.command()
def browse(
    input_path: InputOption,
    config: ConfigOption = None,
    category: Annotated[
        str | None,
        typer.Option("--category", help="Only show this category."),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option(
            "--search",
            "-s",
            help="Search product name, transaction id or country.",
        ),
    ] = None,
    page: Annotated[
        int,
        typer.Option("--page", "-p", min=1, help="Page number."),
    ] = 1,
) -> None:
    """List valid records by category and date, one page at a time."""
    from techtrends.browse import filter_records, list_categories, paginate, sort_records
    from techtrends.schemas import records_to_frame

    settings = _load_settings(config)
    result = _clean_file(input_path, settings)

    categories = list_categories(result.valid_records)
    console.print(f"[dim]Categories: {escape(', '.join(categories)) or '-'}[/dim]")

    rows = sort_records(filter_records(result.valid_records, category, search))
    current = paginate(rows, page, settings.browse.page_size)
    frame = records_to_frame(current.records)

    table = Table(
        title=f"Sales Records (page {current.number} of {current.total_pages})"
    )
    for column in ("transaction_id", "date", "product_name", "category", "country"):
        table.add_column(column.replace("_", " ").title(), style="cyan")
    table.add_column("Quantity", justify="right")
    table.add_column("Total", justify="right", style="green")

    for row in frame.itertuples(index=False):
        table.add_row(
            escape(row.transaction_id),
            row.date,
            escape(row.product_name),
            escape(row.category),
            escape(row.country),
            f"{row.quantity:g}",
            f"${row.total_amount:,.2f}",
        )

    console.print(table)
    console.print(f"[dim]{current.total_records} matching records[/dim]")


@app.command()
def version() -> None:
    """Show version information."""
    from techtrends import __version__

    console.print(f"techtrends version {__version__}")


if __name__ == "__main__":
    app()

"""CLI commands for the daily full report."""

from __future__ import annotations

from pathlib import Path

import click

from osr.application.daily_full_report import DailyFullReportHandler
from osr.application.export_rows import daily_report_tables
from osr.domain.exceptions import DomainException
from osr.domain.model.value_objects import currency_symbol
from osr.infrastructure.bootstrap import order_repository, product_catalog, settings
from osr.infrastructure.export.xlsx_writer import write_tables


@click.command("daily")
@click.option("--date", "report_date", required=True, help="Report day (YYYY-MM-DD).")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the workbook into.",
)
def report_daily(report_date: str, output_dir: Path) -> None:
    """Write the full Excel report for one day across all customers."""
    config = settings()
    handler = DailyFullReportHandler(
        order_repo=order_repository(config),
        product_catalog=product_catalog(config),
        currency=config.currency,
    )

    try:
        report = handler.handle(report_date)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    path = output_dir / f"Daily_Full_Report_{report.report_date.isoformat()}.xlsx"
    write_tables(daily_report_tables(report), path, currency_symbol(config.currency))

    financial = report.financial
    click.echo(f"Daily report for {report.report_date.isoformat()}")
    click.echo(f"  {'Total Amount':<15} {str(financial.total):>15}")
    click.echo(f"  {'Collection':<15} {str(financial.collection):>15}")
    click.echo(f"  {'Pending':<15} {str(financial.pending):>15}")
    click.echo(f"  {'Total Orders':<15} {financial.order_count:>15}")
    click.echo(f"Written to {path}")

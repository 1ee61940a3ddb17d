"""CLI commands for customer statements."""

from __future__ import annotations

import re
from pathlib import Path

import click

from osr.application.export_rows import (
    STATEMENT_COLUMN_WIDTHS,
    format_day,
    item_text,
    statement_pdf_sections,
    statement_sheet_rows,
    statement_title,
)
from osr.application.generate_statement import GenerateStatementHandler
from osr.domain.exceptions import DomainException
from osr.domain.model.statement import StatementResult
from osr.domain.repository.customer_directory import CustomerDirectory
from osr.domain.service.daily_aggregator import summarize_by_date
from osr.infrastructure.bootstrap import customer_directory, order_repository, settings
from osr.infrastructure.export.pdf_writer import write_statement_pdf
from osr.infrastructure.export.xlsx_writer import write_statement_sheet

_statement_options = [
    click.option("--start", "start_date", required=True, help="First day (YYYY-MM-DD)."),
    click.option("--end", "end_date", required=True, help="Last day (YYYY-MM-DD), inclusive."),
    click.option(
        "--customer",
        "customer_scope",
        default="all",
        show_default=True,
        help="Customer ID, or 'all'.",
    ),
]


def statement_options(func):
    for option in reversed(_statement_options):
        func = option(func)
    return func


def _generate(start_date: str, end_date: str, customer_scope: str) -> StatementResult:
    config = settings()
    handler = GenerateStatementHandler(
        order_repo=order_repository(config),
        customer_directory=customer_directory(config),
        currency=config.currency,
    )
    try:
        return handler.handle(start_date, end_date, customer_scope)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def file_stem(result: StatementResult, directory: CustomerDirectory) -> str:
    """``Statement_<Name>_<start>_to_<end>`` with whitespace in the name as ``_``."""
    if result.scope.is_all:
        name = "All_Customers"
    else:
        customer = directory.get_by_id(result.scope.customer_id)  # type: ignore[arg-type]
        name = re.sub(r"\s+", "_", customer.name) if customer and customer.name else "Customer"
    return f"Statement_{name}_{result.start_date.isoformat()}_to_{result.end_date.isoformat()}"


@click.command("show")
@statement_options
def statement_show(start_date: str, end_date: str, customer_scope: str) -> None:
    """Show a statement on screen."""
    result = _generate(start_date, end_date, customer_scope)

    click.echo(f"  {'Grand Total Value':<20} {str(result.grand_total_amount):>15}")
    click.echo(f"  {'Grand Total Paid':<20} {str(result.grand_total_paid):>15}")
    click.echo(f"  {'Grand Pending':<20} {str(result.grand_total_pending):>15}")
    click.echo(f"  {'Total Orders':<20} {result.total_orders:>15}")
    click.echo()

    if result.is_empty:
        click.echo("No orders found for the selected criteria.")
        return

    for cs in result.customer_statements:
        click.echo(f"{cs.customer_name}")
        click.echo(
            f"  Total: {cs.total_amount}  Paid: {cs.total_paid}  Pending: {cs.pending_amount}"
        )
        for summary in summarize_by_date(cs.orders, cs.total_amount.currency):
            click.echo(f"  {format_day(summary.date)}")
            for item in summary.items:
                click.echo(f"    {item_text(item)} - Total: {item.total}")
            click.echo(
                f"    Total: {summary.total_amount}  Paid: {summary.total_paid}  "
                f"Balance: {summary.balance}"
            )
        click.echo()


@click.command("export")
@statement_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["pdf", "xlsx"]),
    default="pdf",
    show_default=True,
    help="Document format.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the document into.",
)
def statement_export(
    start_date: str,
    end_date: str,
    customer_scope: str,
    fmt: str,
    output_dir: Path,
) -> None:
    """Export a statement as PDF or Excel."""
    config = settings()
    result = _generate(start_date, end_date, customer_scope)
    title = statement_title(config.business_name)
    try:
        path = output_dir / f"{file_stem(result, customer_directory(config))}.{fmt}"
        if fmt == "pdf":
            write_statement_pdf(
                result, statement_pdf_sections(result), path, title, font_path=config.pdf_font
            )
        else:
            write_statement_sheet(
                statement_sheet_rows(result, title), path, STATEMENT_COLUMN_WIDTHS
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Statement for {len(result.customer_statements)} customer(s), "
        f"{result.total_orders} order(s) written to {path}"
    )

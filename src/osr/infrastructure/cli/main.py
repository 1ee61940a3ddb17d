import logging

import click

from osr.infrastructure.cli.report_commands import report_daily
from osr.infrastructure.cli.statement_commands import statement_export, statement_show


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """OSR: Order Statement Reporting"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def statement() -> None:
    """Customer statements over a date range."""


@cli.group()
def report() -> None:
    """Single-day reports."""


# Register subcommands
statement.add_command(statement_export)
statement.add_command(statement_show)
report.add_command(report_daily)

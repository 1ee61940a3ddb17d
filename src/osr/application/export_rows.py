"""Row builders for the statement and daily-report exporters.

Pure functions: each takes an engine result and returns the rows a
writer lays out verbatim.  PDF rows are fully formatted text; the
spreadsheet rows keep amounts as raw numbers so formulas still work,
except in the daily financial summary which is shown pre-formatted.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from osr.application.dto import Cell, SheetTable, StatementPdfSection, TableRow
from osr.domain.model.daily_report import DailyFullReport, DetailRow, RowKind
from osr.domain.model.order import OrderItem
from osr.domain.model.statement import DailySummary, StatementResult
from osr.domain.model.value_objects import Money
from osr.domain.service.daily_aggregator import summarize_by_date

STATEMENT_HEADER = ("Date", "Items", "Total", "Paid", "Balance")
STATEMENT_COLUMN_WIDTHS = (12, 40, 10, 10, 10)


# --- Formatting ---------------------------------------------------------------


def format_money(amount: Money) -> str:
    """Currency symbol followed by two fraction digits, e.g. ``₹35.00``."""
    return str(amount)


def format_day(day: date) -> str:
    """Day/month/year without zero padding, e.g. ``5/1/2024``."""
    return f"{day.day}/{day.month}/{day.year}"


def item_text(item: OrderItem) -> str:
    return f"{item.product_name} (x{item.quantity} @ {format_money(item.price)})"


def items_text(items: Iterable[OrderItem], separator: str) -> str:
    return separator.join(item_text(item) for item in items)


# --- Statement ----------------------------------------------------------------


def statement_title(business_name: str) -> str:
    return f"{business_name} - Statement"


def period_text(result: StatementResult) -> str:
    return f"Period: {result.start_date.isoformat()} to {result.end_date.isoformat()}"


def statement_pdf_sections(result: StatementResult) -> list[StatementPdfSection]:
    """One section per customer, daily rows most recent first."""
    sections = []
    for cs in result.customer_statements:
        summaries = summarize_by_date(cs.orders, cs.total_amount.currency)
        sections.append(
            StatementPdfSection(
                heading=f"Customer: {cs.customer_name}",
                summary=(
                    f"Total: {format_money(cs.total_amount)} | "
                    f"Paid: {format_money(cs.total_paid)} | "
                    f"Pending: {format_money(cs.pending_amount)}"
                ),
                header=STATEMENT_HEADER,
                rows=tuple(_pdf_row(summary) for summary in summaries),
            )
        )
    return sections


def _pdf_row(summary: DailySummary) -> tuple[str, ...]:
    return (
        format_day(summary.date),
        items_text(summary.items, "\n"),
        format_money(summary.total_amount),
        format_money(summary.total_paid),
        format_money(summary.balance),
    )


def statement_sheet_rows(result: StatementResult, title: str) -> list[list[Cell]]:
    """Rows of the single-sheet statement workbook.

    Amount cells are raw numbers; only the item list is text.
    """
    rows: list[list[Cell]] = [
        [title],
        [period_text(result)],
        [],
        ["Overall Summary"],
        ["Total Order Value", result.grand_total_amount.amount],
        ["Total Paid", result.grand_total_paid.amount],
        ["Pending Amount", result.grand_total_pending.amount],
        [],
    ]

    for cs in result.customer_statements:
        rows.append([f"Customer: {cs.customer_name}"])
        rows.append(
            [
                "Customer Total",
                cs.total_amount.amount,
                "Customer Paid",
                cs.total_paid.amount,
                "Customer Pending",
                cs.pending_amount.amount,
            ]
        )
        rows.append(list(STATEMENT_HEADER))
        for summary in summarize_by_date(cs.orders, cs.total_amount.currency):
            rows.append(
                [
                    format_day(summary.date),
                    items_text(summary.items, ", "),
                    summary.total_amount.amount,
                    summary.total_paid.amount,
                    summary.balance.amount,
                ]
            )
        rows.append([])

    return rows


# --- Daily full report --------------------------------------------------------


def daily_report_tables(report: DailyFullReport) -> list[SheetTable]:
    """The four worksheets of the daily full report, in workbook order."""
    return [
        _financial_table(report),
        _customer_table(report),
        _product_table(report),
        _detail_table(report),
    ]


def _financial_table(report: DailyFullReport) -> SheetTable:
    financial = report.financial
    return SheetTable(
        title="Financial Summary",
        header=("Metric", "Value"),
        rows=(
            TableRow(("Total Amount", format_money(financial.total))),
            TableRow(("Collection", format_money(financial.collection))),
            TableRow(("Pending", format_money(financial.pending))),
            TableRow(("Total Orders", financial.order_count)),
        ),
        column_widths=(20, 15),
    )


def _customer_table(report: DailyFullReport) -> SheetTable:
    return SheetTable(
        title="Customer Summary",
        header=("Customer Name", "Total Amount", "Amount Paid", "Pending Amount"),
        rows=tuple(
            TableRow((c.name, c.total.amount, c.paid.amount, c.pending.amount))
            for c in report.customers
        ),
        column_widths=(25, 15, 15, 15),
    )


def _product_table(report: DailyFullReport) -> SheetTable:
    return SheetTable(
        title="Product Summary",
        header=("Product Name", "Total Quantity Sold"),
        rows=tuple(TableRow((p.product_name, p.quantity_text)) for p in report.products),
        column_widths=(30, 20),
    )


def _detail_table(report: DailyFullReport) -> SheetTable:
    return SheetTable(
        title="All Orders Detailed",
        header=(
            "Customer Name",
            "Product Name",
            "Quantity",
            "Unit",
            "Price per Unit",
            "Total Price",
        ),
        rows=tuple(_detail_row(row) for row in report.details),
        column_widths=(25, 30, 10, 10, 15, 15),
    )


def _detail_row(row: DetailRow) -> TableRow:
    if row.kind is RowKind.BLANK:
        return TableRow((), RowKind.BLANK)
    if row.kind is RowKind.ITEM:
        return TableRow(
            (
                row.customer_name,
                row.product_name,
                row.quantity.value,  # type: ignore[union-attr]
                row.unit,
                row.price.amount,  # type: ignore[union-attr]
                row.total.amount,  # type: ignore[union-attr]
            ),
            RowKind.ITEM,
        )
    return TableRow(("", "", "", "", row.label, row.total.amount), row.kind)  # type: ignore[union-attr]

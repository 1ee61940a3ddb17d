"""Spreadsheet writers (openpyxl).

Lay out rows produced by ``osr.application.export_rows`` exactly as
given.  Styling is driven by each row's ``RowKind``; nothing here
recomputes a total.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from osr.application.dto import Cell, SheetTable
from osr.domain.model.daily_report import RowKind

logger = logging.getLogger(__name__)

HEADER_FONT = Font(bold=True)
SUBTOTAL_FONT = Font(bold=True)
GRAND_TOTAL_FONT = Font(bold=True, size=14)


def currency_format(symbol: str) -> str:
    return f'"{symbol}"#,##0.00'


def write_tables(tables: Sequence[SheetTable], path: Path, currency_symbol: str) -> Path:
    """Write one worksheet per table and save the workbook to *path*."""
    wb = Workbook()
    wb.remove(wb.active)

    for table in tables:
        ws = wb.create_sheet(title=table.title)
        ws.append(list(table.header))
        for cell in ws[1]:
            cell.font = HEADER_FONT

        for row_idx, row in enumerate(table.rows, start=2):
            ws.append(list(row.cells))
            if row.kind in (RowKind.SUBTOTAL, RowKind.GRAND_TOTAL):
                _style_total_row(ws, row_idx, len(row.cells), row.kind, currency_symbol)

        _set_widths(ws, table.column_widths)

    return _save(wb, path)


def write_statement_sheet(
    rows: Sequence[Sequence[Cell]],
    path: Path,
    column_widths: Sequence[int] = (),
) -> Path:
    """Write the statement rows to a single "Statement" worksheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Statement"

    for row in rows:
        ws.append(list(row))
    ws["A1"].font = Font(bold=True, size=14)

    _set_widths(ws, column_widths)
    return _save(wb, path)


# --- Internal helpers ---------------------------------------------------------


def _style_total_row(
    ws: Worksheet,
    row_idx: int,
    width: int,
    kind: RowKind,
    symbol: str,
) -> None:
    font = GRAND_TOTAL_FONT if kind is RowKind.GRAND_TOTAL else SUBTOTAL_FONT
    label_cell = ws.cell(row=row_idx, column=width - 1)
    amount_cell = ws.cell(row=row_idx, column=width)
    label_cell.font = font
    amount_cell.font = font
    amount_cell.number_format = currency_format(symbol)


def _set_widths(ws: Worksheet, widths: Sequence[int]) -> None:
    for idx, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width


def _save(wb: Workbook, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    logger.debug("Wrote workbook %s", path)
    return path

"""Data Transfer Objects: plain containers that cross layer boundaries.

These carry the exact cells the PDF and spreadsheet writers receive,
so exporters never reach into domain objects or re-derive totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from osr.domain.model.daily_report import RowKind

# A cell is either display text or a raw number a spreadsheet can sum.
Cell = str | Decimal | int


@dataclass(frozen=True)
class TableRow:
    """Output: one row of cells plus the tag that decides its styling."""

    cells: tuple[Cell, ...]
    kind: RowKind = RowKind.ITEM


@dataclass(frozen=True)
class SheetTable:
    """Output: one worksheet of the daily full report."""

    title: str
    header: tuple[str, ...]
    rows: tuple[TableRow, ...]
    column_widths: tuple[int, ...] = field(default=())


@dataclass(frozen=True)
class StatementPdfSection:
    """Output: one customer's block of the statement PDF."""

    heading: str  # e.g. "Customer: Asha"
    summary: str  # e.g. "Total: ₹35.00 | Paid: ₹10.00 | Pending: ₹25.00"
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]  # [date, items, total, paid, balance]

"""Unit tests for the rows handed to the PDF and spreadsheet writers."""

from datetime import date
from decimal import Decimal

from osr.application.daily_full_report import DailyFullReportHandler
from osr.application.export_rows import (
    daily_report_tables,
    format_day,
    item_text,
    statement_pdf_sections,
    statement_sheet_rows,
    statement_title,
)
from osr.application.generate_statement import GenerateStatementHandler
from osr.domain.model.daily_report import RowKind
from osr.domain.model.product import Product
from tests.builders import make_item, make_order
from tests.fakes import FakeCustomerDirectory, FakeOrderRepository, FakeProductCatalog


def _orders():
    return [
        make_order("o1", "c1", "Asha", date="2024-01-01", total="35", paid="10", items=[
            make_item("p1", "Milk", qty=2, price="10"),
            make_item("p1", "Milk", qty=1, price="10"),
            make_item("p2", "Paneer", qty=1, price="5", unit="piece"),
        ]),
        make_order("o2", "c1", "Asha", date="2024-01-02", total="10", paid="10", items=[
            make_item("p1", "Milk", qty=1, price="10"),
        ]),
        make_order("o3", "c2", "Bharat", date="2024-01-02", total="15", paid=None, items=[
            make_item("p3", "Ghee", qty="1.5", price="10", unit="ml"),
        ]),
    ]


def _statement():
    handler = GenerateStatementHandler(FakeOrderRepository(_orders()), FakeCustomerDirectory())
    return handler.handle("2024-01-01", "2024-01-02")


def _daily_report():
    handler = DailyFullReportHandler(
        FakeOrderRepository(_orders()),
        FakeProductCatalog([
            Product("p1", "Milk", "litre"),
            Product("p2", "Paneer", "piece"),
            Product("p3", "Ghee", "ml"),
        ]),
    )
    return handler.handle("2024-01-02")


class TestFormatting:

    def test_day_is_day_month_year_unpadded(self):
        assert format_day(date(2024, 1, 5)) == "5/1/2024"
        assert format_day(date(2024, 12, 25)) == "25/12/2024"

    def test_item_text(self):
        assert item_text(make_item(name="Milk", qty="1.5", price="60")) == "Milk (x1.5 @ ₹60.00)"

    def test_item_text_rounds_half_cent_price_up(self):
        assert item_text(make_item(name="Ghee", qty="1", price="0.125")) == "Ghee (x1 @ ₹0.13)"

    def test_title(self):
        assert statement_title("Dairy") == "Dairy - Statement"


class TestStatementPdfSections:

    def test_one_section_per_customer(self):
        sections = statement_pdf_sections(_statement())
        assert [s.heading for s in sections] == ["Customer: Asha", "Customer: Bharat"]

    def test_summary_line(self):
        asha = statement_pdf_sections(_statement())[0]
        assert asha.summary == "Total: ₹45.00 | Paid: ₹20.00 | Pending: ₹25.00"

    def test_rows_are_formatted_and_most_recent_first(self):
        asha = statement_pdf_sections(_statement())[0]
        assert asha.header == ("Date", "Items", "Total", "Paid", "Balance")
        assert asha.rows == (
            ("2/1/2024", "Milk (x1 @ ₹10.00)", "₹10.00", "₹10.00", "₹0.00"),
            (
                "1/1/2024",
                "Milk (x3 @ ₹10.00)\nPaneer (x1 @ ₹5.00)",
                "₹35.00",
                "₹10.00",
                "₹25.00",
            ),
        )


class TestStatementSheetRows:

    def test_layout(self):
        rows = statement_sheet_rows(_statement(), "Dairy - Statement")
        assert rows[:8] == [
            ["Dairy - Statement"],
            ["Period: 2024-01-01 to 2024-01-02"],
            [],
            ["Overall Summary"],
            ["Total Order Value", Decimal("60")],
            ["Total Paid", Decimal("20")],
            ["Pending Amount", Decimal("40")],
            [],
        ]

    def test_customer_block_uses_raw_numbers(self):
        rows = statement_sheet_rows(_statement(), "T")
        asha_start = rows.index(["Customer: Asha"])
        assert rows[asha_start + 1] == [
            "Customer Total", Decimal("45"),
            "Customer Paid", Decimal("20"),
            "Customer Pending", Decimal("25"),
        ]
        assert rows[asha_start + 2] == ["Date", "Items", "Total", "Paid", "Balance"]
        assert rows[asha_start + 4] == [
            "1/1/2024",
            "Milk (x3 @ ₹10.00), Paneer (x1 @ ₹5.00)",
            Decimal("35"),
            Decimal("10"),
            Decimal("25"),
        ]

    def test_blank_row_after_each_customer(self):
        rows = statement_sheet_rows(_statement(), "T")
        assert rows[-1] == []


class TestDailyReportTables:

    def test_four_sheets_in_order(self):
        tables = daily_report_tables(_daily_report())
        assert [t.title for t in tables] == [
            "Financial Summary",
            "Customer Summary",
            "Product Summary",
            "All Orders Detailed",
        ]

    def test_financial_summary_is_preformatted(self):
        financial = daily_report_tables(_daily_report())[0]
        assert [r.cells for r in financial.rows] == [
            ("Total Amount", "₹25.00"),
            ("Collection", "₹10.00"),
            ("Pending", "₹15.00"),
            ("Total Orders", 2),
        ]

    def test_customer_summary_is_raw_numbers(self):
        customers = daily_report_tables(_daily_report())[1]
        assert [r.cells for r in customers.rows] == [
            ("Asha", Decimal("10"), Decimal("10"), Decimal("0")),
            ("Bharat", Decimal("15"), Decimal("0"), Decimal("15")),
        ]

    def test_product_summary_quantity_text(self):
        products = daily_report_tables(_daily_report())[2]
        assert [r.cells for r in products.rows] == [("Milk", "1 litre"), ("Ghee", "1.5")]

    def test_detailed_rows_carry_kind_tags(self):
        detail = daily_report_tables(_daily_report())[3]
        assert [r.kind for r in detail.rows] == [
            RowKind.ITEM,
            RowKind.SUBTOTAL,
            RowKind.BLANK,
            RowKind.ITEM,
            RowKind.SUBTOTAL,
            RowKind.BLANK,
            RowKind.GRAND_TOTAL,
        ]
        assert detail.rows[0].cells == (
            "Asha", "Milk", Decimal("1"), "litre", Decimal("10"), Decimal("10"),
        )
        assert detail.rows[1].cells == ("", "", "", "", "Customer Total", Decimal("10"))
        assert detail.rows[2].cells == ()
        assert detail.rows[-1].cells == ("", "", "", "", "Grand Total", Decimal("25"))

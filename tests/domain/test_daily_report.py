"""Unit tests for the single-day, all-customer report."""

from datetime import date

import pytest

from osr.domain.model.daily_report import RowKind
from osr.domain.model.product import Product, display_unit
from osr.domain.model.value_objects import Money, Quantity
from osr.domain.service.daily_report import DailyReportAggregator
from tests.builders import make_item, make_order
from tests.fakes import FakeProductCatalog

DAY = date(2024, 1, 1)


def _aggregator(products: list[Product] | None = None) -> DailyReportAggregator:
    if products is None:
        products = [
            Product("p1", "Milk", "litre"),
            Product("p2", "Paneer", "piece"),
            Product("p3", "Ghee", "ml"),
        ]
    return DailyReportAggregator(FakeProductCatalog(products))


def _orders():
    return [
        make_order("o1", "c2", "Bharat", total="25", paid="25", items=[
            make_item("p1", "Milk", qty=2, price="10"),
            make_item("p2", "Paneer", qty=1, price="5", unit="piece"),
        ]),
        make_order("o2", "c1", "asha", total="10", paid=None, items=[
            make_item("p1", "Milk", qty=1, price="10"),
        ]),
        make_order("o3", "c2", "Bharat", total="40", paid="10", items=[
            make_item("p3", "Ghee", qty=200, price="0.2", unit="ml"),
        ]),
        make_order("o4", "c1", "asha", date="2024-01-02", total="999"),
    ]


class TestDisplayUnit:

    @pytest.mark.parametrize(
        "base, shown",
        [("piece", "pcs"), ("ml", ""), ("litre", "litre"), ("units", "units")],
    )
    def test_remap(self, base, shown):
        assert display_unit(base) == shown


class TestFinancialTotals:

    def test_only_orders_on_the_day(self):
        financial = _aggregator().aggregate(_orders(), DAY).financial
        assert financial.total == Money.of("75")
        assert financial.collection == Money.of("35")
        assert financial.pending == Money.of("40")
        assert financial.order_count == 3

    def test_no_orders_is_all_zero(self):
        report = _aggregator().aggregate(_orders(), date(2023, 12, 31))
        assert report.is_empty
        assert report.financial.total == Money.zero()
        assert report.financial.collection == Money.zero()
        assert report.customers == ()
        assert report.products == ()


class TestCustomerTotals:

    def test_grouped_in_first_seen_order(self):
        customers = _aggregator().aggregate(_orders(), DAY).customers
        assert [(c.customer_id, c.name) for c in customers] == [("c2", "Bharat"), ("c1", "asha")]

    def test_amounts_per_customer(self):
        bharat, asha = _aggregator().aggregate(_orders(), DAY).customers
        assert (bharat.total, bharat.paid, bharat.pending) == (
            Money.of("65"), Money.of("35"), Money.of("30"),
        )
        assert (asha.total, asha.paid, asha.pending) == (
            Money.of("10"), Money.zero(), Money.of("10"),
        )


class TestProductTotals:

    def test_quantities_summed_by_name(self):
        products = _aggregator().aggregate(_orders(), DAY).products
        assert [(p.product_name, p.quantity) for p in products] == [
            ("Milk", Quantity.of(3)),
            ("Paneer", Quantity.of(1)),
            ("Ghee", Quantity.of(200)),
        ]

    def test_units_from_catalog_with_remap(self):
        products = _aggregator().aggregate(_orders(), DAY).products
        assert [p.quantity_text for p in products] == ["3 litre", "1 pcs", "200"]

    def test_missing_catalog_entry_defaults_to_units(self):
        products = _aggregator([]).aggregate(_orders(), DAY).products
        assert products[0].quantity_text == "3 units"

    def test_catalog_entry_without_unit_defaults_to_units(self):
        products = _aggregator([Product("p1", "Milk", "")]).aggregate(_orders(), DAY).products
        assert products[0].unit == "units"

    def test_grouped_by_name_not_id(self):
        orders = [make_order(items=[
            make_item("p1", "Milk", qty=1),
            make_item("p9", "Milk", qty=2),
        ])]
        products = _aggregator().aggregate(orders, DAY).products
        assert len(products) == 1
        assert products[0].quantity == Quantity.of(3)
        assert products[0].unit == "litre"


class TestDetailedListing:

    def test_layout(self):
        details = _aggregator().aggregate(_orders(), DAY).details
        assert [r.kind for r in details] == [
            RowKind.ITEM,         # asha: Milk
            RowKind.SUBTOTAL,
            RowKind.BLANK,
            RowKind.ITEM,         # Bharat: Milk
            RowKind.ITEM,         # Bharat: Paneer
            RowKind.ITEM,         # Bharat: Ghee
            RowKind.SUBTOTAL,
            RowKind.BLANK,
            RowKind.GRAND_TOTAL,
        ]

    def test_customers_sorted_by_name(self):
        details = _aggregator().aggregate(_orders(), DAY).details
        names = [r.customer_name for r in details if r.kind is RowKind.ITEM]
        assert names == ["asha", "Bharat", "Bharat", "Bharat"]

    def test_item_rows_use_item_unit_and_values(self):
        details = _aggregator().aggregate(_orders(), DAY).details
        paneer = details[4]
        assert paneer.product_name == "Paneer"
        assert paneer.unit == "piece"
        assert paneer.quantity == Quantity.of(1)
        assert paneer.price == Money.of("5")
        assert paneer.total == Money.of("5")

    def test_subtotals_sum_item_totals(self):
        details = _aggregator().aggregate(_orders(), DAY).details
        subtotals = [r for r in details if r.kind is RowKind.SUBTOTAL]
        assert [s.total for s in subtotals] == [Money.of("10"), Money.of("65")]
        assert all(s.label == "Customer Total" for s in subtotals)

    def test_grand_total_sums_subtotals(self):
        report = _aggregator().aggregate(_orders(), DAY)
        assert report.details[-1].label == "Grand Total"
        assert report.grand_total == Money.of("75")

    def test_empty_day_has_only_grand_total(self):
        report = _aggregator().aggregate([], DAY)
        assert [r.kind for r in report.details] == [RowKind.GRAND_TOTAL]
        assert report.grand_total == Money.zero()

"""Application service: Daily Full Report use case (query)."""

from __future__ import annotations

import logging
from datetime import date, datetime

from osr.domain.model.calendar import to_utc_day
from osr.domain.model.daily_report import DailyFullReport
from osr.domain.model.value_objects import DEFAULT_CURRENCY
from osr.domain.repository.order_repository import OrderRepository
from osr.domain.repository.product_catalog import ProductCatalog
from osr.domain.service.daily_report import DailyReportAggregator

logger = logging.getLogger(__name__)


class DailyFullReportHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_catalog: ProductCatalog,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._order_repo = order_repo
        self._aggregator = DailyReportAggregator(product_catalog, currency)

    def handle(self, report_date: date | datetime | str) -> DailyFullReport:
        """Build the full report for *report_date* across all customers."""
        day = to_utc_day(report_date)
        report = self._aggregator.aggregate(self._order_repo.list_all(), day)
        logger.debug(
            "Daily report %s: %d orders, %d customers, %d products",
            day,
            report.financial.order_count,
            len(report.customers),
            len(report.products),
        )
        return report

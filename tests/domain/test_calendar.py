"""Unit tests for UTC calendar-day normalisation."""

from datetime import date, datetime, timedelta, timezone

import pytest

from osr.domain.exceptions import InvalidInputError
from osr.domain.model.calendar import to_utc_day


class TestToUtcDay:

    def test_plain_day_string(self):
        assert to_utc_day("2024-01-02") == date(2024, 1, 2)

    def test_date_passes_through(self):
        assert to_utc_day(date(2024, 1, 2)) == date(2024, 1, 2)

    def test_naive_datetime_is_taken_as_utc(self):
        assert to_utc_day(datetime(2024, 1, 2, 23, 59)) == date(2024, 1, 2)

    def test_aware_datetime_is_converted_to_utc(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        assert to_utc_day(datetime(2024, 1, 2, 3, 0, tzinfo=ist)) == date(2024, 1, 1)

    def test_timestamp_string_with_offset(self):
        assert to_utc_day("2024-01-02T03:00:00+05:30") == date(2024, 1, 1)

    def test_timestamp_string_with_z_suffix(self):
        assert to_utc_day("2024-01-02T23:00:00Z") == date(2024, 1, 2)

    def test_surrounding_whitespace_ignored(self):
        assert to_utc_day(" 2024-01-02 ") == date(2024, 1, 2)

    @pytest.mark.parametrize("raw", ["", "   ", "yesterday", "2024-13-01", "01/02/2024", None, 20240102])
    def test_unparseable_rejected(self, raw):
        with pytest.raises(InvalidInputError, match="Invalid date"):
            to_utc_day(raw)

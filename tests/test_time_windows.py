"""Tests for calendar-day windows and month buckets."""

from datetime import date, datetime

import pytest

from asset_tracker.exceptions import InvalidDateError
from asset_tracker.time_windows import (
    MonthBucket,
    days_until,
    is_overdue,
    is_today,
    is_within_next_days,
    month_bucket_key,
    to_date,
    trailing_months,
)


class TestToDate:
    """Tests for to_date."""

    def test_date_passes_through(self) -> None:
        assert to_date(date(2024, 1, 15)) == date(2024, 1, 15)

    def test_datetime_is_truncated(self) -> None:
        assert to_date(datetime(2024, 1, 15, 23, 59)) == date(2024, 1, 15)

    def test_iso_strings(self) -> None:
        assert to_date("2024-01-15") == date(2024, 1, 15)
        assert to_date("2024-01-15T10:30:00") == date(2024, 1, 15)
        assert to_date("2024-01-15T10:30:00Z") == date(2024, 1, 15)

    @pytest.mark.parametrize("value", ["not-a-date", "", "2024-13-01", None, 20240115])
    def test_invalid_values_raise(self, value: object) -> None:
        with pytest.raises(InvalidDateError):
            to_date(value)


class TestWindowPredicates:
    """Tests for is_within_next_days, is_overdue and is_today."""

    def test_within_window(self) -> None:
        assert is_within_next_days(date(2024, 1, 30), date(2024, 1, 15), 30) is True

    def test_outside_window(self) -> None:
        assert is_within_next_days(date(2024, 2, 20), date(2024, 1, 15), 30) is False

    def test_window_is_strict_at_both_ends(self) -> None:
        now = date(2024, 1, 15)
        assert is_within_next_days(now, now, 30) is False
        assert is_within_next_days(date(2024, 2, 14), now, 30) is False
        assert is_within_next_days(date(2024, 2, 13), now, 30) is True

    def test_overdue(self) -> None:
        assert is_overdue(date(2024, 1, 14), date(2024, 1, 15)) is True
        assert is_overdue(date(2024, 1, 15), date(2024, 1, 15)) is False

    def test_today_ignores_time_of_day(self) -> None:
        assert is_today(datetime(2024, 1, 15, 8, 0), datetime(2024, 1, 15, 22, 0)) is True
        assert is_today(date(2024, 1, 16), date(2024, 1, 15)) is False

    def test_days_until(self) -> None:
        assert days_until("2024-01-20", date(2024, 1, 15)) == 5
        assert days_until("2024-01-10", date(2024, 1, 15)) == -5

    def test_bad_date_propagates(self) -> None:
        with pytest.raises(InvalidDateError):
            is_overdue("garbage", date(2024, 1, 15))


class TestMonthBuckets:
    """Tests for MonthBucket and trailing_months."""

    def test_month_bucket_key(self) -> None:
        assert month_bucket_key(date(2024, 1, 5)) == "Jan 2024"
        assert month_bucket_key("2024-01-31") == month_bucket_key(date(2024, 1, 1))
        assert month_bucket_key(date(2023, 1, 5)) != month_bucket_key(date(2024, 1, 5))

    def test_bucket_properties(self) -> None:
        bucket = MonthBucket(2024, 3)
        assert bucket.label == "Mar 2024"
        assert bucket.key == "2024-03"
        assert bucket.start == date(2024, 3, 1)
        assert str(bucket) == "Mar 2024"
        assert bucket.contains("2024-03-31")
        assert not bucket.contains(date(2024, 4, 1))

    def test_shift_crosses_year(self) -> None:
        assert MonthBucket(2024, 1).shift(-1) == MonthBucket(2023, 12)
        assert MonthBucket(2023, 12).shift(1) == MonthBucket(2024, 1)
        assert MonthBucket(2024, 2).shift(-14) == MonthBucket(2022, 12)

    def test_buckets_are_ordered(self) -> None:
        assert MonthBucket(2023, 12) < MonthBucket(2024, 1)

    def test_trailing_months_oldest_first(self) -> None:
        labels = [b.label for b in trailing_months(date(2024, 2, 10), 3)]
        assert labels == ["Dec 2023", "Jan 2024", "Feb 2024"]

    def test_trailing_months_is_restartable(self) -> None:
        months = trailing_months(date(2024, 1, 15), 6)
        assert list(months) == list(months)
        assert len(months) == 6

    def test_zero_months_is_empty(self) -> None:
        assert list(trailing_months(date(2024, 1, 15), 0)) == []

    def test_negative_months_raise(self) -> None:
        with pytest.raises(ValueError):
            trailing_months(date(2024, 1, 15), -1)

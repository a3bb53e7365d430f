"""Unit tests for the date rules and the date helpers."""

from datetime import date, datetime, timedelta, timezone

import pytest

from notifications.domain.model.dates import Weekday, parse_datetime
from notifications.domain.validation import rules
from tests.fakes import FakeClock, RecordingCallbacks

NOW = datetime(2024, 5, 15, 12, 0, 0)


class TestParseDatetime:

    def test_bare_date_is_midnight(self):
        result = parse_datetime("2024-05-01")
        assert result.ok
        assert result.value == datetime(2024, 5, 1)

    def test_date_and_time(self):
        assert parse_datetime("2024-05-01T10:30:00").value == datetime(2024, 5, 1, 10, 30)

    def test_year_one_is_a_real_date(self):
        assert parse_datetime("0001-01-01").ok

    @pytest.mark.parametrize("text", [None, "", "   ", "01/05/2024", "2024-13-01"])
    def test_failures(self, text):
        result = parse_datetime(text)
        assert not result.ok
        assert result.value is None
        assert result.text == text


class TestWeekday:

    def test_matches_datetime_numbering(self):
        assert Weekday(date(2024, 5, 6).weekday()) is Weekday.MONDAY

    def test_label(self):
        assert Weekday.SATURDAY.label == "Saturday"


class TestDateBetween:

    def test_inside_range(self):
        assert rules.is_date_between(
            "2024-01-15", datetime(2024, 1, 1), datetime(2024, 1, 31), "Date"
        ) is True

    def test_bounds_inclusive(self):
        start, end = datetime(2024, 1, 1), datetime(2024, 1, 31)
        assert rules.is_date_between(start, start, end, "Date") is True
        assert rules.is_date_between(end, start, end, "Date") is True

    def test_date_objects_accepted(self):
        assert rules.is_date_between(date(2024, 1, 1), date(2024, 1, 1), date(2024, 1, 2), "Date") is True

    def test_outside_range_message(self):
        sink = RecordingCallbacks()
        rules.is_date_between(
            "2024-02-01", date(2024, 1, 1), date(2024, 1, 31), "Date", notify=sink.notify
        )
        assert sink.notifications[0].message == (
            "The value of field 'Date' must be between 2024-01-01 and 2024-01-31"
        )

    def test_unparseable_text_reports_format_error(self):
        sink = RecordingCallbacks()
        result = rules.is_date_between(
            "31/01/2024", date(2024, 1, 1), date(2024, 1, 31), "Date",
            message="custom", notify=sink.notify,
        )
        assert result is False
        assert len(sink.notifications) == 1
        assert sink.notifications[0].key == "Date"
        assert sink.notifications[0].message == (
            "The field 'Date' must be a valid date in ISO 8601 format (yyyy-mm-dd)"
        )

    def test_custom_format_template(self):
        sink = RecordingCallbacks()
        rules.is_date_between(
            "bad", date(2024, 1, 1), date(2024, 1, 31), "Date",
            format_template="{0} got {1}", on_error=sink.on_error,
        )
        assert sink.errors[0].message == "Date got bad"


class TestDayOfWeek:

    def test_matching_day(self):
        assert rules.is_day_of_week("2024-05-06", Weekday.MONDAY, "Day") is True

    def test_plain_int_day(self):
        assert rules.is_day_of_week(date(2024, 5, 11), 5, "Day") is True

    def test_wrong_day_message_uses_label(self):
        sink = RecordingCallbacks()
        rules.is_day_of_week("2024-05-06", Weekday.FRIDAY, "Day", notify=sink.notify)
        assert sink.notifications[0].message == (
            "The value of field 'Day' must be a Friday day of the week"
        )


class TestFutureAndPast:

    def test_future(self):
        clock = FakeClock(NOW)
        assert rules.is_in_the_future("2024-05-16", "When", clock=clock) is True
        assert rules.is_in_the_future("2024-05-14", "When", clock=clock) is False

    def test_past(self):
        clock = FakeClock(NOW)
        assert rules.is_in_the_past("2024-05-14", "When", clock=clock) is True
        assert rules.is_in_the_past("2024-05-16", "When", clock=clock) is False

    def test_now_is_neither_future_nor_past(self):
        clock = FakeClock(NOW)
        assert rules.is_in_the_future(NOW, "When", clock=clock) is False
        assert rules.is_in_the_past(NOW, "When", clock=clock) is False

    def test_clock_read_once_per_call(self):
        clock = FakeClock(NOW)
        rules.is_in_the_future("2030-01-01", "When", clock=clock)
        assert clock.calls == 1

    def test_clock_not_read_when_text_is_bad(self):
        clock = FakeClock(NOW)
        assert rules.is_in_the_past("yesterday", "When", clock=clock) is False
        assert clock.calls == 0

    def test_advancing_clock_changes_outcome(self):
        clock = FakeClock(NOW)
        moment = datetime(2024, 5, 15, 13, 0, 0)
        assert rules.is_in_the_future(moment, "When", clock=clock) is True
        clock.advance(hours=2)
        assert rules.is_in_the_future(moment, "When", clock=clock) is False

    def test_default_clock_is_wall_clock(self):
        assert rules.is_in_the_past("2000-01-01", "When") is True
        assert rules.is_in_the_future("2999-01-01", "When") is True


class TestMixedTimezones:
    """Aware values against naive bounds or clocks, and the reverse."""

    def test_aware_value_inside_naive_bounds(self):
        assert rules.is_date_between(
            "2024-05-01T10:00:00+00:00", datetime(2024, 1, 1), datetime(2024, 12, 31), "When"
        ) is True

    def test_aware_value_outside_naive_bounds(self):
        sink = RecordingCallbacks()
        result = rules.is_date_between(
            "2025-01-01T00:00:00+00:00", date(2024, 1, 1), date(2024, 12, 31), "When",
            notify=sink.notify,
        )
        assert result is False
        assert len(sink.notifications) == 1

    def test_naive_value_inside_aware_bounds(self):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        end = datetime(2024, 12, 31, tzinfo=timezone.utc)
        assert rules.is_date_between("2024-05-01", start, end, "When") is True

    def test_aware_value_with_naive_clock(self):
        clock = FakeClock(NOW)
        assert rules.is_in_the_future("2024-05-15T13:00:00+02:00", "When", clock=clock) is True
        assert rules.is_in_the_past("2024-05-15T11:00:00+02:00", "When", clock=clock) is True

    def test_naive_value_with_aware_clock(self):
        clock = FakeClock(NOW.replace(tzinfo=timezone(timedelta(hours=2))))
        assert rules.is_in_the_past("2024-05-15T11:00:00", "When", clock=clock) is True
        assert rules.is_in_the_future("2024-05-15T11:00:00", "When", clock=clock) is False

    def test_aware_values_in_different_zones(self):
        start = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        end = datetime(2024, 5, 1, 13, 0, tzinfo=timezone.utc)
        assert rules.is_date_between("2024-05-01T14:30:00+02:00", start, end, "When") is True

"""Unit tests for the ExceptionCollector container."""

import pytest

from notifications.domain.exceptions import AggregateDomainError, DomainError
from notifications.domain.model.exception_collector import ExceptionCollector


def _errors(count: int) -> list[DomainError]:
    return [DomainError(f"k{i}", f"message {i}") for i in range(count)]


class TestRaiseAll:

    def test_nothing_collected_is_noop(self):
        collector = ExceptionCollector()
        collector.raise_all()
        assert not collector.has_errors

    def test_single_error_raised_unwrapped(self):
        (error,) = _errors(1)
        collector = ExceptionCollector([error])
        with pytest.raises(DomainError) as exc_info:
            collector.raise_all()
        assert exc_info.value is error

    def test_many_errors_raised_as_aggregate_in_order(self):
        errors = _errors(3)
        collector = ExceptionCollector(errors)
        with pytest.raises(AggregateDomainError) as exc_info:
            collector.raise_all()
        assert list(exc_info.value.errors) == errors

    def test_clear_after_raise_empties_collector(self):
        collector = ExceptionCollector(_errors(2))
        with pytest.raises(AggregateDomainError):
            collector.raise_all(clear_after=True)
        assert not collector.has_errors
        assert collector.errors == ()

    def test_clear_after_single_raise(self):
        collector = ExceptionCollector(_errors(1))
        with pytest.raises(DomainError):
            collector.raise_all()
        assert len(collector) == 0

    def test_without_clear_keeps_everything(self):
        errors = _errors(2)
        collector = ExceptionCollector(errors)
        with pytest.raises(AggregateDomainError):
            collector.raise_all(clear_after=False)
        assert list(collector.errors) == errors

    def test_can_be_reused_after_drain(self):
        collector = ExceptionCollector(_errors(1))
        with pytest.raises(DomainError):
            collector.raise_all()
        collector.add(DomainError("again", "fails again"))
        with pytest.raises(DomainError, match="fails again"):
            collector.raise_all()


class TestRaiseNow:

    def test_records_then_raises(self):
        collector = ExceptionCollector()
        error = DomainError("Name", "is required")
        with pytest.raises(DomainError) as exc_info:
            collector.raise_now(error)
        assert exc_info.value is error
        assert collector.errors == (error,)


class TestCollectorMutation:

    def test_add_keeps_order(self):
        errors = _errors(3)
        collector = ExceptionCollector()
        for error in errors:
            collector.add(error)
        assert list(collector) == errors

    def test_add_all_from_other_collector(self):
        other = ExceptionCollector(_errors(2))
        collector = ExceptionCollector()
        collector.add_all(other)
        assert collector.errors == other.errors

    def test_clear_twice_is_safe(self):
        collector = ExceptionCollector(_errors(2))
        collector.clear()
        collector.clear()
        assert not collector.has_errors


class TestFormattedMessages:

    def test_add_message_formats_args(self):
        collector = ExceptionCollector()
        collector.add_message("Age", "must be over {0}", 18)
        assert collector.errors == (DomainError("Age", "must be over 18"),)

    def test_raise_message_records_then_raises(self):
        collector = ExceptionCollector()
        with pytest.raises(DomainError, match="^Order has 3 problems$") as exc_info:
            collector.raise_message(None, "Order has {0} problems", 3)
        assert exc_info.value.key is None
        assert collector.errors == (exc_info.value,)

    def test_keyless_errors_in_aggregate(self):
        collector = ExceptionCollector()
        collector.add_message(None, "Order is empty")
        collector.add_message("Email", "bad")
        with pytest.raises(AggregateDomainError, match="^Order is empty; Email: bad$"):
            collector.raise_all()

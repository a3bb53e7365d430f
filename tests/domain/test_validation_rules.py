"""Unit tests for the notify-mode façade."""

import uuid
from datetime import date, datetime

from notifications.domain.model.dates import TextComparison, Weekday
from notifications.domain.model.messages import DEFAULT_MESSAGES
from notifications.domain.model.notification import Notification
from notifications.domain.model.notifier import Notifier
from notifications.domain.validation.validation_rules import ValidationRules
from tests.fakes import FakeClock


class Customer:
    def __init__(self, name, email, age):
        self.name = name
        self.email = email
        self.age = age


class TestChaining:

    def test_all_passing_leaves_no_notifications(self):
        customer = Customer("Ada", "ada@example.com", 36)
        rules = (
            ValidationRules[Customer]()
            .is_not_null_or_whitespace("Name", customer.name)
            .is_email("Email", customer.email)
            .is_between("Age", customer.age, 18, 120)
        )
        assert not rules.has_failures
        assert rules.notifications == ()

    def test_every_failure_recorded_in_call_order(self):
        customer = Customer("", "ada.example.com", 7)
        rules = (
            ValidationRules[Customer]()
            .is_not_null_or_whitespace("Name", customer.name)
            .is_email("Email", customer.email)
            .is_between("Age", customer.age, 18, 120)
        )
        assert [n.key for n in rules.notifications] == ["Name", "Email", "Age"]
        assert rules.has_notifications

    def test_rule_methods_return_the_facade(self):
        rules = ValidationRules[object]()
        assert rules.min_length("k", "abc", 1) is rules

    def test_custom_message(self):
        rules = ValidationRules[object]().min_length("Name", "a", 3, "Name is too short")
        assert rules.notifications == (Notification("Name", "Name is too short"),)

    def test_external_notifier_is_used(self):
        notifier = Notifier()
        ValidationRules[object](notifier).is_not_null("Name", None)
        assert len(notifier) == 1

    def test_catalog_override_applies(self):
        catalog = DEFAULT_MESSAGES.with_overrides({"is_not_null": "{0} missing"})
        rules = ValidationRules[object](messages=catalog).is_not_null("Name", None)
        assert rules.notifications[0].message == "Name missing"


class TestCompareDispatch:

    def test_text(self):
        rules = ValidationRules[object]().compare("Code", "abc", "ABC")
        assert rules.notifications[0].message == "The value of field 'Code' must be equal to 'ABC'"

    def test_text_ignore_case(self):
        rules = ValidationRules[object]().compare(
            "Code", "abc", "ABC", comparison=TextComparison.IGNORE_CASE
        )
        assert not rules.has_failures

    def test_uuid(self):
        identifier = uuid.uuid4()
        rules = ValidationRules[object]().compare("Id", identifier, identifier)
        assert not rules.has_failures

    def test_number(self):
        rules = ValidationRules[object]().compare("Total", 10, 10.5)
        assert rules.notifications[0].message == "The value of field 'Total' must be equal to 10.5"


class TestDateRules:

    def test_clock_is_passed_through(self):
        clock = FakeClock(datetime(2024, 5, 15))
        rules = (
            ValidationRules[object](clock=clock)
            .is_in_the_future("Start", "2024-05-16")
            .is_in_the_past("End", "2024-05-16")
        )
        assert [n.key for n in rules.notifications] == ["End"]
        assert clock.calls == 2

    def test_bad_format_uses_catalog_template(self):
        catalog = DEFAULT_MESSAGES.with_overrides({"bad_date_format": "{0}: cannot read {1}"})
        rules = ValidationRules[object](messages=catalog).is_day_of_week(
            "Day", "tomorrow", Weekday.MONDAY
        )
        assert rules.notifications == (Notification("Day", "Day: cannot read tomorrow"),)

    def test_date_between(self):
        rules = ValidationRules[object]().is_date_between(
            "When", date(2024, 1, 5), date(2024, 1, 1), date(2024, 1, 31)
        )
        assert not rules.has_failures


class TestJoin:

    def test_join_merges_child_validations(self):
        address = ValidationRules[object]().is_not_null_or_empty("Street", "")
        phone = Notifier([Notification("Phone", "bad")])
        parent = ValidationRules[object]().is_email("Email", "nope").join(address, phone, None)
        assert [n.key for n in parent.notifications] == ["Email", "Street", "Phone"]

    def test_add_notification(self):
        rules = ValidationRules[object]().add_notification("Total", "must match the items")
        assert rules.notifications == (Notification("Total", "must match the items"),)

    def test_add_notification_with_format_args(self):
        rules = ValidationRules[object]().add_notification(None, "{0} items over the limit", 3)
        assert rules.notifications == (Notification(None, "3 items over the limit"),)

    def test_clear(self):
        rules = ValidationRules[object]().is_not_null("Name", None)
        rules.clear()
        assert not rules.has_failures

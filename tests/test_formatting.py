"""Tests for derived display fields."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from conftest import member_payload
from member_lookup.domain.models import MemberRecord
from member_lookup.presentation.formatting import (
    DEFAULT_STATUS_CLASS,
    capitalize_first,
    full_name,
    member_since,
    membership_duration,
    membership_number_label,
    page_window,
    results_range,
    status_color_class,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _record(**overrides) -> MemberRecord:
    return MemberRecord.model_validate(member_payload(**overrides))


def test_full_name_without_other_name():
    assert full_name(_record(firstName="John", lastName="Doe")) == "John Doe"


def test_full_name_with_other_name():
    record = _record(firstName="John", otherName="Paul", lastName="Doe")
    assert full_name(record) == "John Paul Doe"


def test_full_name_with_missing_last_name():
    record = _record(firstName="John", otherName="Paul", lastName=None)
    assert full_name(record) == "John Paul"


def test_full_name_with_only_other_name():
    record = _record(firstName="", otherName="Paul", lastName="")
    assert full_name(record) == "Paul"


def test_full_name_all_empty():
    record = _record(firstName=None, lastName=None)
    assert full_name(record) == ""


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("active", "bg-green-100 text-green-800 border-green-200"),
        ("ACTIVE", "bg-green-100 text-green-800 border-green-200"),
        ("Inactive", "bg-red-100 text-red-800 border-red-200"),
        ("pending", "bg-yellow-100 text-yellow-800 border-yellow-200"),
        ("expired", "bg-orange-100 text-orange-800 border-orange-200"),
        ("suspended", "bg-red-100 text-red-800 border-red-200"),
        ("", DEFAULT_STATUS_CLASS),
        (None, DEFAULT_STATUS_CLASS),
        ("banned", DEFAULT_STATUS_CLASS),
    ],
)
def test_status_color_class(status, expected):
    assert status_color_class(status) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("active", "Active"), ("", ""), (None, ""), (42, ""), ("a", "A"), ("mIXED", "MIXED")],
)
def test_capitalize_first(value, expected):
    assert capitalize_first(value) == expected


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (400, "1yr 1mo"),
        (365, "1yr"),
        (800, "2yrs 2mo"),
        (45, "1mo"),
        (5, "5 days"),
        (1, "1 day"),
        (0, "0 days"),
    ],
)
def test_membership_duration(days, expected):
    assert membership_duration(NOW - timedelta(days=days), NOW) == expected


def test_membership_duration_rounds_partial_days_up():
    assert membership_duration(NOW - timedelta(days=4, hours=1), NOW) == "5 days"


def test_membership_duration_uses_absolute_difference():
    assert membership_duration(NOW + timedelta(days=45), NOW) == "1mo"


def test_membership_duration_treats_naive_as_utc():
    start = datetime(2024, 5, 27, 12, 0)
    assert membership_duration(start, NOW) == "5 days"


def test_membership_duration_without_start():
    assert membership_duration(None, NOW) == "N/A"


def test_member_since():
    assert member_since(datetime(2020, 1, 5, tzinfo=timezone.utc)) == "January 5, 2020"
    assert member_since(None) == "N/A"


def test_membership_number_label():
    assert membership_number_label("10023") == "10023"
    assert membership_number_label("") == "N/A"
    assert membership_number_label(None) == "N/A"


@pytest.mark.parametrize(
    ("current", "total", "expected"),
    [
        (1, 3, [1, 2, 3]),
        (3, 3, [1, 2, 3]),
        (1, 0, []),
        (1, 10, [1, 2, 3, 4, 5]),
        (3, 10, [1, 2, 3, 4, 5]),
        (10, 10, [6, 7, 8, 9, 10]),
        (8, 10, [6, 7, 8, 9, 10]),
        (5, 10, [3, 4, 5, 6, 7]),
        (4, 6, [2, 3, 4, 5, 6]),
    ],
)
def test_page_window(current, total, expected):
    assert page_window(current, total) == expected


def test_results_range():
    assert results_range(1, 20, 45) == (1, 20)
    assert results_range(3, 20, 45) == (41, 45)

"""Display helpers derived from directory records.

All functions are pure and recomputed on every render.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any

from member_lookup.domain.models import MemberRecord, MemberStatus
from member_lookup.utils.datetime import ensure_utc, utc_now

NOT_AVAILABLE = "N/A"
PAGE_WINDOW_SIZE = 5

DEFAULT_STATUS_CLASS = "bg-gray-100 text-gray-800 border-gray-200"
STATUS_CLASSES: dict[MemberStatus, str] = {
    MemberStatus.ACTIVE: "bg-green-100 text-green-800 border-green-200",
    MemberStatus.INACTIVE: "bg-red-100 text-red-800 border-red-200",
    MemberStatus.PENDING: "bg-yellow-100 text-yellow-800 border-yellow-200",
    MemberStatus.EXPIRED: "bg-orange-100 text-orange-800 border-orange-200",
    MemberStatus.SUSPENDED: "bg-red-100 text-red-800 border-red-200",
}

_ONE_DAY = timedelta(days=1)


def pluralize(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


def full_name(record: MemberRecord) -> str:
    """Join first, other and last name; only the ends of the result are trimmed."""

    first = record.first_name or ""
    last = record.last_name or ""
    other = record.other_name or ""
    if other:
        return f"{first} {other} {last}".strip()
    return f"{first} {last}".strip()


def status_color_class(status: str | None) -> str:
    known = MemberStatus.parse(status)
    if known is None:
        return DEFAULT_STATUS_CLASS
    return STATUS_CLASSES[known]


def capitalize_first(value: Any) -> str:
    if not value or not isinstance(value, str):
        return ""
    return value[0].upper() + value[1:]


def membership_duration(start: datetime | None, now: datetime | None = None) -> str:
    """Render elapsed membership as ``"2yrs 3mo"``, ``"4mo"`` or ``"12 days"``.

    Years are 365 days and months 30 days; partial days round up.
    """

    if start is None:
        return NOT_AVAILABLE
    now = ensure_utc(now or utc_now())
    elapsed = abs(now - ensure_utc(start))
    days = math.ceil(elapsed / _ONE_DAY)
    years = days // 365
    months = (days % 365) // 30

    if years > 0:
        text = f"{years}{pluralize(years, 'yr')}"
        if months > 0:
            text += f" {months}mo"
        return text
    if months > 0:
        return f"{months}mo"
    return f"{days} {pluralize(days, 'day')}"


def member_since(start: datetime | None) -> str:
    if start is None:
        return NOT_AVAILABLE
    start = ensure_utc(start)
    return f"{start:%B} {start.day}, {start.year}"


def membership_number_label(number: str | None) -> str:
    return number or NOT_AVAILABLE


def page_window(current_page: int, total_pages: int, size: int = PAGE_WINDOW_SIZE) -> list[int]:
    """Page numbers to show around ``current_page``, at most ``size`` of them."""

    if total_pages <= size:
        return list(range(1, total_pages + 1))
    half = size // 2
    if current_page <= half + 1:
        start = 1
    elif current_page >= total_pages - half:
        start = total_pages - size + 1
    else:
        start = current_page - half
    return list(range(start, start + size))


def results_range(current_page: int, page_size: int, total_count: int) -> tuple[int, int]:
    """First and last result numbers on the current page (1-based)."""

    first = (current_page - 1) * page_size + 1
    last = min(current_page * page_size, total_count)
    return first, last


__all__ = [
    "NOT_AVAILABLE",
    "PAGE_WINDOW_SIZE",
    "DEFAULT_STATUS_CLASS",
    "STATUS_CLASSES",
    "pluralize",
    "full_name",
    "status_color_class",
    "capitalize_first",
    "membership_duration",
    "member_since",
    "membership_number_label",
    "page_window",
    "results_range",
]

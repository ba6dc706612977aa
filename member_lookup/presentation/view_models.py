"""View models handed to renderers; no further computation is needed downstream."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from member_lookup.domain.models import DEFAULT_PAGE_SIZE, MemberRecord, SessionState, SessionStatus
from member_lookup.i18n import I18nService
from member_lookup.presentation.formatting import (
    capitalize_first,
    full_name,
    member_since,
    membership_duration,
    membership_number_label,
    page_window,
    results_range,
    status_color_class,
)


@dataclass(frozen=True, slots=True)
class MemberCardView:
    key: str
    full_name: str
    membership_number: str
    status_label: str
    status_class: str
    category_label: str
    member_since: str
    duration: str


@dataclass(frozen=True, slots=True)
class PaginationView:
    current_page: int
    total_pages: int
    window: tuple[int, ...]
    has_prev_page: bool
    has_next_page: bool
    range_label: str

    @property
    def visible(self) -> bool:
        return self.total_pages > 1


@dataclass(frozen=True, slots=True)
class SearchView:
    status: SessionStatus
    query: str
    is_searching: bool
    has_searched: bool
    error: str | None
    count_label: str
    members: tuple[MemberCardView, ...]
    pagination: PaginationView
    empty_message: str

    @property
    def show_intro(self) -> bool:
        return not self.has_searched

    @property
    def show_results(self) -> bool:
        return self.has_searched and not self.is_searching and bool(self.members)

    @property
    def show_empty(self) -> bool:
        return (
            self.status is SessionStatus.SUCCESS
            and not self.is_searching
            and not self.members
        )


def build_member_card(record: MemberRecord, now: datetime | None = None) -> MemberCardView:
    return MemberCardView(
        key=record.id,
        full_name=full_name(record),
        membership_number=membership_number_label(record.membership_number),
        status_label=capitalize_first(record.status),
        status_class=status_color_class(record.status),
        category_label=capitalize_first(record.membership_category),
        member_since=member_since(record.membership_start_date),
        duration=membership_duration(record.membership_start_date, now),
    )


def build_pagination(
    state: SessionState, page_size: int, i18n: I18nService
) -> PaginationView:
    first, last = results_range(state.current_page, page_size, state.total_count)
    return PaginationView(
        current_page=state.current_page,
        total_pages=state.total_pages,
        window=tuple(page_window(state.current_page, state.total_pages)),
        has_prev_page=state.has_prev_page,
        has_next_page=state.has_next_page,
        range_label=i18n.gettext(
            "results.range", first=first, last=last, total=state.total_count
        ),
    )


def build_search_view(
    state: SessionState,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    now: datetime | None = None,
    i18n: I18nService | None = None,
) -> SearchView:
    i18n = i18n or I18nService()
    is_searching = state.status is SessionStatus.LOADING
    return SearchView(
        status=state.status,
        query=state.query,
        is_searching=is_searching,
        has_searched=state.has_searched,
        error=state.error,
        count_label=i18n.ngettext("results.found", state.total_count),
        members=tuple(build_member_card(member, now) for member in state.members),
        pagination=build_pagination(state, page_size, i18n),
        empty_message=i18n.gettext("results.empty.body"),
    )


__all__ = [
    "MemberCardView",
    "PaginationView",
    "SearchView",
    "build_member_card",
    "build_pagination",
    "build_search_view",
]

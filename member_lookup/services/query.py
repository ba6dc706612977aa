"""Turn raw search box input into directory page requests."""

from __future__ import annotations

from member_lookup.domain.models import DEFAULT_PAGE_SIZE, PageRequest, SearchQuery
from member_lookup.services.exceptions import InvalidQuery


def classify_query(raw_query: str) -> SearchQuery:
    """Trim the input and decide between a membership number and a name.

    Only the outer whitespace is removed; case and inner spacing are sent to
    the directory untouched.
    """

    text = (raw_query or "").strip()
    if not text:
        raise InvalidQuery("Search query must not be empty.")
    return SearchQuery.classify(text)


def build_request(
    raw_query: str,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageRequest:
    return PageRequest(query=classify_query(raw_query), page=page, page_size=page_size)


__all__ = ["classify_query", "build_request"]

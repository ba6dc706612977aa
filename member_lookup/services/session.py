"""Search session state machine.

State changes are pure functions over :class:`SessionState`; the async
:class:`SearchSession` only sequences them around the directory call. Each
call into ``Loading`` bumps ``request_id`` so a response that arrives after a
newer request started is dropped.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Awaitable, Callable

from member_lookup.domain.models import (
    DEFAULT_PAGE_SIZE,
    MemberRecord,
    PageRequest,
    SearchResult,
    SessionState,
    SessionStatus,
)
from member_lookup.logging import logger
from member_lookup.services.exceptions import InvalidQuery, SearchFailed
from member_lookup.services.query import build_request

FetchMembers = Callable[[PageRequest], Awaitable[SearchResult]]

UNEXPECTED_ERROR_MESSAGE = "An error occurred"


def start_loading(state: SessionState, query: str, page: int) -> SessionState:
    return replace(
        state,
        status=SessionStatus.LOADING,
        query=query,
        current_page=page,
        has_searched=True,
        error=None,
        request_id=state.request_id + 1,
    )


def complete(state: SessionState, result: SearchResult, request_id: int) -> SessionState:
    if request_id != state.request_id:
        return state
    return replace(
        state,
        status=SessionStatus.SUCCESS,
        current_page=result.current_page,
        result=result,
        error=None,
    )


def fail(state: SessionState, message: str, request_id: int) -> SessionState:
    if request_id != state.request_id:
        return state
    return replace(
        state,
        status=SessionStatus.ERROR,
        current_page=1,
        result=None,
        error=message,
    )


class SearchSession:
    def __init__(self, fetch: FetchMembers, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._fetch = fetch
        self.page_size = page_size
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def total_pages(self) -> int:
        return self._state.total_pages

    @property
    def total_count(self) -> int:
        return self._state.total_count

    @property
    def has_next_page(self) -> bool:
        return self._state.has_next_page

    @property
    def has_prev_page(self) -> bool:
        return self._state.has_prev_page

    @property
    def results(self) -> tuple[MemberRecord, ...]:
        return self._state.members

    @property
    def is_searching(self) -> bool:
        return self._state.status is SessionStatus.LOADING

    @property
    def has_searched(self) -> bool:
        return self._state.has_searched

    @property
    def error(self) -> str | None:
        return self._state.error

    async def submit(self, raw_query: str) -> SessionState:
        """Start a new search at page 1; blank input leaves the state alone."""

        try:
            request = build_request(raw_query, page=1, page_size=self.page_size)
        except InvalidQuery:
            return self._state
        return await self._run(request)

    async def go_to_page(self, page: int) -> SessionState:
        """Re-run the stored query at ``page`` if it is within the known range."""

        if page < 1 or page > self.total_pages:
            return self._state
        request = build_request(self._state.query, page=page, page_size=self.page_size)
        return await self._run(request)

    async def _run(self, request: PageRequest) -> SessionState:
        self._state = start_loading(self._state, request.query.text, request.page)
        request_id = self._state.request_id
        try:
            result = await self._fetch(request)
        except SearchFailed as exc:
            self._apply(fail(self._state, exc.message, request_id), request_id)
        except Exception:
            logger.exception("search_session_failed", page=request.page)
            self._apply(fail(self._state, UNEXPECTED_ERROR_MESSAGE, request_id), request_id)
        else:
            self._apply(complete(self._state, result, request_id), request_id)
        return self._state

    def _apply(self, new_state: SessionState, request_id: int) -> None:
        if request_id != self._state.request_id:
            logger.info(
                "stale_search_response_discarded",
                request_id=request_id,
                current_request_id=self._state.request_id,
            )
            return
        self._state = new_state


__all__ = [
    "FetchMembers",
    "UNEXPECTED_ERROR_MESSAGE",
    "SearchSession",
    "start_loading",
    "complete",
    "fail",
]

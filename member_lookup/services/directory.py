"""Member directory integration (``GET /users/whois``)."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from member_lookup.config import DirectorySettings
from member_lookup.domain.models import PageRequest, SearchResult
from member_lookup.logging import logger
from member_lookup.services.exceptions import SearchFailed


class DirectoryClient:
    """Encapsulates the remote member directory lookup.

    Every failure other than a 404 collapses into :class:`SearchFailed`; the
    underlying detail only goes to the log.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: DirectorySettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or DirectorySettings()

    async def fetch_members(self, request: PageRequest) -> SearchResult:
        params = request.to_params()
        logger.info(
            "member_search_requested",
            kind=request.query.kind.value,
            page=request.page,
            limit=request.page_size,
        )
        try:
            response = await self._client.get(
                self._settings.whois_url(),
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.RequestError as exc:
            logger.warning("member_search_failed", reason="transport", error=str(exc))
            raise SearchFailed() from exc

        if response.status_code == 404:
            logger.info("member_search_not_found", page=request.page)
            return SearchResult.empty()

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "member_search_failed",
                reason="status",
                status_code=response.status_code,
                detail=response.text[:500],
            )
            raise SearchFailed() from exc

        try:
            return SearchResult.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("member_search_failed", reason="malformed_body", error=str(exc))
            raise SearchFailed() from exc


__all__ = ["DirectoryClient"]

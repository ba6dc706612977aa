"""Shared fixtures for directory-backed tests."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
import structlog

from member_lookup.config import DirectorySettings


def member_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "_id": "64f1c2a9e4b0a1b2c3d4e5f6",
        "membershipNumber": "10023",
        "firstName": "John",
        "lastName": "Doe",
        "membershipCategory": "professional",
        "status": "active",
        "membershipStartDate": "2022-03-15T00:00:00.000Z",
        "createdAt": "2022-03-15T09:30:00.000Z",
        "updatedAt": "2024-01-02T11:00:00.000Z",
    }
    payload.update(overrides)
    return payload


def search_payload(members: list[dict[str, Any]], **overrides: Any) -> dict[str, Any]:
    payload = {
        "count": len(members),
        "totalPages": 1,
        "currentPage": 1,
        "hasNextPage": False,
        "hasPrevPage": False,
        "members": members,
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def directory_settings() -> DirectorySettings:
    return DirectorySettings(base_url="https://directory.example/api/v1", page_size=20)


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make

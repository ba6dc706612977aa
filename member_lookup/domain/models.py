"""Pydantic models shared across the lookup, session and presentation layers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_PAGE_SIZE = 20

_MEMBER_ID_RE = re.compile(r"[0-9]+")


class _KnownValues(str, Enum):
    @classmethod
    def parse(cls, value: str | None):
        """Case-insensitive lookup; unknown or empty values yield ``None``."""

        if not value:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None


class MembershipCategory(_KnownValues):
    PROFESSIONAL = "professional"
    STUDENT = "student"
    CORPORATE = "corporate"
    ASSOCIATE = "associate"
    FELLOW = "fellow"
    UNASSIGNED = "unassigned"
    AFFILIATE = "affiliate"


class MemberStatus(_KnownValues):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    EXPIRED = "expired"
    SUSPENDED = "suspended"


class QueryKind(str, Enum):
    MEMBER_ID = "member_id"
    NAME = "name"

    @property
    def param_name(self) -> str:
        return "memberId" if self is QueryKind.MEMBER_ID else "name"


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class MemberRecord(_WireModel):
    """A directory entry as returned by ``/users/whois``.

    Category and status are kept as the raw strings the directory sends so an
    unexpected value still renders (with the neutral badge) instead of failing
    the whole page. ``MembershipCategory`` and ``MemberStatus`` list the known
    values.
    """

    id: str = Field(alias="_id")
    membership_number: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    other_name: str | None = None
    membership_category: str | None = None
    status: str | None = None
    membership_start_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("membership_start_date", "created_at", "updated_at", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def member_status(self) -> MemberStatus | None:
        return MemberStatus.parse(self.status)

    @property
    def member_category(self) -> MembershipCategory | None:
        return MembershipCategory.parse(self.membership_category)


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    kind: QueryKind

    @classmethod
    def classify(cls, text: str) -> SearchQuery:
        kind = QueryKind.MEMBER_ID if _MEMBER_ID_RE.fullmatch(text) else QueryKind.NAME
        return cls(text=text, kind=kind)


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: SearchQuery
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    def to_params(self) -> dict[str, str]:
        return {
            self.query.kind.param_name: self.query.text,
            "page": str(self.page),
            "limit": str(self.page_size),
        }


class SearchResult(_WireModel):
    count: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=1)
    has_next_page: bool = False
    has_prev_page: bool = False
    members: tuple[MemberRecord, ...] = ()
    message: str | None = None
    error: str | None = None

    @classmethod
    def empty(cls) -> SearchResult:
        """Result used when the directory answers 404 (nobody matched)."""

        return cls(
            count=0,
            total_pages=0,
            current_page=1,
            has_next_page=False,
            has_prev_page=False,
            members=(),
        )


class SessionStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SessionState:
    status: SessionStatus = SessionStatus.IDLE
    query: str = ""
    current_page: int = 1
    has_searched: bool = False
    result: SearchResult | None = None
    error: str | None = None
    request_id: int = 0

    @property
    def total_pages(self) -> int:
        return self.result.total_pages if self.result else 0

    @property
    def total_count(self) -> int:
        return self.result.count if self.result else 0

    @property
    def has_next_page(self) -> bool:
        return self.result.has_next_page if self.result else False

    @property
    def has_prev_page(self) -> bool:
        return self.result.has_prev_page if self.result else False

    @property
    def members(self) -> tuple[MemberRecord, ...]:
        return self.result.members if self.result else ()


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MembershipCategory",
    "MemberStatus",
    "QueryKind",
    "MemberRecord",
    "SearchQuery",
    "PageRequest",
    "SearchResult",
    "SessionStatus",
    "SessionState",
]

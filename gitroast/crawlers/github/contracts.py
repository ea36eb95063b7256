"""Typed contracts for GitHub client responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar


T = TypeVar("T")


class FetchState(str, Enum):
    """Normalized response state for downstream ingestion."""

    OK = "ok"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(slots=True)
class FetchResult(Generic[T]):
    """Container that separates payload from fetch semantics."""

    state: FetchState
    data: Optional[T] = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.state == FetchState.OK

    @property
    def is_empty(self) -> bool:
        return self.state == FetchState.EMPTY

    @property
    def is_not_found(self) -> bool:
        return self.state == FetchState.NOT_FOUND

    @property
    def is_failed(self) -> bool:
        return self.state == FetchState.FAILED


UserPayload = dict[str, Any]
RepoListPayload = list[dict[str, Any]]
CommitListPayload = list[dict[str, Any]]
EventListPayload = list[dict[str, Any]]

UserContract = FetchResult[UserPayload]
RepoListContract = FetchResult[RepoListPayload]
CommitListContract = FetchResult[CommitListPayload]
EventListContract = FetchResult[EventListPayload]

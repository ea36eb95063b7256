"""Normalized GitHub activity records consumed by the roast analyzers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from gitroast.utils.helpers import coerce_count, parse_datetime


class EventKind(str, Enum):
    """GitHub public event labels the analyzers care about."""

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"


def _optional_text(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    return raw or None


@dataclass(frozen=True, slots=True)
class Profile:
    """A single GitHub account."""

    login: str
    name: Optional[str] = None
    bio: Optional[str] = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: Optional[datetime] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Profile":
        return cls(
            login=str(payload.get("login") or ""),
            name=_optional_text(payload.get("name")),
            bio=_optional_text(payload.get("bio")),
            public_repos=coerce_count(payload.get("public_repos")),
            followers=coerce_count(payload.get("followers")),
            following=coerce_count(payload.get("following")),
            created_at=parse_datetime(payload.get("created_at")),
            avatar_url=_optional_text(payload.get("avatar_url")),
        )


@dataclass(frozen=True, slots=True)
class Repository:
    """A public repository owned by the profile under analysis."""

    name: str
    description: Optional[str] = None
    is_fork: bool = False
    size_kb: int = 0
    updated_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Repository":
        return cls(
            name=str(payload.get("name") or ""),
            description=_optional_text(payload.get("description")),
            is_fork=payload.get("fork") is True,
            size_kb=coerce_count(payload.get("size")),
            updated_at=parse_datetime(payload.get("updated_at")),
        )


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit message with its author and timestamp."""

    message: str
    author_name: Optional[str] = None
    committed_at: Optional[datetime] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Commit":
        # REST commit listings nest the useful fields under "commit"
        detail = payload.get("commit") if isinstance(payload.get("commit"), dict) else payload
        author = detail.get("author") if isinstance(detail.get("author"), dict) else {}
        message = detail.get("message")
        return cls(
            message=message if isinstance(message, str) else "",
            author_name=_optional_text(author.get("name")),
            committed_at=parse_datetime(author.get("date")),
        )


@dataclass(frozen=True, slots=True)
class ActivityEvent:
    """A public activity event; ``kind`` is the raw GitHub event type."""

    kind: str
    created_at: Optional[datetime] = None

    @property
    def is_push(self) -> bool:
        return self.kind == EventKind.PUSH.value

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ActivityEvent":
        return cls(
            kind=str(payload.get("type") or ""),
            created_at=parse_datetime(payload.get("created_at")),
        )

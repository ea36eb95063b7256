"""Async GitHub REST client returning typed fetch contracts."""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from gitroast.crawlers.github.contracts import (
    CommitListContract,
    EventListContract,
    FetchResult,
    FetchState,
    RepoListContract,
    UserContract,
)
from gitroast.utils.logger import sanitize_for_log, sanitize_log_extra

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "GitRoast/1.0"


class GitHubClient:
    """Thin GitHub REST wrapper; failures are reported, never raised."""

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        del exc_type, exc, tb
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_user(self, username: str) -> UserContract:
        return await self._request(f"/users/{quote(username, safe='')}")

    async def list_repos(self, username: str, *, limit: int = 10) -> RepoListContract:
        return await self._request(
            f"/users/{quote(username, safe='')}/repos",
            params={"sort": "updated", "per_page": limit},
        )

    async def list_commits(self, owner: str, repo: str, *, limit: int = 5) -> CommitListContract:
        return await self._request(
            f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/commits",
            params={"per_page": limit},
        )

    async def list_public_events(self, username: str, *, limit: int = 30) -> EventListContract:
        return await self._request(
            f"/users/{quote(username, safe='')}/events/public",
            params={"per_page": limit},
        )

    async def _request(self, path: str, params: Optional[dict[str, Any]] = None) -> FetchResult[Any]:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            error = sanitize_for_log(f"{exc.__class__.__name__}: {exc}", key="error")
            logger.warning(
                "GitHub request failed",
                extra=sanitize_log_extra(path=path, params=params or {}, error=error),
            )
            return FetchResult(state=FetchState.FAILED, error=error)

        if response.status_code == 404:
            return FetchResult(state=FetchState.NOT_FOUND, status_code=404, error="not found")

        if response.status_code >= 400:
            error = sanitize_for_log(f"HTTP {response.status_code}: {response.text}", key="error")
            logger.warning(
                "GitHub request failed",
                extra=sanitize_log_extra(path=path, params=params or {}, status_code=response.status_code, error=error),
            )
            return FetchResult(state=FetchState.FAILED, status_code=response.status_code, error=error)

        try:
            data = response.json()
        except ValueError:
            logger.warning("GitHub returned a non-JSON body", extra=sanitize_log_extra(path=path))
            return FetchResult(state=FetchState.FAILED, status_code=response.status_code, error="invalid JSON body")

        if isinstance(data, list) and not data:
            return FetchResult(state=FetchState.EMPTY, data=[], status_code=response.status_code)
        return FetchResult(state=FetchState.OK, data=data, status_code=response.status_code)

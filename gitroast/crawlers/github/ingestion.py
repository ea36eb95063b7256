"""Collect and normalize one account's GitHub activity for roasting."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from gitroast.models.records import ActivityEvent, Commit, Profile, Repository
from gitroast.utils.logger import sanitize_log_extra

logger = logging.getLogger(__name__)


class GitHubUserNotFound(Exception):
    """Raised when the requested account does not exist."""


class GitHubDataUnavailable(Exception):
    """Raised when profile or repository data cannot be retrieved."""


@dataclass(slots=True)
class ActivitySnapshot:
    """Normalized records for a single analysis call."""

    profile: Profile
    repositories: list[Repository] = field(default_factory=list)
    commits: list[Commit] = field(default_factory=list)
    events: list[ActivityEvent] = field(default_factory=list)


def _dict_items(payload: Any) -> list[dict[str, Any]]:
    if not isinstance(payload, list):
        return []
    return [item for item in payload if isinstance(item, dict)]


class ActivityIngestor:
    """Fetch profile, repositories, commits and events through a GitHub client."""

    def __init__(
        self,
        client: Any,
        *,
        repo_limit: int = 10,
        commit_repo_limit: int = 3,
        commits_per_repo: int = 5,
        event_limit: int = 30,
    ) -> None:
        self._client = client
        self._repo_limit = repo_limit
        self._commit_repo_limit = commit_repo_limit
        self._commits_per_repo = commits_per_repo
        self._event_limit = event_limit

    async def collect(self, username: str) -> ActivitySnapshot:
        """
        Collect the records the roast engine needs

        Raises:
            GitHubUserNotFound: the account does not exist
            GitHubDataUnavailable: profile or repositories could not be fetched
        """
        user = await self._client.get_user(username)
        if user.is_not_found:
            raise GitHubUserNotFound(f"GitHub user not found: {username}")
        if user.is_failed or not isinstance(user.data, dict):
            raise GitHubDataUnavailable(f"Failed to fetch user data: {user.error or 'empty response'}")
        profile = Profile.from_payload(user.data)

        repos = await self._client.list_repos(username, limit=self._repo_limit)
        if repos.is_failed:
            raise GitHubDataUnavailable(f"Failed to fetch repositories: {repos.error}")
        repositories = [Repository.from_payload(item) for item in _dict_items(repos.data)]

        commits: list[Commit] = []
        owner = profile.login or username
        for repository in repositories[: self._commit_repo_limit]:
            response = await self._client.list_commits(owner, repository.name, limit=self._commits_per_repo)
            if response.is_failed or response.is_not_found:
                # Private, empty or otherwise inaccessible repositories are skipped
                logger.info(
                    "Skipping commits for repository",
                    extra=sanitize_log_extra(repo=repository.name, state=response.state.value, error=response.error),
                )
                continue
            commits.extend(Commit.from_payload(item) for item in _dict_items(response.data))

        events_response = await self._client.list_public_events(username, limit=self._event_limit)
        if events_response.is_failed:
            logger.warning(
                "Public events unavailable; continuing without activity",
                extra=sanitize_log_extra(username=username, error=events_response.error),
            )
        events = [ActivityEvent.from_payload(item) for item in _dict_items(events_response.data)]

        logger.info(
            f"Collected {len(repositories)} repos, {len(commits)} commits, {len(events)} events for {profile.login}"
        )
        return ActivitySnapshot(profile=profile, repositories=repositories, commits=commits, events=events)

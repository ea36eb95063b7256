"""GitHub ingestion primitives."""

from gitroast.crawlers.github.client import GitHubClient
from gitroast.crawlers.github.contracts import (
    CommitListContract,
    EventListContract,
    FetchResult,
    FetchState,
    RepoListContract,
    UserContract,
)
from gitroast.crawlers.github.ingestion import (
    ActivityIngestor,
    ActivitySnapshot,
    GitHubDataUnavailable,
    GitHubUserNotFound,
)

__all__ = [
    "GitHubClient",
    "FetchState",
    "FetchResult",
    "UserContract",
    "RepoListContract",
    "CommitListContract",
    "EventListContract",
    "ActivityIngestor",
    "ActivitySnapshot",
    "GitHubDataUnavailable",
    "GitHubUserNotFound",
]

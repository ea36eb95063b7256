"""Analyzer output and roast bundle contracts."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

MAX_ROASTS = 5


@dataclass(slots=True)
class DetectorResult:
    """Roasts emitted by one analyzer, in detection order, plus its counters."""

    roasts: list[str] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    def counter(self, name: str) -> int:
        return int(self.counters.get(name, 0))


@dataclass(slots=True)
class AggregateStats:
    """Flat statistics shared by the response payload and the LLM prompt."""

    generic_commits: int = 0
    emoji_crimes: int = 0
    abandoned_repos: int = 0
    generic_repo_names: int = 0
    missing_descriptions: int = 0
    commits_analyzed: int = 0
    public_repos: int = 0
    followers: int = 0
    using_generative: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_response(self) -> dict[str, Any]:
        """Public ``stats`` object returned to API callers."""
        return {
            "commits_analyzed": self.commits_analyzed,
            "emoji_crimes": self.emoji_crimes,
            "public_repos": self.public_repos,
            "followers": self.followers,
            "using_generative": self.using_generative,
        }


@dataclass(slots=True)
class RoastBundle:
    """Final engine output: 1..5 roasts and the aggregate statistics."""

    roasts: list[str]
    stats: AggregateStats

    def to_dict(self) -> dict[str, Any]:
        return {"roasts": list(self.roasts), "stats": self.stats.to_response()}

"""Prompt construction for LLM roast enrichment."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Sequence

from gitroast.models.records import ActivityEvent, Commit, Profile, Repository
from gitroast.models.roast import AggregateStats
from gitroast.utils.helpers import age_in_years, truncate_string

MAX_PROMPT_REPOS = 8
MAX_PROMPT_COMMITS = 10
MAX_COMMIT_LINE_CHARS = 120

SYSTEM_PROMPT = "You are a witty, sarcastic GitHub roaster. You are playful and funny, never cruel or offensive."


def _account_age_label(profile: Profile, now: datetime) -> str:
    years = age_in_years(profile.created_at, now)
    if years is None:
        return "unknown"
    return f"{math.floor(years)} years"


def _commit_headline(commit: Commit) -> str:
    lines = commit.message.strip().splitlines()
    headline = lines[0] if lines else ""
    return truncate_string(headline, MAX_COMMIT_LINE_CHARS)


def build_roast_prompt(
    *,
    profile: Profile,
    repositories: Sequence[Repository],
    commits: Sequence[Commit],
    events: Sequence[ActivityEvent],
    stats: AggregateStats,
    now: datetime,
) -> str:
    """Render the account facts and analyzer counters into a roast request."""
    repo_names = ", ".join(repo.name for repo in repositories[:MAX_PROMPT_REPOS] if repo.name) or "No public repositories"
    commit_lines = "\n".join(
        f"- {headline}" for headline in (_commit_headline(c) for c in commits[:MAX_PROMPT_COMMITS]) if headline
    ) or "- No recent commits"
    push_events = sum(1 for event in events if event.is_push)

    return f"""Generate 3-5 creative and humorous roasts for a GitHub user based on their activity. Be playful and funny, not mean or offensive. Use emojis for fun.

GitHub User Analysis:
- Username: {profile.login}
- Name: {profile.name or 'No name provided'}
- Bio: {profile.bio or 'No bio'}
- Public Repos: {profile.public_repos}
- Followers: {profile.followers}
- Following: {profile.following}
- Account Age: {_account_age_label(profile, now)}
- Recent public events: {len(events)} ({push_events} pushes)

Recent Repository Names:
{repo_names}

Recent Commit Messages:
{commit_lines}

Analysis Summary:
- Has {stats.generic_commits} generic commit messages
- Has {stats.emoji_crimes} commits with excessive emojis
- Has {stats.abandoned_repos} abandoned repositories
- Has {stats.generic_repo_names} generically named repositories
- Has {stats.missing_descriptions} repos without descriptions

Focus on their coding patterns, repo naming, commit messages, and GitHub activity.
Return ONLY a JSON array of 3-5 strings, for example:
["Roast 1 with emoji 🔥", "Roast 2 with emoji 😂", "Roast 3 with emoji 💻"]

JSON Response:"""

"""Repository heuristics: staleness, naming, descriptions, forks, tiny repos."""

from __future__ import annotations

import re
from typing import Sequence

from gitroast.analyzers.base import BaseAnalyzer
from gitroast.models.records import Repository
from gitroast.models.roast import DetectorResult
from gitroast.utils.helpers import age_in_days

ABANDONED_COUNT = "abandoned_count"
GENERIC_COUNT = "generic_count"
MISSING_DESCRIPTIONS = "missing_descriptions"

_GENERIC_NAME = re.compile(r"(test|demo|sample|project|app|website|portfolio|temp)(\d+)?", re.IGNORECASE)

STALE_AFTER_DAYS = 180  # six 30-day months
STALE_THRESHOLD = 3
GENERIC_NAME_THRESHOLD = 2
MISSING_DESCRIPTION_RATIO = 0.5
FORK_RATIO = 0.7
TINY_REPO_KB = 10
TINY_REPO_THRESHOLD = 3

STALE_ROAST = "{count} repos gathering dust? You create projects faster than you abandon them! 🏚️💨"
GENERIC_NAME_ROAST = (
    '"test", "demo", "project"... Your creativity in naming repos is as impressive '
    "as a Windows temp folder! 📁😴"
)
MISSING_DESCRIPTION_ROAST = "Half your repos have no description. Do you expect people to play guessing games? 🎲❓"
FORK_ROAST = "Mostly forks? You're like the friend who only shares memes but never creates original content! 🍴📋"
TINY_REPO_ROAST = "So many tiny repos! Quality over quantity, or are you just practicing git init? 🤏📦"


def is_generic_name(name: str) -> bool:
    return _GENERIC_NAME.fullmatch(name) is not None


class RepositoryAnalyzer(BaseAnalyzer):
    """Scan a profile's repositories for neglect and low-effort naming."""

    def analyze(self, repositories: Sequence[Repository]) -> DetectorResult:
        repos = list(repositories)
        total = len(repos)
        now = self.now()
        result = DetectorResult()

        stale_count = sum(1 for repo in repos if (age_in_days(repo.updated_at, now) or 0) > STALE_AFTER_DAYS)
        result.counters[ABANDONED_COUNT] = stale_count
        if stale_count > STALE_THRESHOLD:
            result.roasts.append(STALE_ROAST.format(count=stale_count))

        generic_count = sum(1 for repo in repos if is_generic_name(repo.name))
        result.counters[GENERIC_COUNT] = generic_count
        if generic_count > GENERIC_NAME_THRESHOLD:
            result.roasts.append(GENERIC_NAME_ROAST)

        missing_count = sum(1 for repo in repos if not repo.description)
        result.counters[MISSING_DESCRIPTIONS] = missing_count
        if total and missing_count > total * MISSING_DESCRIPTION_RATIO:
            result.roasts.append(MISSING_DESCRIPTION_ROAST)

        fork_count = sum(1 for repo in repos if repo.is_fork)
        if total and fork_count > total * FORK_RATIO:
            result.roasts.append(FORK_ROAST)

        tiny_count = sum(1 for repo in repos if repo.size_kb < TINY_REPO_KB)
        if tiny_count > TINY_REPO_THRESHOLD:
            result.roasts.append(TINY_REPO_ROAST)

        self.log_result(result)
        return result

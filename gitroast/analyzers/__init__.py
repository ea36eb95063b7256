"""
GitRoast Analyzers

Four independent, deterministic analyzers over normalized GitHub records:
- Commit messages: generic phrasing, emoji, length, shouting, typos
- Repositories: staleness, generic names, descriptions, forks, tiny repos
- Profile: follower skew, missing bio, stale account, zero audience
- Activity: weekend, late-night and burst-push patterns
"""

from .activity import ActivityAnalyzer
from .commit_messages import CommitMessageAnalyzer
from .profile import ProfileAnalyzer
from .repositories import RepositoryAnalyzer

__all__ = [
    "ActivityAnalyzer",
    "CommitMessageAnalyzer",
    "ProfileAnalyzer",
    "RepositoryAnalyzer",
]

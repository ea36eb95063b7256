"""Record and result models"""

from gitroast.models.records import ActivityEvent, Commit, EventKind, Profile, Repository
from gitroast.models.roast import MAX_ROASTS, AggregateStats, DetectorResult, RoastBundle

__all__ = [
    "ActivityEvent",
    "Commit",
    "EventKind",
    "Profile",
    "Repository",
    "MAX_ROASTS",
    "AggregateStats",
    "DetectorResult",
    "RoastBundle",
]

from __future__ import annotations

from gitroast.models.records import Profile
from gitroast.models.roast import DetectorResult
from gitroast.services.aggregator import build_aggregate_stats


def test_aggregate_stats_copy_counters_and_profile_counts() -> None:
    stats = build_aggregate_stats(
        commit_result=DetectorResult(roasts=["x"], counters={"generic_count": 5, "emoji_count": 4}),
        repository_result=DetectorResult(
            counters={"abandoned_count": 2, "generic_count": 3, "missing_descriptions": 1}
        ),
        profile_result=DetectorResult(roasts=["bio"]),
        activity_result=DetectorResult(),
        profile=Profile(login="octo", public_repos=7, followers=12),
        commits_analyzed=9,
    )

    assert stats.to_dict() == {
        "generic_commits": 5,
        "emoji_crimes": 4,
        "abandoned_repos": 2,
        "generic_repo_names": 3,
        "missing_descriptions": 1,
        "commits_analyzed": 9,
        "public_repos": 7,
        "followers": 12,
        "using_generative": False,
    }


def test_missing_counters_default_to_zero() -> None:
    empty = DetectorResult()

    stats = build_aggregate_stats(
        commit_result=empty,
        repository_result=empty,
        profile_result=empty,
        activity_result=empty,
        profile=Profile(login="octo"),
        commits_analyzed=0,
    )

    assert stats.generic_commits == 0
    assert stats.emoji_crimes == 0
    assert stats.to_response() == {
        "commits_analyzed": 0,
        "emoji_crimes": 0,
        "public_repos": 0,
        "followers": 0,
        "using_generative": False,
    }

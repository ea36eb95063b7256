"""Merge analyzer counters into the shared statistics object"""

from gitroast.analyzers import commit_messages, repositories
from gitroast.models.records import Profile
from gitroast.models.roast import AggregateStats, DetectorResult


def build_aggregate_stats(
    *,
    commit_result: DetectorResult,
    repository_result: DetectorResult,
    profile_result: DetectorResult,
    activity_result: DetectorResult,
    profile: Profile,
    commits_analyzed: int,
) -> AggregateStats:
    """
    Copy analyzer counters and raw profile counts into AggregateStats

    Profile and activity analyzers currently expose no counters. Their
    results are accepted so every analyzer flows through the same merge.
    ``using_generative`` is left for the orchestrator to set.

    Args:
        commit_result: CommitMessageAnalyzer output
        repository_result: RepositoryAnalyzer output
        profile_result: ProfileAnalyzer output
        activity_result: ActivityAnalyzer output
        profile: Profile under analysis
        commits_analyzed: Number of commits handed to the engine

    Returns:
        AggregateStats
    """
    return AggregateStats(
        generic_commits=commit_result.counter(commit_messages.GENERIC_COUNT),
        emoji_crimes=commit_result.counter(commit_messages.EMOJI_COUNT),
        abandoned_repos=repository_result.counter(repositories.ABANDONED_COUNT),
        generic_repo_names=repository_result.counter(repositories.GENERIC_COUNT),
        missing_descriptions=repository_result.counter(repositories.MISSING_DESCRIPTIONS),
        commits_analyzed=commits_analyzed,
        public_repos=profile.public_repos,
        followers=profile.followers,
        using_generative=False,
    )

"""Roast orchestrator: deterministic analyzers with optional LLM enrichment."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Callable, Optional, Sequence

from gitroast.analyzers import ActivityAnalyzer, CommitMessageAnalyzer, ProfileAnalyzer, RepositoryAnalyzer
from gitroast.crawlers.github.client import GitHubClient
from gitroast.crawlers.github.ingestion import ActivityIngestor
from gitroast.models.records import ActivityEvent, Commit, Profile, Repository
from gitroast.models.roast import MAX_ROASTS, RoastBundle
from gitroast.services.aggregator import build_aggregate_stats
from gitroast.services.enrichment import PROVIDER_GEMINI, EnrichmentResult, RoastEnrichmentService
from gitroast.utils.helpers import utcnow
from gitroast.utils.logger import sanitize_for_log, sanitize_log_extra

logger = logging.getLogger(__name__)

DEFAULT_ROAST = "Your GitHub is so clean, it's suspicious. Are you hiding your real work in private repos? 🤔"


class RoastOrchestrator:
    """Run the four analyzers, aggregate, and pick generated or deterministic roasts."""

    def __init__(
        self,
        *,
        enrichment_api_key: Optional[str] = None,
        llm_provider: str = PROVIDER_GEMINI,
        enrichment_service: Optional[RoastEnrichmentService] = None,
        github_client_factory: Callable[[], Any] = GitHubClient,
        ingestor_factory: Callable[[Any], ActivityIngestor] = ActivityIngestor,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if enrichment_service is None and enrichment_api_key:
            enrichment_service = RoastEnrichmentService(api_key=enrichment_api_key, provider=llm_provider)
        self._enrichment = enrichment_service
        self._github_client_factory = github_client_factory
        self._ingestor_factory = ingestor_factory
        self._clock = clock
        self._commit_analyzer = CommitMessageAnalyzer(clock=clock)
        self._repository_analyzer = RepositoryAnalyzer(clock=clock)
        self._profile_analyzer = ProfileAnalyzer(clock=clock)
        self._activity_analyzer = ActivityAnalyzer(clock=clock)

    @property
    def enrichment_enabled(self) -> bool:
        return self._enrichment is not None and self._enrichment.is_configured

    async def generate_roast(
        self,
        profile: Profile,
        repositories: Sequence[Repository],
        commits: Sequence[Commit],
        events: Sequence[ActivityEvent],
    ) -> RoastBundle:
        """
        Produce the roast bundle for already-normalized records

        Never raises for well-shaped input; an enrichment failure always falls
        through to the deterministic roasts.

        Returns:
            RoastBundle with 1-5 roasts and aggregate stats
        """
        commit_result = self._commit_analyzer.analyze([commit.message for commit in commits])
        repository_result = self._repository_analyzer.analyze(repositories)
        profile_result = self._profile_analyzer.analyze(profile)
        activity_result = self._activity_analyzer.analyze(events, profile)

        stats = build_aggregate_stats(
            commit_result=commit_result,
            repository_result=repository_result,
            profile_result=profile_result,
            activity_result=activity_result,
            profile=profile,
            commits_analyzed=len(commits),
        )

        if self.enrichment_enabled:
            try:
                enrichment = await self._enrichment.generate(
                    profile=profile,
                    repositories=repositories,
                    commits=commits,
                    events=events,
                    stats=stats,
                    now=self._clock(),
                )
            except Exception as exc:
                enrichment = EnrichmentResult.unavailable(sanitize_for_log(str(exc), key="error"))
                logger.exception(
                    "Roast enrichment raised exception",
                    extra=sanitize_log_extra(login=profile.login, error=enrichment.error),
                )
            if enrichment.is_produced:
                stats.using_generative = True
                return RoastBundle(roasts=enrichment.roasts[:MAX_ROASTS], stats=stats)
            logger.info(
                "Falling back to deterministic roasts",
                extra=sanitize_log_extra(login=profile.login, error=enrichment.error),
            )

        roasts = [
            *commit_result.roasts,
            *repository_result.roasts,
            *profile_result.roasts,
            *activity_result.roasts,
        ]
        if not roasts:
            roasts.append(DEFAULT_ROAST)
        if len(roasts) > MAX_ROASTS:
            logger.debug(f"Trimming {len(roasts)} deterministic roasts to {MAX_ROASTS}")
            roasts = roasts[:MAX_ROASTS]

        return RoastBundle(roasts=roasts, stats=stats)

    async def run_for_user(self, username: str) -> dict[str, Any]:
        """
        Fetch a user's activity from GitHub and roast it

        Raises:
            GitHubUserNotFound: the account does not exist
            GitHubDataUnavailable: GitHub data could not be retrieved

        Returns:
            Response payload with username, name, avatar_url, roasts and stats
        """
        logger.info(
            "Roast run started",
            extra=sanitize_log_extra(username=username, enrichment=self.enrichment_enabled),
        )
        async with self._github_client_factory() as client:
            snapshot = await self._ingestor_factory(client).collect(username)

        bundle = await self.generate_roast(
            snapshot.profile,
            snapshot.repositories,
            snapshot.commits,
            snapshot.events,
        )
        logger.info(
            "Roast run completed",
            extra=sanitize_log_extra(
                username=snapshot.profile.login,
                roast_count=len(bundle.roasts),
                using_generative=bundle.stats.using_generative,
            ),
        )
        return {
            "username": snapshot.profile.login,
            "name": snapshot.profile.name,
            "avatar_url": snapshot.profile.avatar_url,
            **bundle.to_dict(),
        }

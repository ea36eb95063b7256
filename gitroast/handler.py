"""Lambda-style request handler for the roast endpoint"""

import asyncio
from functools import partial
import logging
from typing import Any, Dict, Optional

from gitroast.config.settings import Settings, settings
from gitroast.crawlers.github.client import GitHubClient
from gitroast.crawlers.github.ingestion import ActivityIngestor, GitHubDataUnavailable, GitHubUserNotFound
from gitroast.orchestrator_roast import RoastOrchestrator
from gitroast.services.enrichment import RoastEnrichmentService
from gitroast.utils.logger import sanitize_for_log, sanitize_log_extra, setup_logger

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "GitHub user not found. Check the username and try again."
UPSTREAM_MESSAGE = "Failed to analyze GitHub profile. The user might have limited public activity."


def build_orchestrator(config: Settings = settings, *, use_llm: bool = True) -> RoastOrchestrator:
    """Wire the orchestrator from settings; the engine itself never reads them."""
    enrichment = RoastEnrichmentService.from_settings(config) if use_llm else None
    return RoastOrchestrator(
        enrichment_service=enrichment,
        github_client_factory=partial(
            GitHubClient,
            token=config.GITHUB_TOKEN,
            base_url=config.GITHUB_API_BASE_URL,
            timeout_seconds=config.GITHUB_TIMEOUT_SECONDS,
            user_agent=config.USER_AGENT,
        ),
        ingestor_factory=partial(
            ActivityIngestor,
            repo_limit=config.GITHUB_REPO_LIMIT,
            commit_repo_limit=config.GITHUB_COMMIT_REPO_LIMIT,
            commits_per_repo=config.GITHUB_COMMITS_PER_REPO,
            event_limit=config.GITHUB_EVENT_LIMIT,
        ),
    )


def _extract_username(event: Dict[str, Any]) -> Optional[str]:
    params = event.get("queryStringParameters") or {}
    raw = params.get("username") if isinstance(params, dict) else None
    if raw is None:
        raw = event.get("username")
    if not isinstance(raw, str) or not raw.strip():
        return None
    return raw.strip()


def lambda_handler(
    event: Dict[str, Any],
    context: Any,
    orchestrator: Optional[RoastOrchestrator] = None,
) -> Dict[str, Any]:
    """
    Roast a GitHub user

    Args:
        event: {"username": ...} or an API gateway event with
            queryStringParameters.username
        context: Lambda context (unused)
        orchestrator: Pre-built orchestrator, mainly for tests

    Returns:
        Dict with statusCode and either result or error
    """
    del context
    setup_logger("gitroast", level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    event = event or {}

    method = event.get("httpMethod")
    if method is not None and str(method).upper() != "GET":
        return {"statusCode": 405, "error": "Method not allowed"}

    username = _extract_username(event)
    if username is None:
        return {"statusCode": 400, "error": "Username is required"}

    try:
        runner = orchestrator or build_orchestrator()
        result = asyncio.run(runner.run_for_user(username))
    except GitHubUserNotFound:
        return {"statusCode": 404, "error": NOT_FOUND_MESSAGE}
    except GitHubDataUnavailable as exc:
        logger.warning("GitHub data unavailable", extra=sanitize_log_extra(username=username, error=str(exc)))
        return {"statusCode": 500, "error": UPSTREAM_MESSAGE}
    except Exception as exc:
        logger.error(
            f"Error generating roast: {sanitize_for_log(str(exc), key='error')}",
            exc_info=True,
        )
        return {"statusCode": 500, "error": UPSTREAM_MESSAGE}

    return {"statusCode": 200, "result": result}

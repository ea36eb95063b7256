from __future__ import annotations

from typing import Any

import pytest

from gitroast.crawlers.github.ingestion import GitHubDataUnavailable, GitHubUserNotFound
from gitroast.handler import NOT_FOUND_MESSAGE, UPSTREAM_MESSAGE, build_orchestrator, lambda_handler
from gitroast.config.settings import Settings


class FakeOrchestrator:
    def __init__(self, result: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.result = result or {"username": "octo", "roasts": ["roast"], "stats": {}}
        self.error = error
        self.usernames: list[str] = []

    async def run_for_user(self, username: str) -> dict[str, Any]:
        self.usernames.append(username)
        if self.error is not None:
            raise self.error
        return self.result


def test_non_get_method_is_rejected() -> None:
    orchestrator = FakeOrchestrator()

    response = lambda_handler({"httpMethod": "POST", "username": "octo"}, None, orchestrator=orchestrator)

    assert response == {"statusCode": 405, "error": "Method not allowed"}
    assert orchestrator.usernames == []


@pytest.mark.parametrize("event", [{}, {"username": "   "}, {"queryStringParameters": None}, None])
def test_missing_username_is_bad_request(event: Any) -> None:
    response = lambda_handler(event, None, orchestrator=FakeOrchestrator())

    assert response == {"statusCode": 400, "error": "Username is required"}


def test_query_string_username_is_trimmed_and_used() -> None:
    orchestrator = FakeOrchestrator()

    response = lambda_handler(
        {"httpMethod": "GET", "queryStringParameters": {"username": " octo "}}, None, orchestrator=orchestrator
    )

    assert response["statusCode"] == 200
    assert response["result"]["roasts"] == ["roast"]
    assert orchestrator.usernames == ["octo"]


def test_unknown_user_maps_to_404() -> None:
    response = lambda_handler({"username": "nobody"}, None, orchestrator=FakeOrchestrator(error=GitHubUserNotFound("x")))

    assert response == {"statusCode": 404, "error": NOT_FOUND_MESSAGE}


@pytest.mark.parametrize("error", [GitHubDataUnavailable("rate limited"), RuntimeError("token=secret boom")])
def test_upstream_and_unexpected_failures_map_to_500(error: Exception) -> None:
    response = lambda_handler({"username": "octo"}, None, orchestrator=FakeOrchestrator(error=error))

    assert response == {"statusCode": 500, "error": UPSTREAM_MESSAGE}


def test_build_orchestrator_wires_enrichment_from_settings() -> None:
    config = Settings(LLM_PROVIDER="openai", OPENAI_API_KEY="sk-test", GEMINI_API_KEY=None)

    assert build_orchestrator(config).enrichment_enabled is True
    assert build_orchestrator(config, use_llm=False).enrichment_enabled is False

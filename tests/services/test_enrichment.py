from __future__ import annotations

import asyncio
import time
from datetime import UTC, datetime
import logging

import pytest

from gitroast.models.records import Commit, Profile, Repository
from gitroast.models.roast import AggregateStats
from gitroast.services.enrichment import EnrichmentState, RoastEnrichmentService

NOW = datetime(2026, 3, 14, 12, 0, tzinfo=UTC)


def _generate(service: RoastEnrichmentService):
    return asyncio.run(
        service.generate(
            profile=Profile(login="octo", public_repos=2, followers=1),
            repositories=[Repository(name="test"), Repository(name="dotfiles", description="my setup")],
            commits=[Commit(message="fix"), Commit(message="Add parser\n\nlong body")],
            events=[],
            stats=AggregateStats(generic_commits=1, commits_analyzed=2),
            now=NOW,
        )
    )


def test_produces_roasts_from_json_response_and_sends_account_facts() -> None:
    prompts: list[str] = []

    async def llm_ok(prompt: str) -> str:
        prompts.append(prompt)
        return '["Roast one is here 🔥", "Roast two is here 😂", "Roast three is here 💻", "Roast four is here 🙃"]'

    result = _generate(RoastEnrichmentService(llm_call=llm_ok))

    assert result.state == EnrichmentState.PRODUCED
    assert result.is_produced is True
    assert result.roasts == [
        "Roast one is here 🔥",
        "Roast two is here 😂",
        "Roast three is here 💻",
        "Roast four is here 🙃",
    ]
    assert "Username: octo" in prompts[0]
    assert "test, dotfiles" in prompts[0]
    assert "- Add parser" in prompts[0]
    assert "long body" not in prompts[0]
    assert "Has 1 generic commit messages" in prompts[0]


def test_missing_credential_is_unavailable_without_calling_provider() -> None:
    service = RoastEnrichmentService(api_key="   ")

    result = _generate(service)

    assert service.is_configured is False
    assert result.state == EnrichmentState.UNAVAILABLE
    assert result.roasts == []


def test_timeout_is_unavailable() -> None:
    async def llm_slow(_prompt: str) -> str:
        await asyncio.sleep(5)
        return '["too late to matter anyway"]'

    result = _generate(RoastEnrichmentService(llm_call=llm_slow, timeout_seconds=0.01))

    assert result.state == EnrichmentState.UNAVAILABLE
    assert result.error is not None and "timed out" in result.error


def test_provider_error_is_unavailable_and_redacted(caplog: pytest.LogCaptureFixture) -> None:
    async def llm_broken(_prompt: str) -> str:
        raise RuntimeError("quota exceeded for api_key=sk-live-secret")

    with caplog.at_level(logging.WARNING):
        result = _generate(RoastEnrichmentService(llm_call=llm_broken))

    assert result.state == EnrichmentState.UNAVAILABLE
    assert "sk-live-secret" not in (result.error or "")
    assert "sk-live-secret" not in caplog.text
    assert all("sk-live-secret" not in str(record.__dict__) for record in caplog.records)


def test_unparseable_response_is_unavailable() -> None:
    async def llm_terse(_prompt: str) -> str:
        return "no\nthanks"

    result = _generate(RoastEnrichmentService(llm_call=llm_terse))

    assert result.state == EnrichmentState.UNAVAILABLE
    assert result.is_produced is False


def test_unsupported_provider_is_rejected() -> None:
    with pytest.raises(ValueError):
        RoastEnrichmentService(api_key="key", provider="mystery")


def test_provider_defaults_pick_a_model() -> None:
    service = RoastEnrichmentService(api_key="key", provider="OpenAI")

    assert service.provider == "openai"
    assert service.model == "gpt-4o-mini"
    assert service.is_configured is True


class SlowGeminiModel:
    def __init__(self, delay: float, text: str = '["Gemini roast about your forks 🍴"]') -> None:
        self.delay = delay
        self.text = text
        self.request_options: list[dict[str, object]] = []

    def generate_content(self, *_args: object, **_kwargs: object) -> object:
        time.sleep(self.delay)
        raise AssertionError("blocking generate_content must not be used")

    async def generate_content_async(self, _prompt: str, **kwargs: object) -> object:
        self.request_options.append(kwargs["request_options"])
        await asyncio.sleep(self.delay)
        return type("GeminiResponse", (), {"text": self.text})()


def test_gemini_timeout_returns_control_without_waiting_for_provider() -> None:
    service = RoastEnrichmentService(api_key="key", provider="gemini", timeout_seconds=0.2)
    service._client = SlowGeminiModel(delay=3)

    started = time.monotonic()
    result = _generate(service)
    elapsed = time.monotonic() - started

    assert result.state == EnrichmentState.UNAVAILABLE
    assert elapsed < 1.0


def test_gemini_request_carries_timeout() -> None:
    model = SlowGeminiModel(delay=0)
    service = RoastEnrichmentService(api_key="key", provider="gemini", timeout_seconds=5)
    service._client = model

    result = _generate(service)

    assert result.roasts == ["Gemini roast about your forks 🍴"]
    assert model.request_options == [{"timeout": 5}]

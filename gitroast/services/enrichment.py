"""LLM roast enrichment with a typed produced/unavailable outcome"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from anthropic import AsyncAnthropic
import google.generativeai as genai
from openai import AsyncOpenAI

from gitroast.models.records import ActivityEvent, Commit, Profile, Repository
from gitroast.models.roast import AggregateStats
from gitroast.services.roast_parser import parse_roast_response
from gitroast.services.roast_prompt import SYSTEM_PROMPT, build_roast_prompt
from gitroast.utils.helpers import utcnow
from gitroast.utils.logger import sanitize_for_log, sanitize_log_extra

logger = logging.getLogger(__name__)

PROVIDER_GEMINI = "gemini"
PROVIDER_OPENAI = "openai"
PROVIDER_ANTHROPIC = "anthropic"

DEFAULT_MODELS = {
    PROVIDER_GEMINI: "gemini-2.5-flash",
    PROVIDER_OPENAI: "gpt-4o-mini",
    PROVIDER_ANTHROPIC: "claude-3-5-haiku-20241022",
}


class EnrichmentState(str, Enum):
    """Outcome of one enrichment attempt."""

    PRODUCED = "produced"
    UNAVAILABLE = "unavailable"


@dataclass(slots=True)
class EnrichmentResult:
    """Container that separates generated roasts from the attempt's outcome."""

    state: EnrichmentState
    roasts: list[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_produced(self) -> bool:
        return self.state == EnrichmentState.PRODUCED and bool(self.roasts)

    @classmethod
    def produced(cls, roasts: list[str]) -> "EnrichmentResult":
        return cls(state=EnrichmentState.PRODUCED, roasts=list(roasts))

    @classmethod
    def unavailable(cls, error: str) -> "EnrichmentResult":
        return cls(state=EnrichmentState.UNAVAILABLE, error=error)


class RoastEnrichmentService:
    """Ask an LLM provider for 3-5 roasts; every failure degrades to UNAVAILABLE."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        provider: str = PROVIDER_GEMINI,
        model: Optional[str] = None,
        temperature: float = 0.9,
        max_tokens: int = 1024,
        timeout_seconds: float = 20.0,
        llm_call: Optional[Callable[[str], Awaitable[Any]]] = None,
    ) -> None:
        self.provider = (provider or PROVIDER_GEMINI).lower()
        if self.provider not in DEFAULT_MODELS:
            raise ValueError(f"Unsupported LLM provider: {provider}")

        self._api_key = (api_key or "").strip() or None
        self.model = model or DEFAULT_MODELS[self.provider]
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = timeout_seconds
        self._llm_call = llm_call
        self._client: Any = None

    @classmethod
    def from_settings(cls, config: Any) -> "RoastEnrichmentService":
        """Build a service from a Settings-like object."""
        return cls(
            api_key=config.enrichment_api_key(),
            provider=config.LLM_PROVIDER,
            model=config.LLM_MODEL,
            temperature=config.LLM_TEMPERATURE,
            max_tokens=config.LLM_MAX_TOKENS,
            timeout_seconds=config.ROAST_ENRICHMENT_TIMEOUT_SECONDS,
        )

    @property
    def is_configured(self) -> bool:
        return self._llm_call is not None or self._api_key is not None

    async def generate(
        self,
        *,
        profile: Profile,
        repositories: Sequence[Repository],
        commits: Sequence[Commit],
        events: Sequence[ActivityEvent],
        stats: AggregateStats,
        now: Optional[datetime] = None,
    ) -> EnrichmentResult:
        """
        Request roasts for one account

        Returns:
            EnrichmentResult tagged PRODUCED with 1-5 roasts, or UNAVAILABLE
        """
        if not self.is_configured:
            return EnrichmentResult.unavailable("no LLM credential configured")

        try:
            prompt = build_roast_prompt(
                profile=profile,
                repositories=repositories,
                commits=commits,
                events=events,
                stats=stats,
                now=now or utcnow(),
            )
            raw_response = await asyncio.wait_for(self._complete(prompt), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Roast enrichment timed out",
                extra=sanitize_log_extra(provider=self.provider, timeout_seconds=self._timeout),
            )
            return EnrichmentResult.unavailable(f"timed out after {self._timeout}s")
        except Exception as exc:
            error = sanitize_for_log(str(exc), key="error")
            logger.warning(
                "Roast enrichment request failed",
                extra=sanitize_log_extra(provider=self.provider, error=error),
            )
            return EnrichmentResult.unavailable(error)

        roasts = parse_roast_response(raw_response)
        if not roasts:
            logger.warning(
                "Roast enrichment response could not be parsed",
                extra=sanitize_log_extra(provider=self.provider, response_text=str(raw_response or "")),
            )
            return EnrichmentResult.unavailable("response contained no usable roasts")

        logger.info(f"Generated {len(roasts)} roasts with {self.provider}")
        return EnrichmentResult.produced(roasts)

    async def _complete(self, prompt: str) -> Any:
        if self._llm_call is not None:
            return await self._llm_call(prompt)
        if self.provider == PROVIDER_OPENAI:
            return await self._complete_openai(prompt)
        if self.provider == PROVIDER_ANTHROPIC:
            return await self._complete_anthropic(prompt)
        return await self._complete_gemini(prompt)

    async def _complete_openai(self, prompt: str) -> str:
        """Generate roasts using OpenAI GPT"""
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key)

        response = await self._client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return response.choices[0].message.content or ""

    async def _complete_anthropic(self, prompt: str) -> str:
        """Generate roasts using Anthropic Claude"""
        if self._client is None:
            self._client = AsyncAnthropic(api_key=self._api_key)

        response = await self._client.messages.create(
            model=self.model,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.content[0].text

    async def _complete_gemini(self, prompt: str) -> str:
        """Generate roasts using Google Gemini"""
        if self._client is None:
            genai.configure(api_key=self._api_key)
            self._client = genai.GenerativeModel(self.model, system_instruction=SYSTEM_PROMPT)

        # Native async call so wait_for cancellation leaves no worker thread behind
        response = await self._client.generate_content_async(
            prompt,
            generation_config=genai.types.GenerationConfig(
                temperature=self._temperature,
                max_output_tokens=self._max_tokens,
            ),
            request_options={"timeout": self._timeout},
        )
        return response.text

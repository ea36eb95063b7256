"""Two-stage parser turning free LLM text into discrete roast strings."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

from pydantic import BaseModel, ValidationError, field_validator

from gitroast.models.roast import MAX_ROASTS

logger = logging.getLogger(__name__)

MIN_LINE_CHARS = 10

_LIST_MARKER = re.compile(r"^(?:[-*•]+|\d+[.)])\s*")
_QUOTES = "\"'“”"


class RoastListPayload(BaseModel):
    """Validated roast list: trimmed, non-blank, at most MAX_ROASTS entries."""

    roasts: list[str]

    @field_validator("roasts", mode="before")
    @classmethod
    def validate_roasts(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            raise ValueError("roasts must be a list")
        cleaned = [item.strip() for item in value if isinstance(item, str) and item.strip()]
        if not cleaned:
            raise ValueError("at least one roast is required")
        return cleaned[:MAX_ROASTS]


def extract_json_array(text: str) -> Optional[list[Any]]:
    """Return the first JSON array literal in ``text`` that holds a usable string."""
    decoder = json.JSONDecoder()
    for match in re.finditer(r"\[", text):
        try:
            value, _ = decoder.raw_decode(text, match.start())
        except json.JSONDecodeError:
            continue
        if isinstance(value, list) and any(isinstance(item, str) and item.strip() for item in value):
            return value
    return None


def _clean_line(line: str) -> str:
    cleaned = _LIST_MARKER.sub("", line.strip(), count=1).strip()
    cleaned = cleaned.rstrip(",").strip()
    return cleaned.strip(_QUOTES).strip()


def extract_lines(text: str) -> list[str]:
    """Fallback: keep non-trivial lines with list markers and quotes removed."""
    lines: list[str] = []
    for raw_line in text.splitlines():
        if len(raw_line.strip()) <= MIN_LINE_CHARS:
            continue
        cleaned = _clean_line(raw_line)
        if cleaned:
            lines.append(cleaned)
    return lines[:MAX_ROASTS]


def parse_roast_response(text: Any) -> list[str]:
    """
    Parse raw LLM output into 0..MAX_ROASTS roast strings

    An empty list means nothing usable was found; callers treat that as
    "unavailable". This function never raises.
    """
    if not isinstance(text, str) or not text.strip():
        return []

    candidates = extract_json_array(text)
    if candidates is not None:
        try:
            return RoastListPayload.model_validate({"roasts": candidates}).roasts
        except ValidationError:
            logger.debug("JSON array in LLM response held no usable roasts")

    try:
        return RoastListPayload.model_validate({"roasts": extract_lines(text)}).roasts
    except ValidationError:
        logger.debug("LLM response produced no usable roast lines")
        return []

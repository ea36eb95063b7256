"""Commit message heuristics: generic phrasing, emoji, length, shouting, typos."""

from __future__ import annotations

import re
from typing import Sequence

from gitroast.analyzers.base import BaseAnalyzer
from gitroast.analyzers.emoji import has_emoji
from gitroast.models.roast import DetectorResult

GENERIC_COUNT = "generic_count"
EMOJI_COUNT = "emoji_count"

_GENERIC_PATTERNS = (
    re.compile(r"(fix|update|change|add|remove)", re.IGNORECASE),
    re.compile(r"(wip|work in progress)", re.IGNORECASE),
)
_TYPO_PATTERN = re.compile(r"\b(teh|adn|hte|taht|waht|whith|thier|recieve)\b", re.IGNORECASE)

GENERIC_THRESHOLD = 2
EMOJI_THRESHOLD = 3
LONG_MESSAGE_LENGTH = 100
LONG_MESSAGE_THRESHOLD = 2
SHOUTING_MIN_LENGTH = 5

GENERIC_ROAST = (
    '{count} commits with messages like "fix" or "update"? '
    "Your commit history reads like a broken keyboard! 🎹💔"
)
EMOJI_ROAST = "{count} commits with emojis? Your commit messages look like a teenager's text messages! 🙄📱"
LONG_MESSAGE_ROAST = "Writing novels in your commit messages? Save some characters for your actual code! 📚✍️"
SHOUTING_ROAST = "CALM DOWN! Your commit messages don't need to shout. We can hear you just fine. 📢😤"
TYPO_ROAST = "Typos in commit messages? Maybe spend less time coding and more time learning to spell! 📝🤦"


def is_generic_message(message: str) -> bool:
    text = message.strip()
    return any(pattern.fullmatch(text) for pattern in _GENERIC_PATTERNS)


def is_shouting(message: str) -> bool:
    return message == message.upper() and len(message) > SHOUTING_MIN_LENGTH


def has_typo(message: str) -> bool:
    return _TYPO_PATTERN.search(message) is not None


class CommitMessageAnalyzer(BaseAnalyzer):
    """Scan commit messages for low-effort habits."""

    def analyze(self, messages: Sequence[str]) -> DetectorResult:
        texts = [message for message in messages if isinstance(message, str)]
        result = DetectorResult(counters={GENERIC_COUNT: 0, EMOJI_COUNT: 0})

        generic_count = sum(1 for text in texts if is_generic_message(text))
        result.counters[GENERIC_COUNT] = generic_count
        if generic_count > GENERIC_THRESHOLD:
            result.roasts.append(GENERIC_ROAST.format(count=generic_count))

        # The emoji tally is only recorded once it is roast-worthy
        emoji_count = sum(1 for text in texts if has_emoji(text))
        if emoji_count > EMOJI_THRESHOLD:
            result.counters[EMOJI_COUNT] = emoji_count
            result.roasts.append(EMOJI_ROAST.format(count=emoji_count))

        long_count = sum(1 for text in texts if len(text) > LONG_MESSAGE_LENGTH)
        if long_count > LONG_MESSAGE_THRESHOLD:
            result.roasts.append(LONG_MESSAGE_ROAST)

        if any(is_shouting(text) for text in texts):
            result.roasts.append(SHOUTING_ROAST)

        if any(has_typo(text) for text in texts):
            result.roasts.append(TYPO_ROAST)

        self.log_result(result)
        return result

"""Activity heuristics over the recent public-event window."""

from __future__ import annotations

from datetime import UTC
from typing import Optional, Sequence

from gitroast.analyzers.base import BaseAnalyzer
from gitroast.models.records import ActivityEvent, Profile
from gitroast.models.roast import DetectorResult
from gitroast.utils.helpers import ensure_aware

RECENT_WINDOW = 20
WEEKEND_RATIO = 0.6
LATE_NIGHT_HOURS = frozenset({23, 0, 1, 2, 3, 4, 5})
LATE_NIGHT_THRESHOLD = 5
BURST_MIN_WINDOW = 15
BURST_PUSH_THRESHOLD = 8

WEEKEND_ROAST = "Weekend warrior detected! Do you only code when normal people are having fun? 🏃‍♂️💻"
LATE_NIGHT_ROAST = (
    "3 AM commits? Either you're in a different timezone or you really need to fix your sleep schedule! 🌙💻"
)
BURST_ROAST = "So many commits! Do you save your work every time you fix a typo? 💾🤯"


def recent_window(events: Sequence[ActivityEvent]) -> list[ActivityEvent]:
    return list(events[:RECENT_WINDOW])


def is_weekend(event: ActivityEvent) -> bool:
    # weekday() uses the timestamp's own offset, not the server's zone
    return event.created_at is not None and event.created_at.weekday() >= 5


def is_late_night(event: ActivityEvent) -> bool:
    if event.created_at is None:
        return False
    return ensure_aware(event.created_at).astimezone(UTC).hour in LATE_NIGHT_HOURS


class ActivityAnalyzer(BaseAnalyzer):
    """Scan recent public events for weekend, late-night and burst patterns."""

    def analyze(
        self,
        events: Sequence[ActivityEvent],
        profile: Optional[Profile] = None,
    ) -> DetectorResult:
        window = recent_window(events)
        result = DetectorResult()

        weekend_count = sum(1 for event in window if is_weekend(event))
        if weekend_count > len(window) * WEEKEND_RATIO:
            result.roasts.append(WEEKEND_ROAST)

        late_night_count = sum(1 for event in window if is_late_night(event))
        if late_night_count > LATE_NIGHT_THRESHOLD:
            result.roasts.append(LATE_NIGHT_ROAST)

        if len(window) > BURST_MIN_WINDOW:
            push_count = sum(1 for event in window if event.is_push)
            if push_count > BURST_PUSH_THRESHOLD:
                result.roasts.append(BURST_ROAST)

        self.log_result(result)
        return result

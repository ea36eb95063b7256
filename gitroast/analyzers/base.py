"""Base analyzer class with common functionality"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Optional
import logging

from gitroast.models.roast import DetectorResult
from gitroast.utils.helpers import utcnow


class BaseAnalyzer(ABC):
    """
    Base analyzer class

    Every analyzer is a pure function of its input records and the clock.
    Analyzers never raise on malformed records; missing fields simply do
    not count towards any detector.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self._clock = clock or utcnow

    def now(self) -> datetime:
        return self._clock()

    @abstractmethod
    def analyze(self, *args: Any, **kwargs: Any) -> DetectorResult:
        """
        Run every detector and return roasts in emission order

        Returns:
            DetectorResult with roasts and counters
        """
        pass

    def log_result(self, result: DetectorResult):
        """Log detector outcome"""
        self.logger.debug(
            f"{self.__class__.__name__}: {len(result.roasts)} roasts, counters={result.counters}"
        )

from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_BREAK_THRESHOLD_MINUTES
from ..core.enums import BreakClassification


@dataclass(frozen=True)
class ThresholdClassifier:
    """Classify a finished break by its rounded duration.

    Strictly greater than the threshold is over; a break of exactly
    `threshold_minutes` is still under.
    """

    threshold_minutes: int = DEFAULT_BREAK_THRESHOLD_MINUTES

    def classify(self, duration_minutes: int) -> BreakClassification:
        if duration_minutes > self.threshold_minutes:
            return BreakClassification.OVER_THRESHOLD
        return BreakClassification.UNDER_THRESHOLD

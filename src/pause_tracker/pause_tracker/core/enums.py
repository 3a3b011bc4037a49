from __future__ import annotations

from enum import Enum


class BreakClassification(str, Enum):
    """Classification of a finished break against the duration threshold."""

    OVER_THRESHOLD = "OVER_THRESHOLD"
    UNDER_THRESHOLD = "UNDER_THRESHOLD"


class ToggleStatus(str, Enum):
    """Which transition a toggle request produced."""

    START = "start"
    END = "end"

from __future__ import annotations

import re
from typing import Any

from ..core.constants import BADGE_ID_PATTERN
from ..core.exceptions import InvalidIdentifier

_BADGE_ID_RE = re.compile(BADGE_ID_PATTERN)


def is_valid_badge_id(value: Any) -> bool:
    """True when value is a string of exactly 4 ASCII digits."""
    return isinstance(value, str) and value.isascii() and _BADGE_ID_RE.fullmatch(value) is not None


def require_badge_id(value: Any) -> str:
    if not is_valid_badge_id(value):
        raise InvalidIdentifier("invalid identifier")
    return value

"""Zone identifier format rules."""

from __future__ import annotations

import re

ZONE_ID_PATTERN: re.Pattern[str] = re.compile(r"[a-f0-9]{32}")
ZONE_ID_FORMAT = "32 lowercase hex characters"


def is_valid_zone_id(zone_id: str | None) -> bool:
    """Check whether *zone_id* is exactly 32 lowercase hex characters."""
    if not zone_id:
        return False
    return ZONE_ID_PATTERN.fullmatch(zone_id) is not None

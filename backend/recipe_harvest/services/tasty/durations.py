# recipe_harvest/services/tasty/durations.py
# "1 hour 20 minutes" -> 80. Hours part first, minutes part second, both optional.

from __future__ import annotations
import re

from recipe_harvest.services.tasty.errors import FieldDecodeError

_DURATION_RE = re.compile(
    r"(?:(?P<hours>\d+)\s*(?:hour|hr)s?)?"
    r"\s*"
    r"(?:(?P<minutes>\d+)\s*(?:minute|min)s?)?",
    re.IGNORECASE,
)

def parse_duration(text: str) -> int:
    """Total minutes for a free-text duration.

    Empty text parses as 0. Text that is not entirely a duration phrase
    ("about an hour", "Total Time: 5") raises FieldDecodeError.
    """
    m = _DURATION_RE.fullmatch((text or "").strip())
    if m is None:
        raise FieldDecodeError(f"Failed to parse duration: {text!r}")
    hours = int(m.group("hours") or 0)
    minutes = int(m.group("minutes") or 0)
    return hours * 60 + minutes

import math
import re
from typing import List, Mapping

MAX_SLOTS = 3

_NON_SLUG_CHARS = re.compile(r"[^a-z\s]")
_WHITESPACE = re.compile(r"\s+")


def derive_slug(title: str) -> str:
    """Turn a post title into a lowercase, hyphen-separated identifier."""
    cleaned = _NON_SLUG_CHARS.sub("", title.lower()).strip()
    return _WHITESPACE.sub("-", cleaned)


def collect_slots(
    fields: Mapping[str, object], prefix: str, limit: int = MAX_SLOTS
) -> List[str]:
    """Gather `prefix_1` .. `prefix_{limit}` in order, skipping empty slots."""
    values = []
    for index in range(1, limit + 1):
        value = fields.get(f"{prefix}_{index}")
        if isinstance(value, str) and value.strip():
            values.append(value.strip())
    return values


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"

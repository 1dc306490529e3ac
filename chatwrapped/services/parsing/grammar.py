"""Line-prefix grammar shared by the bracketed and dashed export dialects.

Bracketed::

    [12/05/2023, 9:00:15 PM] Alice: hello

Dashed::

    12.05.23, 21:00 - Alice: hello
"""

import re
from typing import NamedTuple

TIMESTAMP_PREFIX_RE = re.compile(
    r"^\[?"
    r"(?P<date>\d{1,4}[./-]\d{1,4}[./-]\d{1,4}),?\s+"
    r"(?P<time>\d{1,2}[:.]\d{2}(?:[:.]\d{2})?(?:[\s\u202f\u00a0]?[A-Za-z]{1,2}\.?(?:[A-Za-z]\.?)?)?)"
    r"(?:\]\s(?:-\s)?|\s-\s)"
)

DATE_SPLIT_RE = re.compile(r"[./-]")
TIME_RE = re.compile(r"^(\d{1,2})[:.](\d{2})(?:[:.](\d{2}))?[\s\u202f\u00a0]?([A-Za-z.]*)$")


class TimestampMatch(NamedTuple):
    date: str
    time: str
    end: int


def match_prefix(line: str) -> TimestampMatch | None:
    match = TIMESTAMP_PREFIX_RE.match(line)
    if not match:
        return None
    return TimestampMatch(match.group("date"), match.group("time"), match.end())


def split_date(token: str) -> tuple[int, int, int]:
    first, second, third = (int(part) for part in DATE_SPLIT_RE.split(token))
    return first, second, third


def split_time(token: str) -> tuple[int, int, int, str]:
    """Return ``(hour, minute, second, meridiem)``; meridiem is ``""``, ``"a"`` or ``"p"``."""
    match = TIME_RE.match(token.strip())
    if not match:
        raise ValueError(f"Unrecognised time token: {token!r}")
    hour, minute, second, suffix = match.groups()
    meridiem = suffix.replace(".", "").lower()[:1]
    if meridiem not in {"a", "p"}:
        meridiem = ""
    return int(hour), int(minute), int(second or 0), meridiem

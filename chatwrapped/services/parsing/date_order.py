from enum import Enum
from typing import Iterable

from chatwrapped.services.parsing.grammar import split_date


class DateOrder(str, Enum):
    DAY_FIRST = "day_first"
    MONTH_FIRST = "month_first"
    YEAR_FIRST = "year_first"


def detect_date_order(date_tokens: Iterable[str], default: DateOrder = DateOrder.DAY_FIRST) -> DateOrder:
    """Guess the component order from a sample of date tokens.

    A value above 12 can only be a day, a value above 1000 only a year. When
    every sample is ambiguous the configured default is returned, so
    transcripts confined to the first twelve days of each month follow it.
    """
    max_first = 0
    max_second = 0
    for token in date_tokens:
        try:
            first, second, _ = split_date(token)
        except ValueError:
            continue
        if first > 1000:
            return DateOrder.YEAR_FIRST
        max_first = max(max_first, first)
        max_second = max(max_second, second)

    if max_first > 12:
        return DateOrder.DAY_FIRST
    if max_second > 12:
        return DateOrder.MONTH_FIRST
    return default


def resolve_components(first: int, second: int, third: int, order: DateOrder) -> tuple[int, int, int]:
    """Map raw components to ``(year, month, day)``; two-digit years land in the 2000s."""
    if order is DateOrder.YEAR_FIRST:
        year, month, day = first, second, third
    elif order is DateOrder.MONTH_FIRST:
        month, day, year = first, second, third
    else:
        day, month, year = first, second, third
    if year < 100:
        year += 2000
    return year, month, day

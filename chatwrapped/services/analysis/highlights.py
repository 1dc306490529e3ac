import math
from datetime import date
from typing import Hashable, TypeVar

from chatwrapped.schemas.report import RepeatedPhrase
from chatwrapped.services.analysis.types import PhraseTally, UserAggregate

K = TypeVar("K", bound=Hashable)

ONE_SIDED_MIN_MESSAGES = 10
ONE_SIDED_SHARE = 0.75
PHRASE_MIN_COUNT = 3
STREAK_GAP_DAYS = 1.5


def rank_counts(counts: dict[K, int], limit: int | None = None) -> list[tuple[K, int]]:
    """Order by count descending, then by first insertion so earlier keys win ties."""
    ranked = sorted(enumerate(counts.items()), key=lambda item: (-item[1][1], item[0]))
    pairs = [pair for _, pair in ranked]
    return pairs if limit is None else pairs[:limit]


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def top_key(counts: dict[K, int]) -> K | None:
    ranked = rank_counts(counts, 1)
    return ranked[0][0] if ranked else None


def mark_one_sided_days(daily_breakdown: dict[date, dict[str, int]], users: dict[str, UserAggregate]) -> None:
    for sender_counts in daily_breakdown.values():
        total = sum(sender_counts.values())
        if total <= ONE_SIDED_MIN_MESSAGES:
            continue
        for sender, count in sender_counts.items():
            if count / total > ONE_SIDED_SHARE and sender in users:
                users[sender].one_sided_days += 1


def most_repeated_phrase(phrases: dict[str, PhraseTally]) -> RepeatedPhrase | None:
    best_phrase: str | None = None
    best: PhraseTally | None = None
    for phrase, tally in phrases.items():
        if tally.count <= PHRASE_MIN_COUNT:
            continue
        if best is None or tally.count > best.count:
            best_phrase, best = phrase, tally
    if best is None or best_phrase is None:
        return None
    return RepeatedPhrase(phrase=best_phrase, count=best.count, top_user=top_key(best.senders) or "")


def longest_streak(active_days: list[date]) -> int:
    longest = current = 0
    previous: date | None = None
    for day in sorted(set(active_days)):
        if previous is not None and (day - previous).days <= STREAK_GAP_DAYS:
            current += 1
        else:
            current = 1
        longest = max(longest, current)
        previous = day
    return longest

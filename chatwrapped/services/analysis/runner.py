import logging
from typing import Sequence

from chatwrapped.core.config import get_settings
from chatwrapped.schemas.report import AnalysisResult, YearComparison
from chatwrapped.services.analysis.engine import AnalyticsEngine
from chatwrapped.services.parsing.types import Message

logger = logging.getLogger(__name__)


def available_years(messages: Sequence[Message]) -> list[int]:
    return sorted({m.timestamp.year for m in messages}, reverse=True)


def filter_year(messages: Sequence[Message], year: int | None) -> list[Message]:
    if year is None:
        return list(messages)
    return [m for m in messages if m.timestamp.year == year]


def analyze(
    messages: Sequence[Message],
    year_filter: int | None = None,
    engine: AnalyticsEngine | None = None,
) -> AnalysisResult:
    """Summarise a parsed chat, optionally restricted to one calendar year.

    Pure with respect to its inputs: the same list and filter give an equal
    result. An empty selection yields the zero-valued result.
    """
    if engine is None:
        engine = AnalyticsEngine(top_n=get_settings().top_n)
    selected = filter_year(messages, year_filter)
    if year_filter is not None:
        logger.debug("Year %s selected %d of %d messages", year_filter, len(selected), len(messages))
    return engine.run(selected, available_years(messages))


def compare_years(
    messages: Sequence[Message],
    base_year: int,
    target_year: int,
    engine: AnalyticsEngine | None = None,
) -> YearComparison:
    base = analyze(messages, base_year, engine)
    target = analyze(messages, target_year, engine)
    growth = None
    if target.total_messages:
        growth = round((base.total_messages - target.total_messages) / target.total_messages * 100, 1)
    return YearComparison(
        base_year=base_year,
        target_year=target_year,
        base=base,
        target=target,
        message_growth_percent=growth,
    )

from chatwrapped.schemas.report import (
    ActiveDate,
    AnalysisResult,
    BurstStats,
    DateRange,
    DayNightSplit,
    EmojiCount,
    LongestMessage,
    RapidFire,
    RepeatedPhrase,
    SilenceBreaker,
    UserStat,
    WordCount,
    YearComparison,
)

__all__ = [
    "AnalysisResult",
    "UserStat",
    "EmojiCount",
    "WordCount",
    "DateRange",
    "ActiveDate",
    "BurstStats",
    "RapidFire",
    "DayNightSplit",
    "LongestMessage",
    "RepeatedPhrase",
    "SilenceBreaker",
    "YearComparison",
]

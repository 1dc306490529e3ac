from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class EmojiCount(FrozenModel):
    char: str
    count: int


class WordCount(FrozenModel):
    word: str
    count: int


class UserStat(FrozenModel):
    name: str
    message_count: int
    word_count: int
    avg_length: int
    emojis: tuple[EmojiCount, ...] = ()
    top_words: tuple[WordCount, ...] = ()
    avg_reply_time_minutes: int = 0
    morning_count: int = 0
    night_count: int = 0
    bye_count: int = 0
    text_message_count: int = 0
    emoji_message_count: int = 0
    media_message_count: int = 0
    short_message_count: int = 0
    long_message_count: int = 0
    one_sided_days_count: int = 0


class DateRange(FrozenModel):
    start: datetime
    end: datetime


class ActiveDate(FrozenModel):
    day: date | None = None
    count: int = 0


class BurstStats(FrozenModel):
    count: int = 0
    max_burst: int = 0


class RapidFire(FrozenModel):
    max_in_minute: int = 0
    max_in_hour: int = 0
    max_in_day: int = 0


class DayNightSplit(FrozenModel):
    day: int = 0
    night: int = 0


class LongestMessage(FrozenModel):
    content: str = ""
    sender: str = ""
    timestamp: datetime | None = None
    word_count: int = 0


class RepeatedPhrase(FrozenModel):
    phrase: str
    count: int
    top_user: str


class SilenceBreaker(FrozenModel):
    name: str = ""
    max_silence_hours: int = 0


class AnalysisResult(FrozenModel):
    total_messages: int = 0
    date_range: DateRange | None = None
    users: tuple[UserStat, ...] = ()
    active_users_count: int = 0
    longest_streak: int = 0
    most_active_date: ActiveDate = Field(default_factory=ActiveDate)
    busiest_hour: int = 0
    top_starter: str = ""
    hourly_heatmap: tuple[int, ...] = (0,) * 24
    # Sunday = 0
    day_of_week_stats: tuple[int, ...] = (0,) * 7
    burst_stats: BurstStats = Field(default_factory=BurstStats)
    longest_message: LongestMessage = Field(default_factory=LongestMessage)
    most_repeated_phrase: RepeatedPhrase | None = None
    silence_breaker: SilenceBreaker = Field(default_factory=SilenceBreaker)
    year_options: tuple[int, ...] = ()
    rapid_fire: RapidFire = Field(default_factory=RapidFire)
    day_night_split: DayNightSplit = Field(default_factory=DayNightSplit)
    word_occurrences: dict[str, dict[str, int]] = Field(default_factory=dict)
    conversation_starts: dict[str, int] = Field(default_factory=dict)
    silence_break_counts: dict[str, int] = Field(default_factory=dict)


class YearComparison(FrozenModel):
    base_year: int
    target_year: int
    base: AnalysisResult
    target: AnalysisResult
    message_growth_percent: float | None = None

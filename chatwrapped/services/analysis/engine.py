import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Iterable, Sequence

from chatwrapped.schemas.report import (
    ActiveDate,
    AnalysisResult,
    BurstStats,
    DateRange,
    DayNightSplit,
    EmojiCount,
    LongestMessage,
    RapidFire,
    SilenceBreaker,
    UserStat,
    WordCount,
)
from chatwrapped.services.analysis.features import LONG_MESSAGE_WORDS, SHORT_MESSAGE_WORDS, extract_message_features
from chatwrapped.services.analysis.highlights import (
    longest_streak,
    mark_one_sided_days,
    most_repeated_phrase,
    rank_counts,
    round_half_up,
    top_key,
)
from chatwrapped.services.analysis.types import ContentKind, MessageFeatures, PhraseTally, UserAggregate
from chatwrapped.services.analysis.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from chatwrapped.services.parsing.types import Message

logger = logging.getLogger(__name__)

BURST_GAP_SECONDS = 60
BURST_MIN_LENGTH = 5
REPLY_WINDOW_MINUTES = 6 * 60
SILENCE_GAP_SECONDS = 6 * 3600
DAYTIME_HOURS = range(6, 18)


class AnalysisPass:
    """State for one left-to-right walk over a message list."""

    def __init__(self, vocabulary: Vocabulary, top_n: int) -> None:
        self.vocabulary = vocabulary
        self.top_n = top_n
        self.users: dict[str, UserAggregate] = {}
        self.total = 0
        self.first_ts: datetime | None = None
        self.previous: Message | None = None

        self.hourly = [0] * 24
        # Sunday = 0
        self.weekday = [0] * 7
        self.day_count = 0
        self.night_count = 0

        self.daily_breakdown: dict[date, dict[str, int]] = defaultdict(dict)
        self.per_day: dict[date, int] = defaultdict(int)
        self.per_hour: dict[datetime, int] = defaultdict(int)
        self.per_minute: dict[datetime, int] = defaultdict(int)

        self.word_occurrences: dict[str, dict[str, int]] = {}
        self.phrases: dict[str, PhraseTally] = {}
        self.longest: LongestMessage = LongestMessage()

        self.current_burst = 0
        self.burst_count = 0
        self.max_burst = 0

        self.starts: dict[str, int] = {}
        self.silence_breaks: dict[str, int] = {}
        self.max_silence_hours = 0.0

    def feed(self, message: Message) -> None:
        user = self.users.get(message.sender)
        if user is None:
            user = self.users[message.sender] = UserAggregate()
        user.message_count += 1
        self.total += 1
        if self.first_ts is None:
            self.first_ts = message.timestamp

        features = extract_message_features(message.content, self.vocabulary)
        if features.kind is ContentKind.MEDIA:
            user.media_count += 1
        elif features.kind is ContentKind.SYSTEM:
            user.system_count += 1
        else:
            self._record_text(message, user, features)

        gap = (message.timestamp - self.previous.timestamp).total_seconds() if self.previous else None
        self._record_burst(gap)
        self._record_reply(message, user, gap)
        self._record_restart(message, gap)
        self._record_time(message)
        self.previous = message

    def _record_text(self, message: Message, user: UserAggregate, features: MessageFeatures) -> None:
        words = features.word_count
        user.word_count += words
        if words > self.longest.word_count:
            self.longest = LongestMessage(
                content=message.content, sender=message.sender, timestamp=message.timestamp, word_count=words
            )
        if words <= SHORT_MESSAGE_WORDS:
            user.short_count += 1
        if words >= LONG_MESSAGE_WORDS:
            user.long_count += 1

        if features.emojis:
            user.emoji_message_count += 1
            for char in features.emojis:
                user.emojis[char] = user.emojis.get(char, 0) + 1
        else:
            user.text_only_count += 1

        for word in features.content_words:
            user.words[word] = user.words.get(word, 0) + 1
            by_sender = self.word_occurrences.setdefault(word, {})
            by_sender[message.sender] = by_sender.get(message.sender, 0) + 1

        for phrase in features.phrases:
            tally = self.phrases.get(phrase)
            if tally is None:
                tally = self.phrases[phrase] = PhraseTally()
            tally.count += 1
            tally.senders[message.sender] = tally.senders.get(message.sender, 0) + 1

        user.morning_count += features.morning
        user.night_count += features.night
        user.bye_count += features.farewell

    def _record_burst(self, gap: float | None) -> None:
        if gap is not None and gap < BURST_GAP_SECONDS:
            self.current_burst += 1
            return
        self._close_burst()
        self.current_burst = 1

    def _close_burst(self) -> None:
        if self.current_burst > BURST_MIN_LENGTH:
            self.burst_count += 1
            self.max_burst = max(self.max_burst, self.current_burst)

    def _record_reply(self, message: Message, user: UserAggregate, gap: float | None) -> None:
        if gap is None or self.previous is None or self.previous.sender == message.sender:
            return
        minutes = gap / 60
        if minutes < REPLY_WINDOW_MINUTES:
            user.reply_minutes.append(minutes)

    def _record_restart(self, message: Message, gap: float | None) -> None:
        if gap is not None and gap <= SILENCE_GAP_SECONDS:
            return
        self.starts[message.sender] = self.starts.get(message.sender, 0) + 1
        if gap is not None:
            self.silence_breaks[message.sender] = self.silence_breaks.get(message.sender, 0) + 1
            self.max_silence_hours = max(self.max_silence_hours, gap / 3600)

    def _record_time(self, message: Message) -> None:
        ts = message.timestamp
        self.hourly[ts.hour] += 1
        self.weekday[(ts.weekday() + 1) % 7] += 1
        if ts.hour in DAYTIME_HOURS:
            self.day_count += 1
        else:
            self.night_count += 1

        day = ts.date()
        self.per_day[day] += 1
        self.per_hour[ts.replace(minute=0, second=0, microsecond=0)] += 1
        self.per_minute[ts.replace(second=0, microsecond=0)] += 1
        senders = self.daily_breakdown[day]
        senders[message.sender] = senders.get(message.sender, 0) + 1

    def finish(self, year_options: Sequence[int] = ()) -> AnalysisResult:
        if not self.total or self.previous is None or self.first_ts is None:
            return AnalysisResult(year_options=tuple(year_options))

        self._close_burst()
        mark_one_sided_days(self.daily_breakdown, self.users)

        busiest_day = top_key(self.per_day)
        ranked_users = sorted(self.users.items(), key=lambda item: -item[1].message_count)
        busiest_hour = max(range(24), key=lambda hour: (self.hourly[hour], -hour))
        top_starter = top_key(self.starts) or ""
        silence_breaker = top_key(self.silence_breaks) or ""

        return AnalysisResult(
            total_messages=self.total,
            date_range=DateRange(start=self.first_ts, end=self.previous.timestamp),
            users=tuple(self._user_stat(name, aggregate) for name, aggregate in ranked_users),
            active_users_count=len(self.users),
            longest_streak=longest_streak(list(self.per_day)),
            most_active_date=ActiveDate(day=busiest_day, count=self.per_day[busiest_day] if busiest_day else 0),
            busiest_hour=busiest_hour,
            top_starter=top_starter,
            hourly_heatmap=tuple(self.hourly),
            day_of_week_stats=tuple(self.weekday),
            burst_stats=BurstStats(count=self.burst_count, max_burst=self.max_burst),
            longest_message=self.longest,
            most_repeated_phrase=most_repeated_phrase(self.phrases),
            silence_breaker=SilenceBreaker(name=silence_breaker, max_silence_hours=round_half_up(self.max_silence_hours)),
            year_options=tuple(year_options),
            rapid_fire=RapidFire(
                max_in_minute=max(self.per_minute.values()),
                max_in_hour=max(self.per_hour.values()),
                max_in_day=max(self.per_day.values()),
            ),
            day_night_split=DayNightSplit(day=self.day_count, night=self.night_count),
            word_occurrences=self.word_occurrences,
            conversation_starts=dict(self.starts),
            silence_break_counts=dict(self.silence_breaks),
        )

    def _user_stat(self, name: str, user: UserAggregate) -> UserStat:
        non_media = user.non_media_count
        replies = user.reply_minutes
        return UserStat(
            name=name,
            message_count=user.message_count,
            word_count=user.word_count,
            avg_length=round_half_up(user.word_count / non_media) if non_media else 0,
            emojis=tuple(EmojiCount(char=char, count=count) for char, count in rank_counts(user.emojis, self.top_n)),
            top_words=tuple(WordCount(word=word, count=count) for word, count in rank_counts(user.words, self.top_n)),
            avg_reply_time_minutes=round_half_up(sum(replies) / len(replies)) if replies else 0,
            morning_count=user.morning_count,
            night_count=user.night_count,
            bye_count=user.bye_count,
            text_message_count=user.text_only_count,
            emoji_message_count=user.emoji_message_count,
            media_message_count=user.media_count,
            short_message_count=user.short_count,
            long_message_count=user.long_count,
            one_sided_days_count=user.one_sided_days,
        )


class AnalyticsEngine:
    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY, top_n: int = 3) -> None:
        self.vocabulary = vocabulary
        self.top_n = top_n

    def run(self, messages: Iterable[Message], year_options: Sequence[int] = ()) -> AnalysisResult:
        state = AnalysisPass(self.vocabulary, self.top_n)
        for message in messages:
            state.feed(message)
        result = state.finish(year_options)
        logger.info(
            "Analyzed %d messages from %d senders (%d bursts)",
            result.total_messages,
            result.active_users_count,
            result.burst_stats.count,
        )
        return result

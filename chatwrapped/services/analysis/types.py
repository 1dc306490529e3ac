from dataclasses import dataclass, field
from enum import Enum


class ContentKind(str, Enum):
    TEXT = "text"
    MEDIA = "media"
    SYSTEM = "system"


@dataclass(slots=True)
class MessageFeatures:
    kind: ContentKind
    word_count: int = 0
    emojis: list[str] = field(default_factory=list)
    content_words: list[str] = field(default_factory=list)
    phrases: list[str] = field(default_factory=list)
    morning: bool = False
    night: bool = False
    farewell: bool = False


@dataclass(slots=True)
class UserAggregate:
    message_count: int = 0
    word_count: int = 0
    emojis: dict[str, int] = field(default_factory=dict)
    words: dict[str, int] = field(default_factory=dict)
    reply_minutes: list[float] = field(default_factory=list)
    morning_count: int = 0
    night_count: int = 0
    bye_count: int = 0
    text_only_count: int = 0
    emoji_message_count: int = 0
    media_count: int = 0
    system_count: int = 0
    short_count: int = 0
    long_count: int = 0
    one_sided_days: int = 0

    @property
    def non_media_count(self) -> int:
        return self.message_count - self.media_count


@dataclass(slots=True)
class PhraseTally:
    count: int = 0
    senders: dict[str, int] = field(default_factory=dict)

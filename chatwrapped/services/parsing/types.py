from dataclasses import dataclass, field
from datetime import datetime


class ParseFailure(ValueError):
    """Whole-file failure: the transcript could not be read at all."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Message:
    timestamp: datetime
    sender: str
    content: str


@dataclass(slots=True)
class MessageBuilder:
    """Open message that may still receive continuation lines."""

    timestamp: datetime
    sender: str
    lines: list[str] = field(default_factory=list)

    def append(self, line: str) -> None:
        self.lines.append(line)

    def build(self) -> Message:
        return Message(timestamp=self.timestamp, sender=self.sender, content="\n".join(self.lines))


@dataclass(slots=True)
class ParsedChat:
    participants: list[str]
    messages: list[Message]
    summary: dict

import logging
import re
from datetime import datetime

from chatwrapped.core.config import get_settings
from chatwrapped.services.parsing.date_order import DateOrder, detect_date_order, resolve_components
from chatwrapped.services.parsing.grammar import match_prefix, split_date, split_time
from chatwrapped.services.parsing.types import Message, MessageBuilder, ParsedChat, ParseFailure

logger = logging.getLogger(__name__)

DIRECTIONAL_MARKS_RE = re.compile("[\u200e\u200f\u202a-\u202e\u2066-\u2069]")
LINE_BREAK_RE = re.compile(r"\r?\n")

SYSTEM_SENDERS = {"whatsapp"}
SYSTEM_NOTICE_MARKERS = ("end-to-end encrypted",)


def _split_lines(raw_text: str) -> list[str]:
    text = raw_text.lstrip("\ufeff")
    lines = LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return [DIRECTIONAL_MARKS_RE.sub("", line) for line in lines]


def _build_timestamp(date_token: str, time_token: str, order: DateOrder) -> datetime | None:
    try:
        year, month, day = resolve_components(*split_date(date_token), order)
        hour, minute, second, meridiem = split_time(time_token)
        if meridiem == "p" and hour < 12:
            hour += 12
        elif meridiem == "a" and hour == 12:
            hour = 0
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None


def _is_system_notice(sender: str, content: str) -> bool:
    if sender.lower() in SYSTEM_SENDERS:
        return True
    lowered = content.lower()
    return any(marker in lowered for marker in SYSTEM_NOTICE_MARKERS)


def sample_date_order(lines: list[str], default: DateOrder, sample_size: int) -> DateOrder:
    tokens: list[str] = []
    for line in lines:
        prefix = match_prefix(line)
        if prefix is None:
            continue
        tokens.append(prefix.date)
        if len(tokens) >= sample_size:
            break
    return detect_date_order(tokens, default)


def parse_whatsapp_text(raw_text: str, default_order: DateOrder | None = None) -> ParsedChat:
    if not raw_text or not raw_text.strip():
        raise ParseFailure("File is empty")

    settings = get_settings()
    if default_order is None:
        default_order = DateOrder(settings.default_date_order)

    lines = _split_lines(raw_text)
    order = sample_date_order(lines, default_order, settings.date_order_sample_size)

    messages: list[Message] = []
    participants: set[str] = set()
    current: MessageBuilder | None = None
    skipped = 0

    for line in lines:
        prefix = match_prefix(line)
        timestamp = _build_timestamp(prefix.date, prefix.time, order) if prefix else None

        if timestamp is None:
            if current is not None:
                current.append(line)
            else:
                skipped += 1
            continue

        if current is not None:
            messages.append(current.build())
            current = None

        remainder = line[prefix.end :]
        sender, separator, content = remainder.partition(":")
        sender, content = sender.strip(), content.strip()
        if not separator or _is_system_notice(sender, content):
            skipped += 1
            continue

        current = MessageBuilder(timestamp=timestamp, sender=sender, lines=[content])
        participants.add(sender)

    if current is not None:
        messages.append(current.build())

    logger.info("Parsed %d messages from %d participants (%s, %d lines skipped)", len(messages), len(participants), order.value, skipped)
    return ParsedChat(
        participants=sorted(participants),
        messages=messages,
        summary={
            "message_count": len(messages),
            "participant_count": len(participants),
            "parser": "whatsapp_txt",
            "date_order": order.value,
            "skipped_lines": skipped,
        },
    )

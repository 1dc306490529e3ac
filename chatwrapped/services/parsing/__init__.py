from chatwrapped.services.parsing.date_order import DateOrder
from chatwrapped.services.parsing.types import Message, ParsedChat, ParseFailure
from chatwrapped.services.parsing.whatsapp import parse_whatsapp_text


def parse_transcript(raw_text: str, default_order: DateOrder | None = None) -> ParsedChat:
    return parse_whatsapp_text(raw_text, default_order)


def parse(raw_text: str, default_order: DateOrder | None = None) -> list[Message]:
    """Turn decoded transcript text into ordered messages.

    Raises ``ParseFailure`` only when the whole file is unusable; bad lines
    are skipped or folded into the previous message.
    """
    return parse_transcript(raw_text, default_order).messages


__all__ = ["DateOrder", "Message", "ParsedChat", "ParseFailure", "parse", "parse_transcript"]

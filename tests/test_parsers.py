from datetime import datetime

import pytest

from chatwrapped.services.parsing import DateOrder, ParseFailure, parse, parse_transcript


def test_parse_whatsapp(fixtures_dir):
    parsed = parse_transcript((fixtures_dir / "whatsapp_chat.txt").read_text(encoding="utf-8"))
    assert parsed.summary["message_count"] == 6
    assert parsed.summary["date_order"] == "day_first"
    assert parsed.summary["skipped_lines"] == 2
    assert parsed.participants == ["Alice", "Bob"]
    assert parsed.messages[0].timestamp == datetime(2024, 1, 13, 8, 15)
    assert parsed.messages[2].content == "sure\nsee you at the cafe"
    assert parsed.messages[-1].content == "This message was deleted"


def test_parse_bracketed_month_first(fixtures_dir):
    parsed = parse_transcript((fixtures_dir / "ios_chat.txt").read_text(encoding="utf-8"))
    assert parsed.summary["message_count"] == 5
    assert parsed.summary["date_order"] == "month_first"
    assert parsed.messages[0].timestamp == datetime(2023, 1, 15, 21, 5, 12)
    assert parsed.messages[3].content == "image omitted"
    assert parsed.messages[4].timestamp == datetime(2023, 1, 16, 0, 30)


def test_minimal_two_line_chat():
    messages = parse("12/05/23, 9:00 - Alice: hello\n12/05/23, 9:01 - Bob: hi there")
    assert [(m.sender, m.content) for m in messages] == [("Alice", "hello"), ("Bob", "hi there")]
    assert messages[0].timestamp == datetime(2023, 5, 12, 9, 0)


def test_continuation_line_joins_previous_message():
    messages = parse("12/05/23, 9:00 - Alice: first line\nsecond line")
    assert len(messages) == 1
    assert messages[0].content == "first line\nsecond line"


def test_round_trip_keeps_embedded_newlines():
    content = "line one\nline two\n\n  indented four"
    original = parse(f"20/05/23, 18:30 - Alice: {content}\n20/05/23, 18:31 - Bob: ok")
    serialized = "\n".join(f"{m.timestamp:%d/%m/%Y, %H:%M} - {m.sender}: {m.content}" for m in original)
    reparsed = parse(serialized)
    assert [m.content for m in reparsed] == [content, "ok"]
    assert [m.timestamp for m in reparsed] == [m.timestamp for m in original]


def test_status_lines_are_dropped_and_clear_current():
    raw = "\n".join(
        [
            "stray text before anything",
            "14/01/2024, 10:00 - Alice: hi",
            "14/01/2024, 10:01 - Bob joined using this group's invite link",
            "orphan line after status",
            "14/01/2024, 10:02 - Bob: hello",
        ]
    )
    parsed = parse_transcript(raw)
    assert [m.content for m in parsed.messages] == ["hi", "hello"]
    assert parsed.summary["skipped_lines"] == 3


def test_encryption_notice_with_sender_is_dropped():
    raw = "[13/01/24, 10:00:00] Group: Messages and calls are end-to-end encrypted.\n[13/01/24, 10:01:00] Alice: yo"
    messages = parse(raw)
    assert [m.sender for m in messages] == ["Alice"]


def test_invalid_calendar_date_becomes_continuation():
    messages = parse("14/01/2024, 10:00 - Alice: hi\n32/01/2024, 10:05 - Bob: not a real day")
    assert len(messages) == 1
    assert messages[0].content == "hi\n32/01/2024, 10:05 - Bob: not a real day"


def test_meridiem_conversion():
    raw = "\n".join(
        [
            "[13/01/24, 12:05:00 AM] Alice: after midnight",
            "[13/01/24, 12:10:00 PM] Alice: noon",
            "[13/01/24, 1:15:00 pm] Alice: afternoon",
        ]
    )
    hours = [m.timestamp.hour for m in parse(raw)]
    assert hours == [0, 12, 13]


def test_year_first_and_dotted_time():
    messages = parse("2024-03-05, 9.30 - Alice: early\n2024-03-05, 21.45 - Bob: late")
    assert messages[0].timestamp == datetime(2024, 3, 5, 9, 30)
    assert messages[1].timestamp == datetime(2024, 3, 5, 21, 45)


def test_ambiguous_dates_follow_injected_default():
    raw = "01/02/24, 10:00 - Alice: hi"
    assert parse(raw)[0].timestamp == datetime(2024, 2, 1, 10, 0)
    assert parse(raw, DateOrder.MONTH_FIRST)[0].timestamp == datetime(2024, 1, 2, 10, 0)


def test_ambiguous_dates_follow_configured_default(monkeypatch):
    monkeypatch.setenv("DEFAULT_DATE_ORDER", "month_first")
    assert parse("01/02/24, 10:00 - Alice: hi")[0].timestamp == datetime(2024, 1, 2, 10, 0)


def test_directional_marks_are_stripped():
    messages = parse("\u200e[13/01/24, 10:00:00] Alice: \u200ehello\u200f")
    assert messages[0].content == "hello"


def test_crlf_and_trailing_newline():
    messages = parse("13/01/24, 10:00 - Alice: hi\r\nthere\r\n")
    assert messages[0].content == "hi\nthere"


def test_unrecognised_text_yields_no_messages():
    assert parse("just some notes\nwith no timestamps") == []


@pytest.mark.parametrize("raw", ["", "   \n\n"])
def test_empty_input_fails(raw):
    with pytest.raises(ParseFailure) as exc_info:
        parse(raw)
    assert exc_info.value.reason == "File is empty"

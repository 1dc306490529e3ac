import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest

os.environ["ENVIRONMENT"] = "test"
os.environ["DEFAULT_DATE_ORDER"] = "day_first"

from chatwrapped.core.config import get_settings
from chatwrapped.services.parsing.types import Message

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def make_message():
    def _make(ts: datetime, sender: str, content: str = "hello there") -> Message:
        return Message(timestamp=ts, sender=sender, content=content)

    return _make


@pytest.fixture()
def spaced_messages(make_message):
    """Build messages from ``(sender, content)`` pairs spaced ``step`` apart."""

    def _build(rows, start: datetime, step: timedelta) -> list[Message]:
        return [make_message(start + step * idx, sender, content) for idx, (sender, content) in enumerate(rows)]

    return _build

import asyncio
import logging
from pathlib import Path

from chatwrapped.core.config import get_settings
from chatwrapped.services.parsing.types import ParseFailure

logger = logging.getLogger(__name__)

ALLOWED_SUFFIXES = {".txt"}


def _read_bytes(path: Path, max_bytes: int) -> bytes:
    with path.open("rb") as handle:
        data = handle.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ParseFailure("File exceeds max size")
    return data


async def read_transcript(path: str | Path) -> str:
    """Load a whole transcript off the event loop and decode it as UTF-8."""
    settings = get_settings()
    source = Path(path)
    if source.suffix.lower() not in ALLOWED_SUFFIXES:
        raise ParseFailure(f"Unsupported file type: {source.suffix or 'none'}")
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    try:
        data = await asyncio.to_thread(_read_bytes, source, max_bytes)
    except OSError as exc:
        raise ParseFailure("Failed to read file") from exc
    if not data.strip():
        raise ParseFailure("File is empty")
    logger.info("Read transcript of %d bytes", len(data))
    return data.decode("utf-8-sig", errors="replace")

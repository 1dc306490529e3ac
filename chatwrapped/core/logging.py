import logging

from chatwrapped.core.config import get_settings


class PrivacyFilter(logging.Filter):
    """Drop chat content from structured logs."""

    BLOCKED_KEYS = {"content", "text", "raw_line", "sender"}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.BLOCKED_KEYS:
            if hasattr(record, key):
                setattr(record, key, "[REDACTED]")
        return True


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    root = logging.getLogger()
    for handler in root.handlers:
        if not any(isinstance(f, PrivacyFilter) for f in handler.filters):
            handler.addFilter(PrivacyFilter())
    logging.getLogger(__name__).info("Logging configured for %s (%s)", settings.app_name, settings.environment)

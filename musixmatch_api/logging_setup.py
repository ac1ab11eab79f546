from __future__ import annotations

import logging
import os
import re

# requests hands the full URL (apikey included) to urllib3, which logs it at DEBUG
_API_KEY_PARAM = re.compile(r"(apikey=)[^&\s\"']+")


def redact_api_key(text: str) -> str:
    return _API_KEY_PARAM.sub(r"\1***", text)


class ApiKeyRedactor(logging.Filter):
    """Masks ``apikey=...`` in any record passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    # Allow env override for e.g. scripted runs
    level_name = os.getenv("MUSIXMATCH_LOG_LEVEL")
    if level_name:
        try:
            level = getattr(logging, level_name.upper())
        except AttributeError:
            pass

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # Handler filters also see records propagated from third-party loggers
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, ApiKeyRedactor) for f in handler.filters):
            handler.addFilter(ApiKeyRedactor())

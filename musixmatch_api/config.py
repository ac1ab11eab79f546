from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import MusixmatchTypeError

API_VERSION = "1.1"
BASE_URL = f"https://api.musixmatch.com/ws/{API_VERSION}/"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str | None
    base_url: str
    timeout_s: float


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise MusixmatchTypeError(f"Invalid {name}: expected a number of seconds, got {raw!r}") from None


def load_config() -> ClientConfig:
    return ClientConfig(
        api_key=os.getenv("MUSIXMATCH_API_KEY") or None,
        base_url=os.getenv("MUSIXMATCH_BASE_URL") or BASE_URL,
        timeout_s=_env_float("MUSIXMATCH_TIMEOUT", "10.0"),
    )

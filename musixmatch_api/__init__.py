from __future__ import annotations

from .client import MusixmatchAPI
from .config import API_VERSION, BASE_URL, ClientConfig, load_config
from .errors import (
    ErrorKind,
    MusixmatchAPIError,
    MusixmatchError,
    MusixmatchRangeError,
    MusixmatchReferenceError,
    MusixmatchSyntaxError,
    MusixmatchTypeError,
)
from .formatting import format_latency
from .status import describe_status
from .types import ChartName, Identifier, TrackId, TrackNames

__version__ = "0.1.0"

__all__ = [
    "API_VERSION",
    "BASE_URL",
    "ChartName",
    "ClientConfig",
    "ErrorKind",
    "Identifier",
    "MusixmatchAPI",
    "MusixmatchAPIError",
    "MusixmatchError",
    "MusixmatchRangeError",
    "MusixmatchReferenceError",
    "MusixmatchSyntaxError",
    "MusixmatchTypeError",
    "TrackId",
    "TrackNames",
    "describe_status",
    "format_latency",
    "load_config",
]

from __future__ import annotations

_LABELS: dict[int, str] = {
    400: "Bad Request",
    401: "Invalid API Key",
    404: "Resource Not Found",
    405: "Method Not Allowed",
    429: "Too Many Requests",
    500: "Server Error",
    503: "Server Busy",
}

UNKNOWN = "[000] Unknown Error"


def describe_status(status_code: object) -> str:
    """Map an HTTP status code to a label like ``[401] Invalid API Key``."""
    # bool is an int subclass; True must not pass for 1
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        return UNKNOWN
    label = _LABELS.get(status_code)
    if label is None:
        return UNKNOWN
    return f"[{status_code}] {label}"

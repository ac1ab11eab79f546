from __future__ import annotations

_UNITS = ("ms", "s", "min")


def format_latency(latency_ms: float) -> str:
    """Render a latency like ``12.34ms`` or ``1.50s``; the sign is dropped."""
    value = abs(latency_ms)
    unit = 0
    while value >= 1000 and unit < len(_UNITS) - 1:
        value /= 1000
        unit += 1
    return f"{value:.2f}{_UNITS[unit]}"

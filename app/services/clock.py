from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    """Reads the host's wall clock. Always returns a UTC-aware datetime."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def render_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with second precision, e.g. ``2024-01-01T00:00:00Z``.

    Naive datetimes are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc).replace(microsecond=0)
    return utc.isoformat().replace("+00:00", "Z")


system_clock = SystemClock()


def get_clock() -> SystemClock:
    return system_clock

import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from bot.config.constants import REMINDER_LEAD_MINUTES


TIME_WINDOW_PATTERN = re.compile(
    r"^([01]?\d|2[0-3]):([0-5]\d)-([01]?\d|2[0-3]):([0-5]\d)$"
)


def is_valid_time_window(value):
    """Check `HH:MM-HH:MM` syntax (one- or two-digit hours)."""
    if not isinstance(value, str):
        return False
    return TIME_WINDOW_PATTERN.match(value) is not None


@dataclass(frozen=True)
class TimeWindow:
    """A daily window as typed by the user, e.g. `10:00-11:00`.

    Only the syntax is validated; `end` may be earlier than `start`.
    """

    raw: str
    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int

    @classmethod
    def parse(cls, value):
        match = TIME_WINDOW_PATTERN.match(value) if isinstance(value, str) else None
        if match is None:
            raise ValueError(f"Invalid time window (expected HH:MM-HH:MM): {value!r}")
        start_hour, start_minute, end_hour, end_minute = (
            int(group) for group in match.groups()
        )
        return cls(value, start_hour, start_minute, end_hour, end_minute)

    def __str__(self):
        return self.raw


def next_reminder_time(
    start_hour, start_minute, reference_now, lead_minutes=REMINDER_LEAD_MINUTES
):
    """Return the next wall-clock moment `lead_minutes` before `start_hour:start_minute`.

    The candidate is built on the day of `reference_now`; subtracting the lead
    time may roll it back into the previous day (00:05 -> 23:55). A candidate
    that is not strictly after `reference_now` moves forward one day at a time.
    """
    candidate = reference_now.replace(
        hour=start_hour, minute=start_minute, second=0, microsecond=0
    )
    candidate -= timedelta(minutes=lead_minutes)
    while candidate <= reference_now:
        candidate += timedelta(days=1)
    return candidate


def local_now(tz=None):
    """Naive wall-clock now, in `tz` when a pytz zone is configured."""
    if tz is None:
        return datetime.now()
    return datetime.now(tz).replace(tzinfo=None)


def seconds_until(fire_at, now, tz=None):
    """Real seconds between two naive wall-clock times, DST changes included.

    Both ends are pinned to `tz` (a pytz zone) or to the server's local zone
    before subtracting, so a night that loses an hour sleeps an hour less.
    """
    if tz is None:
        start, end = now.astimezone(), fire_at.astimezone()
    else:
        start, end = tz.localize(now), tz.localize(fire_at)
    return (end - start).total_seconds()

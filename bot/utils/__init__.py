from .time_windows import (
    TimeWindow,
    is_valid_time_window,
    local_now,
    next_reminder_time,
    seconds_until,
)
from .formatting import (
    build_reminder_text,
    build_windows_confirmation,
    build_windows_listing,
)
from .embed_builders import build_help_embed

__all__ = [
    "TimeWindow",
    "is_valid_time_window",
    "local_now",
    "next_reminder_time",
    "seconds_until",
    "build_reminder_text",
    "build_windows_confirmation",
    "build_windows_listing",
    "build_help_embed",
]

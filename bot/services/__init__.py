from .dispatcher import ChannelDispatcher
from .reminder_service import ReminderHandle, ReminderScheduler
from .window_service import (
    apply_set_windows,
    broadcast_target,
    clear_reminders,
    describe_windows,
    mirror_confirmation,
    parse_window_args,
)

__all__ = [
    "ChannelDispatcher",
    "ReminderHandle",
    "ReminderScheduler",
    "apply_set_windows",
    "broadcast_target",
    "clear_reminders",
    "describe_windows",
    "mirror_confirmation",
    "parse_window_args",
]

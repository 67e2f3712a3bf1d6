from bot.config.constants import WINDOW_SLOTS
from bot.utils.formatting import (
    FORMAT_ERROR_TEXT,
    USAGE_ERROR_TEXT,
    build_broadcast_text,
    build_clear_reminders_text,
    build_windows_confirmation,
    build_windows_listing,
)
from bot.utils.time_windows import TimeWindow, is_valid_time_window


def parse_window_args(args):
    """Validate set_windows arguments.

    Returns `{"ok": True, "morning": TimeWindow, "evening": TimeWindow | None}`
    or `{"ok": False, "error": <reply text>}`.
    """
    values = [str(arg).strip() for arg in (args or []) if str(arg).strip()]
    if not values or len(values) > 2:
        return {"ok": False, "error": USAGE_ERROR_TEXT}
    if not all(is_valid_time_window(value) for value in values):
        return {"ok": False, "error": FORMAT_ERROR_TEXT}

    windows = [TimeWindow.parse(value) for value in values]
    return {
        "ok": True,
        "morning": windows[0],
        "evening": windows[1] if len(windows) > 1 else None,
    }


def apply_set_windows(scheduler, chat_id, args):
    """Run the set_windows command: validate, store and re-arm, build the reply."""
    parsed = parse_window_args(args)
    if not parsed["ok"]:
        return parsed

    window_set = scheduler.set_windows(chat_id, parsed["morning"], parsed["evening"])
    return {"ok": True, "reply": build_windows_confirmation(window_set)}


def broadcast_target(chat_id, target_channel_id):
    """Channel to mirror a confirmation to, or None when it is the origin/unset."""
    if not target_channel_id:
        return None
    if str(target_channel_id) == str(chat_id):
        return None
    return target_channel_id


async def mirror_confirmation(dispatcher, chat_id, target_channel_id, reply):
    target = broadcast_target(chat_id, target_channel_id)
    if target is None:
        return False
    return await dispatcher.send(target, build_broadcast_text(reply))


def describe_windows(scheduler, chat_id):
    """Reply text for show_windows."""
    next_runs = {}
    for slot in WINDOW_SLOTS:
        handle = scheduler.reminder(chat_id, slot)
        if handle is not None:
            next_runs[slot] = handle.fire_at
    return build_windows_listing(scheduler.windows(chat_id), next_runs)


def clear_reminders(scheduler, chat_id):
    cancelled = scheduler.clear_chat(chat_id)
    return build_clear_reminders_text(cancelled)

from bot.config.constants import (
    BROADCAST_SUFFIX,
    REMINDER_LEAD_MINUTES,
    SLOT_DISPLAY_NAMES,
    SLOT_REMINDER_LABELS,
)


USAGE_ERROR_TEXT = (
    "❌ Укажите одно или два окна. Примеры:\n"
    "/set_windows 10:00-11:00\n"
    "/set_windows 10:00-11:00 18:00-19:00"
)
FORMAT_ERROR_TEXT = "❌ Неверный формат времени. Используйте: HH:MM-HH:MM"
NO_WINDOWS_TEXT = "ℹ️ Окна не установлены. Используйте /set_windows"


def build_reminder_text(slot, window):
    """Reminder sent `REMINDER_LEAD_MINUTES` before a window opens."""
    label = SLOT_REMINDER_LABELS[slot]
    return (
        f"⏰ Через {REMINDER_LEAD_MINUTES} минут начинается {label} окно PR "
        f"({window})! @all"
    )


def _window_lines(window_set, next_runs=None):
    lines = []
    for slot, window in window_set.items():
        line = f"{SLOT_DISPLAY_NAMES[slot]}: {window}"
        fire_at = (next_runs or {}).get(slot)
        if fire_at is not None:
            line += f" (напоминание {fire_at.strftime('%d.%m %H:%M')})"
        lines.append(line + "\n")
    return "".join(lines)


def build_windows_confirmation(window_set):
    """Reply for a successful set_windows."""
    return (
        "🕒 Установлены окна для PR:\n"
        + _window_lines(window_set)
        + f"\nЯ буду напоминать за {REMINDER_LEAD_MINUTES} минут до начала!"
    )


def build_windows_listing(window_set, next_runs=None):
    """Reply for show_windows; `next_runs` maps slot -> next reminder datetime."""
    if window_set is None or window_set.is_empty():
        return NO_WINDOWS_TEXT
    return "📅 Текущие окна:\n" + _window_lines(window_set, next_runs)


def build_broadcast_text(text):
    return text + BROADCAST_SUFFIX


def build_clear_reminders_text(cancelled_count):
    if not cancelled_count:
        return "ℹ️ Активных напоминаний нет."
    return (
        f"🔕 Напоминания остановлены ({cancelled_count}).\n"
        "Окна сохранены, включить снова: /set_windows"
    )

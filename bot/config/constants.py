REMINDER_LEAD_MINUTES = 10

MORNING = "morning"
EVENING = "evening"
WINDOW_SLOTS = (MORNING, EVENING)

# Tên buổi trong câu nhắc: "начинается утреннее окно PR"
SLOT_REMINDER_LABELS = {
    MORNING: "утреннее",
    EVENING: "вечернее",
}

SLOT_DISPLAY_NAMES = {
    MORNING: "☀️ Утро",
    EVENING: "🌙 Вечер",
}

BROADCAST_SUFFIX = "\n@all"

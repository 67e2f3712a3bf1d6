"""Tests for reply and reminder texts."""

from datetime import datetime

from bot.state.runtime import ChatWindowSet
from bot.utils.formatting import (
    NO_WINDOWS_TEXT,
    build_broadcast_text,
    build_reminder_text,
    build_windows_confirmation,
    build_windows_listing,
)
from bot.utils.time_windows import TimeWindow


def test_reminder_text_morning() -> None:
    assert build_reminder_text("morning", TimeWindow.parse("9:00-10:00")) == (
        "⏰ Через 10 минут начинается утреннее окно PR (9:00-10:00)! @all"
    )


def test_reminder_text_evening() -> None:
    assert build_reminder_text("evening", TimeWindow.parse("23:00-01:00")) == (
        "⏰ Через 10 минут начинается вечернее окно PR (23:00-01:00)! @all"
    )


def test_confirmation_evening_only_line_present_when_set() -> None:
    window_set = ChatWindowSet(morning=TimeWindow.parse("10:00-11:00"))
    assert build_windows_confirmation(window_set) == (
        "🕒 Установлены окна для PR:\n"
        "☀️ Утро: 10:00-11:00\n"
        "\nЯ буду напоминать за 10 минут до начала!"
    )


def test_listing_empty() -> None:
    assert build_windows_listing(None) == NO_WINDOWS_TEXT
    assert build_windows_listing(ChatWindowSet()) == NO_WINDOWS_TEXT


def test_listing_with_next_runs() -> None:
    window_set = ChatWindowSet(evening=TimeWindow.parse("18:00-19:00"))
    text = build_windows_listing(
        window_set, {"evening": datetime(2024, 1, 16, 17, 50)}
    )
    assert text == "📅 Текущие окна:\n🌙 Вечер: 18:00-19:00 (напоминание 16.01 17:50)\n"


def test_broadcast_suffix() -> None:
    assert build_broadcast_text("hi") == "hi\n@all"

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime

from bot.config.constants import REMINDER_LEAD_MINUTES, WINDOW_SLOTS
from bot.state.runtime import ChatRegistry
from bot.utils.formatting import build_reminder_text
from bot.utils.time_windows import local_now, next_reminder_time, seconds_until


logger = logging.getLogger(__name__)


def _current_task():
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


@dataclass
class ReminderHandle:
    """Live timer for one (chat_id, slot)."""

    chat_id: int
    slot: str
    window: object
    fire_at: datetime
    task: asyncio.Task

    def cancel(self):
        self.task.cancel()


class ReminderScheduler:
    """Per-chat daily reminders: one asyncio task per armed (chat_id, slot).

    Each slot goes Unset -> Armed -> (Fired -> Armed)* and back to Unset when
    its timer is cancelled. A fire re-reads the chat's current window: when
    the window changed since arming, the notification is dropped and the new
    window is armed instead.
    """

    def __init__(
        self,
        dispatcher,
        registry=None,
        now_func=None,
        lead_minutes=REMINDER_LEAD_MINUTES,
        tz=None,
    ):
        self.dispatcher = dispatcher
        self.registry = registry if registry is not None else ChatRegistry()
        self.tz = tz
        self._now = now_func or (lambda: local_now(self.tz))
        self.lead_minutes = lead_minutes
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def windows(self, chat_id):
        """Return the chat's ChatWindowSet, or None if the chat is unknown."""
        state = self.registry.get(chat_id)
        return state.windows if state is not None else None

    def reminder(self, chat_id, slot):
        state = self.registry.get(chat_id)
        if state is None:
            return None
        return state.reminders.get(slot)

    def active_reminders(self, chat_id):
        state = self.registry.get(chat_id)
        if state is None:
            return {}
        return dict(state.reminders)

    def set_windows(self, chat_id, morning, evening=None):
        """Replace both windows of a chat and re-arm its reminders."""
        state = self.registry.get_or_create(chat_id)
        for slot in WINDOW_SLOTS:
            self._cancel_slot(state, slot)

        state.windows.morning = morning
        state.windows.evening = evening

        for slot, window in state.windows.items():
            self.arm(chat_id, slot, window)
        return state.windows

    def arm(self, chat_id, slot, window, after=None):
        """Schedule the next reminder for `window`, replacing the slot's timer.

        `after` is a lower bound for the fire time: a re-arm passes the time it
        just fired for, so a clock that reads slightly early on wake-up cannot
        schedule the same occurrence twice.
        """
        if self._closed:
            logger.debug("Scheduler closed, not arming %s/%s", chat_id, slot)
            return None

        state = self.registry.get_or_create(chat_id)
        self._cancel_slot(state, slot)

        now = self._now()
        reference = now if after is None else max(now, after)
        fire_at = next_reminder_time(
            window.start_hour, window.start_minute, reference, self.lead_minutes
        )
        delay = max(0.0, seconds_until(fire_at, now, self.tz))
        task = asyncio.get_running_loop().create_task(
            self._wait_and_fire(chat_id, slot, window, delay, fire_at),
            name=f"reminder:{chat_id}:{slot}",
        )
        handle = ReminderHandle(chat_id, slot, window, fire_at, task)
        state.reminders[slot] = handle
        logger.info(
            "Armed %s reminder for chat %s (%s) at %s",
            slot,
            chat_id,
            window,
            fire_at.isoformat(timespec="minutes"),
        )
        return handle

    async def on_fire(self, chat_id, slot, scheduled_window, fired_at=None):
        """Handle a wake-up for `scheduled_window`, then re-arm the slot."""
        if self._closed:
            return False
        state = self.registry.get_or_create(chat_id)
        current_task = _current_task()
        current_window = state.windows.get(slot)

        if current_window != scheduled_window:
            logger.info(
                "Stale %s reminder for chat %s (%s -> %s), skipping",
                slot,
                chat_id,
                scheduled_window,
                current_window,
            )
            self._release(state, slot, current_task)
            if current_window is not None:
                self.arm(chat_id, slot, current_window)
            return False

        # Handle vẫn giữ trong lúc gửi để set_windows/clear_chat/shutdown huỷ được.
        text = build_reminder_text(slot, scheduled_window)
        try:
            delivered = await self.dispatcher.send(chat_id, text)
        except Exception:
            logger.exception("Dispatcher raised for chat %s (%s)", chat_id, slot)
            delivered = False

        if delivered:
            logger.info("Sent %s reminder to chat %s", slot, chat_id)
        else:
            logger.warning(
                "Reminder delivery failed for chat %s (%s), keeping schedule",
                chat_id,
                slot,
            )

        self._release(state, slot, current_task)
        self.arm(chat_id, slot, scheduled_window, after=fired_at)
        return delivered

    def clear_chat(self, chat_id):
        """Cancel every timer of a chat; stored windows are kept."""
        state = self.registry.get(chat_id)
        if state is None:
            return 0
        cancelled = 0
        for slot in list(state.reminders):
            if self._cancel_slot(state, slot):
                cancelled += 1
        if cancelled:
            logger.info("Cleared %d reminder(s) for chat %s", cancelled, chat_id)
        return cancelled

    def shutdown(self):
        """Cancel all timers of all chats and refuse further arming."""
        if self._closed:
            return 0
        self._closed = True
        cancelled = 0
        for chat_id in self.registry.chat_ids():
            cancelled += self.clear_chat(chat_id)
        logger.info("Reminder scheduler stopped, %d timer(s) cancelled", cancelled)
        return cancelled

    async def _wait_and_fire(self, chat_id, slot, window, delay, fire_at):
        try:
            await asyncio.sleep(delay)
            await self.on_fire(chat_id, slot, window, fired_at=fire_at)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Reminder task failed for chat %s (%s)", chat_id, slot)

    def _cancel_slot(self, state, slot):
        handle = state.reminders.pop(slot, None)
        if handle is None:
            return False
        if handle.task is not _current_task():
            handle.cancel()
        return True

    def _release(self, state, slot, task):
        handle = state.reminders.get(slot)
        if handle is not None and handle.task is task:
            del state.reminders[slot]

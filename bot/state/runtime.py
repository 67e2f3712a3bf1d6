from dataclasses import dataclass, field

from bot.config.constants import EVENING, MORNING, WINDOW_SLOTS


@dataclass
class ChatWindowSet:
    """Morning/evening windows configured for one chat (each may be None)."""

    morning: object = None
    evening: object = None

    def get(self, slot):
        if slot == MORNING:
            return self.morning
        if slot == EVENING:
            return self.evening
        raise KeyError(slot)

    def set(self, slot, window):
        if slot == MORNING:
            self.morning = window
        elif slot == EVENING:
            self.evening = window
        else:
            raise KeyError(slot)

    def items(self):
        """Yield `(slot, window)` for slots that have a window."""
        for slot in WINDOW_SLOTS:
            window = self.get(slot)
            if window is not None:
                yield slot, window

    def is_empty(self):
        return self.morning is None and self.evening is None


@dataclass
class ChatState:
    windows: ChatWindowSet = field(default_factory=ChatWindowSet)
    # slot -> ReminderHandle
    reminders: dict = field(default_factory=dict)


class ChatRegistry:
    """In-memory chat_id -> ChatState store for the lifetime of the process."""

    def __init__(self):
        self._states = {}

    def get_or_create(self, chat_id):
        state = self._states.get(chat_id)
        if state is None:
            state = ChatState()
            self._states[chat_id] = state
        return state

    def get(self, chat_id):
        return self._states.get(chat_id)

    def chat_ids(self):
        return list(self._states)

    def __contains__(self, chat_id):
        return chat_id in self._states

    def __len__(self):
        return len(self._states)

"""Pytest configuration and fixtures."""

import os
import sys
from datetime import datetime, timedelta

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bot.services.reminder_service import ReminderScheduler  # noqa: E402
from bot.state.runtime import ChatRegistry  # noqa: E402


class FakeClock:
    """Settable naive wall clock."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


class FakeDispatcher:
    """Records sends; can fail, raise, or move the clock past the fire time."""

    def __init__(self, clock=None, advance=None, result=True, exc=None):
        self.sent = []
        self.clock = clock
        self.advance = advance
        self.result = result
        self.exc = exc

    async def send(self, chat_id, text):
        self.sent.append((chat_id, text))
        if self.clock is not None and self.advance is not None:
            self.clock.now += self.advance
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 15, 9, 30, 0))


@pytest.fixture
def dispatcher(clock):
    return FakeDispatcher(clock=clock, advance=timedelta(minutes=1))


@pytest.fixture
def scheduler(dispatcher, clock):
    return ReminderScheduler(dispatcher, registry=ChatRegistry(), now_func=clock)

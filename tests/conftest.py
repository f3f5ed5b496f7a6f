from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from waterbot.context import AppContext
from waterbot.database import Base, build_session_factory
from waterbot.models import suggestion, user_settings, water_log  # noqa: F401

# a Wednesday; the week started on Sunday 2026-10-11
NOW = datetime(2026, 10, 14, 12, 0)


class FakeClock:
    def __init__(self, now: datetime):
        self.current = now

    def __call__(self) -> datetime:
        return self.current


class FakeBot:
    """Records send_message calls; raises for chat ids listed in ``fail_for``."""

    def __init__(self, fail_for=()):
        self.sent: list[SimpleNamespace] = []
        self.fail_for = set(fail_for)
        self._next_message_id = 1000

    async def send_message(self, chat_id, text, reply_markup=None, **kwargs):
        if chat_id in self.fail_for:
            raise RuntimeError("Forbidden: bot was blocked by the user")
        self._next_message_id += 1
        message = SimpleNamespace(
            message_id=self._next_message_id,
            chat_id=chat_id,
            text=text,
            reply_markup=reply_markup,
        )
        self.sent.append(message)
        return message


class FakeMessage:
    def __init__(self, user_id: int = 42, username: str | None = "alice", message_id: int = 1, html_text: str = ""):
        self.from_user = SimpleNamespace(id=user_id, username=username, full_name="Alice Liddell")
        self.message_id = message_id
        self.html_text = html_text
        self.answers: list[str] = []
        self.photos: list[tuple] = []
        self.edits: list[tuple] = []
        self.reply_markups: list = []

    async def answer(self, text, reply_markup=None, **kwargs):
        self.answers.append(text)
        self.reply_markups.append(reply_markup)

    async def answer_photo(self, photo, caption=None, **kwargs):
        self.photos.append((photo, caption))

    async def edit_text(self, text, reply_markup=None, **kwargs):
        self.edits.append((text, reply_markup))


class FakeCallback:
    def __init__(self, data: str, user_id: int, message: FakeMessage | None):
        self.data = data
        self.from_user = SimpleNamespace(id=user_id, username="alice", full_name="Alice Liddell")
        self.message = message
        self.answers: list[tuple] = []

    async def answer(self, text=None, show_alert=False, **kwargs):
        self.answers.append((text, show_alert))


@pytest.fixture
def sessions():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def clock():
    return FakeClock(NOW)


@pytest.fixture
def bot():
    return FakeBot()


@pytest.fixture
def ctx(sessions, clock, bot):
    return AppContext(bot=bot, sessions=sessions, clock=clock)

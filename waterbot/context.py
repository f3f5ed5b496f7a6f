from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

from aiogram import Bot
from sqlalchemy.orm import sessionmaker

if TYPE_CHECKING:
    from waterbot.scheduler import ReminderScheduler


@dataclass
class AppContext:
    """Process-wide collaborators, built once in main.py.

    Handlers get it as the ``ctx`` argument (dispatcher workflow data),
    the reminder scheduler at construction.
    """
    bot: Bot
    sessions: sessionmaker
    clock: Callable[[], datetime] = field(default=datetime.now)
    scheduler: Optional["ReminderScheduler"] = None

    def now(self) -> datetime:
        return self.clock()

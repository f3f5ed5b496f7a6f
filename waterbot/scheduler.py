from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.exc import SQLAlchemyError
from tzlocal import get_localzone

from waterbot.context import AppContext
from waterbot.services.reminders import is_due, send_reminder
from waterbot.services.users import get_active_reminders, mark_reminded

logger = logging.getLogger(__name__)

JOB_ID = "water_reminder_cycle"


@dataclass
class CycleResult:
    checked: int = 0
    sent: int = 0
    failed: int = 0


@dataclass(frozen=True)
class _DueReminder:
    user_id: str
    amount: int


class ReminderScheduler:
    """Fixed-interval scan of users with active reminders."""

    def __init__(self, ctx: AppContext, interval_seconds: int = 60):
        self.ctx = ctx
        self.interval_seconds = max(interval_seconds, 1)
        self._scheduler: Optional[AsyncIOScheduler] = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        """Must be called from inside the running event loop."""
        if self.running:
            return
        self._scheduler = AsyncIOScheduler(timezone=get_localzone())
        self._scheduler.add_job(
            self.run_cycle,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self._scheduler.start()
        logger.info("Reminder scheduler started, checking every %ss", self.interval_seconds)

    def shutdown(self) -> None:
        if self._scheduler:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
            logger.info("Reminder scheduler stopped")

    def _collect_due(self, now: datetime) -> tuple[int, List[_DueReminder]]:
        with self.ctx.sessions() as session:
            active = get_active_reminders(session)
            due = [
                _DueReminder(user_id=s.user_id, amount=s.water_amount)
                for s in active
                if is_due(s.last_reminder, s.timer_minutes, now)
            ]
        return len(active), due

    async def run_cycle(self) -> CycleResult:
        result = CycleResult()
        # every user reminded in this cycle is stamped with the cycle start
        now = self.ctx.now()
        try:
            result.checked, due = self._collect_due(now)
        except SQLAlchemyError as e:
            logger.error("Error checking reminders: %s", e)
            return result

        for reminder in due:
            try:
                await send_reminder(self.ctx.bot, reminder.user_id, reminder.amount)
                with self.ctx.sessions() as session:
                    mark_reminded(session, reminder.user_id, now)
                result.sent += 1
            except Exception:
                logger.exception("Error sending reminder to user_id=%s", reminder.user_id)
                result.failed += 1

        if result.sent or result.failed:
            logger.info(
                "Reminder cycle finished: checked=%s sent=%s failed=%s",
                result.checked, result.sent, result.failed,
            )
        return result

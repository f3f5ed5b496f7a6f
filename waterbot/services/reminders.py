from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from aiogram import Bot, types

from waterbot.services.keyboards import build_drink_kb
from waterbot.services.texts import t

logger = logging.getLogger(__name__)


def elapsed_minutes(last_reminder: datetime, now: datetime) -> float:
    return (now - last_reminder).total_seconds() / 60


def is_due(last_reminder: Optional[datetime], timer_minutes: int, now: datetime) -> bool:
    """A user never reminded is due immediately."""
    if last_reminder is None:
        return True
    return elapsed_minutes(last_reminder, now) >= timer_minutes


async def send_reminder(bot: Bot, user_id: str, amount: int) -> types.Message:
    kb = build_drink_kb(user_id, amount)
    message = await bot.send_message(int(user_id), t("reminder.text", amount=amount), reply_markup=kb.as_markup())
    logger.info("Sent water reminder to user_id=%s (%sml)", user_id, amount)
    return message

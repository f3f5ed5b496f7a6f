from __future__ import annotations

import logging

from aiogram import Router, types
from aiogram.filters import Command
from sqlalchemy.exc import SQLAlchemyError

from waterbot.context import AppContext
from waterbot.services.texts import t
from waterbot.services.users import start_reminders, stop_reminders

router = Router()

logger = logging.getLogger(__name__)


@router.message(Command("start"))
async def cmd_start(message: types.Message, ctx: AppContext):
    """Turn reminders on; the next scheduler cycle reminds right away."""
    user_id = str(message.from_user.id)
    try:
        with ctx.sessions() as session:
            settings = start_reminders(session, user_id)
    except SQLAlchemyError as e:
        logger.error("/start error for user_id=%s: %s", user_id, e)
        await message.answer(t("start.error"))
        return
    await message.answer(t("start.ok", timer=settings.timer_minutes, amount=settings.water_amount))


@router.message(Command("stop"))
async def cmd_stop(message: types.Message, ctx: AppContext):
    user_id = str(message.from_user.id)
    try:
        with ctx.sessions() as session:
            stop_reminders(session, user_id)
    except SQLAlchemyError as e:
        logger.error("/stop error for user_id=%s: %s", user_id, e)
        await message.answer(t("stop.error"))
        return
    await message.answer(t("stop.ok"))

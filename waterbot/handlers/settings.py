from __future__ import annotations

import logging

from aiogram import types
from aiogram.filters import Command, CommandObject
from sqlalchemy.exc import SQLAlchemyError

from waterbot.commands import CommandArgumentError, parse_set, parse_setbmi
from waterbot.context import AppContext
from waterbot.services.formatting import format_setbmi_reply
from waterbot.services.hydration import calculate_water_goal, get_bmi_info
from waterbot.services.texts import t
from waterbot.services.users import update_body_metrics, update_reminder_settings
from .start import router

logger = logging.getLogger(__name__)


@router.message(Command("set"))
async def cmd_set(message: types.Message, command: CommandObject, ctx: AppContext):
    try:
        request = parse_set(command.args)
    except CommandArgumentError as e:
        await message.answer(str(e))
        return

    user_id = str(message.from_user.id)
    try:
        with ctx.sessions() as session:
            update_reminder_settings(session, user_id, request.timer, request.amount)
    except SQLAlchemyError as e:
        logger.error("/set error for user_id=%s: %s", user_id, e)
        await message.answer(t("set.error"))
        return
    await message.answer(t("set.ok", timer=request.timer, amount=request.amount))


@router.message(Command("setbmi"))
async def cmd_setbmi(message: types.Message, command: CommandObject, ctx: AppContext):
    try:
        request = parse_setbmi(command.args)
    except CommandArgumentError as e:
        await message.answer(str(e))
        return

    user_id = str(message.from_user.id)
    try:
        with ctx.sessions() as session:
            update_body_metrics(session, user_id, request.weight, request.height)
    except SQLAlchemyError as e:
        logger.error("/setbmi error for user_id=%s: %s", user_id, e)
        await message.answer(t("setbmi.error"))
        return

    bmi = get_bmi_info(request.weight, request.height)
    goal = calculate_water_goal(request.weight, request.height)
    await message.answer(format_setbmi_reply(bmi, goal))

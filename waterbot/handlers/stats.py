from __future__ import annotations

import logging

from aiogram import types
from aiogram.filters import Command, CommandObject
from aiogram.types import BufferedInputFile
from sqlalchemy.exc import SQLAlchemyError

from waterbot.commands import CommandArgumentError, parse_stats
from waterbot.context import AppContext
from waterbot.services.charts import render_intake_chart
from waterbot.services.formatting import format_intake_info, format_stats_caption
from waterbot.services.hydration import calculate_water_goal, get_bmi_info
from waterbot.services.stats import PERIOD_TITLES, build_report
from waterbot.services.texts import t
from waterbot.services.users import get_settings
from waterbot.services.water import today_total
from .start import router

logger = logging.getLogger(__name__)


@router.message(Command("stats"))
async def cmd_stats(message: types.Message, command: CommandObject, ctx: AppContext):
    try:
        request = parse_stats(command.args)
    except CommandArgumentError as e:
        await message.answer(str(e))
        return

    user_id = str(message.from_user.id)
    try:
        with ctx.sessions() as session:
            report = build_report(session, user_id, request.period, ctx.now())
    except SQLAlchemyError as e:
        logger.error("/stats error for user_id=%s: %s", user_id, e)
        await message.answer(t("stats.error"))
        return

    if report is None:
        await message.answer(t("stats.no_data", title=PERIOD_TITLES[request.period].lower()))
        return

    try:
        chart = render_intake_chart(report)
    except Exception as e:
        logger.error("Chart rendering failed for user_id=%s: %s", user_id, e)
        await message.answer(t("stats.error"))
        return

    await message.answer_photo(
        BufferedInputFile(chart, filename="water_stats.png"),
        caption=format_stats_caption(report),
    )


@router.message(Command("waterintakeinfo"))
async def cmd_waterintakeinfo(message: types.Message, ctx: AppContext):
    """BMI, goal and today's progress. Needs /setbmi first."""
    user_id = str(message.from_user.id)
    try:
        with ctx.sessions() as session:
            settings = get_settings(session, user_id)
            if settings is None or not settings.has_bmi():
                await message.answer(t("info.need_bmi"))
                return
            today = today_total(session, user_id, ctx.now())
    except SQLAlchemyError as e:
        logger.error("/waterintakeinfo error for user_id=%s: %s", user_id, e)
        await message.answer(t("info.error"))
        return

    bmi = get_bmi_info(settings.weight_kg, settings.height_cm)
    goal = calculate_water_goal(settings.weight_kg, settings.height_cm)
    await message.answer(format_intake_info(settings, bmi, goal, today))

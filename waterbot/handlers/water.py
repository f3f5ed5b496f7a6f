from __future__ import annotations

import logging

from aiogram import F, types
from aiogram.exceptions import TelegramAPIError
from aiogram.filters import Command, CommandObject
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from waterbot.commands import DRINK_PREFIX, CommandArgumentError, parse_add, parse_drink
from waterbot.context import AppContext
from waterbot.services.formatting import format_completed_reminder
from waterbot.services.texts import t
from waterbot.services.water import log_intake
from .start import router

logger = logging.getLogger(__name__)


@router.message(Command("add"))
async def cmd_add(message: types.Message, command: CommandObject, ctx: AppContext):
    try:
        request = parse_add(command.args)
    except CommandArgumentError as e:
        await message.answer(str(e))
        return

    user_id = str(message.from_user.id)
    try:
        with ctx.sessions() as session:
            log_intake(session, user_id, request.amount, when=ctx.now())
    except SQLAlchemyError as e:
        logger.error("/add error for user_id=%s: %s", user_id, e)
        await message.answer(t("add.error"))
        return
    await message.answer(t("add.ok", amount=request.amount))


async def _close_reminder(call: types.CallbackQuery) -> None:
    """Strike the reminder through and drop its button."""
    if call.message is None or isinstance(call.message, types.InaccessibleMessage):
        return
    try:
        await call.message.edit_text(format_completed_reminder(call.message.html_text), reply_markup=None)
    except TelegramAPIError as e:
        logger.warning("Could not close reminder message %s: %s", call.message.message_id, e)


@router.callback_query(F.data.startswith(f"{DRINK_PREFIX}:"))
async def confirm_drink(call: types.CallbackQuery, ctx: AppContext):
    """Reminder's "I Drank!" button. Each reminder logs at most once."""
    try:
        confirmation = parse_drink(call.data)
    except CommandArgumentError as e:
        await call.answer(str(e), show_alert=True)
        return

    if str(call.from_user.id) != confirmation.user_id:
        await call.answer(t("drink.not_yours"), show_alert=True)
        return

    message_id = call.message.message_id if call.message else None
    try:
        with ctx.sessions() as session:
            log_intake(
                session,
                confirmation.user_id,
                confirmation.amount,
                when=ctx.now(),
                reminder_message_id=message_id,
            )
    except IntegrityError:
        logger.info("Reminder message %s already confirmed by user_id=%s", message_id, confirmation.user_id)
        await call.answer(t("drink.duplicate"), show_alert=True)
        await _close_reminder(call)
        return
    except SQLAlchemyError as e:
        logger.error("Error logging water intake for user_id=%s: %s", confirmation.user_id, e)
        await call.answer(t("drink.error"), show_alert=True)
        return

    await call.answer(t("drink.ok", amount=confirmation.amount), show_alert=True)
    await _close_reminder(call)

from __future__ import annotations

import logging

from aiogram import types
from aiogram.filters import Command, CommandObject
from sqlalchemy.exc import SQLAlchemyError

from waterbot.commands import CommandArgumentError, parse_suggest
from waterbot.context import AppContext
from waterbot.services.formatting import format_suggestion_receipt
from waterbot.services.suggestions import save_suggestion
from waterbot.services.texts import t
from .start import router

logger = logging.getLogger(__name__)


def display_name(user: types.User) -> str:
    return user.username or user.full_name


@router.message(Command("suggest"))
async def cmd_suggest(message: types.Message, command: CommandObject, ctx: AppContext):
    try:
        request = parse_suggest(command.args)
    except CommandArgumentError as e:
        await message.answer(str(e))
        return

    user_id = str(message.from_user.id)
    username = display_name(message.from_user)
    try:
        with ctx.sessions() as session:
            save_suggestion(session, user_id, username, request.kind, request.content)
    except SQLAlchemyError as e:
        logger.error("/suggest error for user_id=%s: %s", user_id, e)
        await message.answer(t("suggest.error"))
        return
    await message.answer(format_suggestion_receipt(request.kind, username, request.content))

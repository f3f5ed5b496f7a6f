from __future__ import annotations

import logging

from aiogram import F, types
from aiogram.filters import Command
from aiogram.types import BufferedInputFile

from waterbot.commands import CRYPTO_PREFIX, CommandArgumentError, parse_donation
from waterbot.services.donations import get_option, render_qr
from waterbot.services.formatting import format_donation
from waterbot.services.keyboards import build_donation_kb
from waterbot.services.texts import t
from .start import router

logger = logging.getLogger(__name__)


@router.message(Command("donate"))
async def cmd_donate(message: types.Message):
    await message.answer(t("donate.intro"), reply_markup=build_donation_kb().as_markup())


@router.callback_query(F.data.startswith(f"{CRYPTO_PREFIX}:"))
async def show_donation_address(call: types.CallbackQuery):
    try:
        selection = parse_donation(call.data)
    except CommandArgumentError as e:
        await call.answer(str(e), show_alert=True)
        return

    option = get_option(selection.key)
    if option is None or call.message is None or isinstance(call.message, types.InaccessibleMessage):
        await call.answer(t("donate.unknown"), show_alert=True)
        return
    await call.answer()

    try:
        qr = render_qr(option.address)
    except Exception as e:
        # address as text is still enough to donate
        logger.error("Error generating QR code for %s: %s", option.key, e)
        await call.message.answer(format_donation(option, with_qr=False))
        return

    await call.message.answer_photo(
        BufferedInputFile(qr, filename="qr-code.png"),
        caption=format_donation(option),
    )

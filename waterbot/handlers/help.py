from __future__ import annotations

from aiogram import types
from aiogram.filters import Command

from waterbot.services.formatting import format_help
from .start import router


@router.message(Command("help"))
async def show_help(message: types.Message):
    await message.answer(format_help())

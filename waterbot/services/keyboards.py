from __future__ import annotations

from aiogram.utils.keyboard import InlineKeyboardBuilder

from waterbot.commands import DonationSelection, DrinkConfirmation
from waterbot.services.donations import DONATION_OPTIONS
from waterbot.services.texts import t

DONATION_BUTTONS_PER_ROW = 3


def build_drink_kb(user_id: str, amount: int) -> InlineKeyboardBuilder:
    kb = InlineKeyboardBuilder()
    kb.button(text=t("reminder.button"), callback_data=DrinkConfirmation(user_id=user_id, amount=amount).pack())
    kb.adjust(1)
    return kb


def build_donation_kb() -> InlineKeyboardBuilder:
    kb = InlineKeyboardBuilder()
    for option in DONATION_OPTIONS.values():
        kb.button(
            text=f"{option.emoji} {option.button_label}",
            callback_data=DonationSelection(key=option.key).pack(),
        )
    kb.adjust(DONATION_BUTTONS_PER_ROW)
    return kb

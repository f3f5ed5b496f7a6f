"""Typed requests for bot commands and buttons.

Every command's free-text arguments are parsed into one of the request
classes below. Parsing failures raise ``CommandArgumentError`` whose message
is shown to the user as-is.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from waterbot.models.suggestion import SUGGESTION_TYPES
from waterbot.services.stats import DEFAULT_PERIOD, PERIOD_TITLES
from waterbot.services.texts import t

DRINK_PREFIX = "drink"
CRYPTO_PREFIX = "crypto"

MAX_TIMER_MINUTES = 7 * 24 * 60
MAX_AMOUNT_ML = 10_000
MAX_WEIGHT_KG = 1000
MAX_HEIGHT_CM = 300


class CommandArgumentError(ValueError):
    pass


@dataclass(frozen=True)
class SetRequest:
    timer: int
    amount: int


@dataclass(frozen=True)
class SetBmiRequest:
    weight: float
    height: float


@dataclass(frozen=True)
class AddRequest:
    amount: int


@dataclass(frozen=True)
class StatsRequest:
    period: str = DEFAULT_PERIOD


@dataclass(frozen=True)
class SuggestRequest:
    kind: str
    content: str


@dataclass(frozen=True)
class DrinkConfirmation:
    user_id: str
    amount: int

    def pack(self) -> str:
        return f"{DRINK_PREFIX}:{self.user_id}:{self.amount}"


@dataclass(frozen=True)
class DonationSelection:
    key: str

    def pack(self) -> str:
        return f"{CRYPTO_PREFIX}:{self.key}"


def _split(args: Optional[str]) -> List[str]:
    return (args or "").replace(",", " ").split()


def _to_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def _to_float(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_set(args: Optional[str]) -> SetRequest:
    parts = _split(args)
    if len(parts) != 2:
        raise CommandArgumentError(t("set.usage"))
    timer, amount = _to_int(parts[0]), _to_int(parts[1])
    if timer is None or amount is None:
        raise CommandArgumentError(t("set.usage"))
    if timer < 1 or amount < 1:
        raise CommandArgumentError(t("set.not_positive"))
    if timer > MAX_TIMER_MINUTES or amount > MAX_AMOUNT_ML:
        raise CommandArgumentError(t("set.too_large", max_timer=MAX_TIMER_MINUTES, max_amount=MAX_AMOUNT_ML))
    return SetRequest(timer=timer, amount=amount)


def parse_setbmi(args: Optional[str]) -> SetBmiRequest:
    # decimal commas are accepted, so values are separated by spaces only
    parts = (args or "").split()
    if len(parts) != 2:
        raise CommandArgumentError(t("setbmi.usage"))
    weight = _to_float(parts[0].replace(",", "."))
    height = _to_float(parts[1].replace(",", "."))
    if weight is None or height is None:
        raise CommandArgumentError(t("setbmi.usage"))
    if not (0 < weight <= MAX_WEIGHT_KG and 0 < height <= MAX_HEIGHT_CM):
        raise CommandArgumentError(t("setbmi.invalid"))
    return SetBmiRequest(weight=weight, height=height)


def parse_add(args: Optional[str]) -> AddRequest:
    parts = _split(args)
    if len(parts) != 1 or _to_int(parts[0]) is None:
        raise CommandArgumentError(t("add.usage"))
    amount = int(parts[0])
    if amount <= 0:
        raise CommandArgumentError(t("add.not_positive"))
    if amount > MAX_AMOUNT_ML:
        raise CommandArgumentError(t("add.too_large", max_amount=MAX_AMOUNT_ML))
    return AddRequest(amount=amount)


def parse_stats(args: Optional[str]) -> StatsRequest:
    parts = _split(args)
    if not parts:
        return StatsRequest()
    period = parts[0].lower()
    if len(parts) > 1 or period not in PERIOD_TITLES:
        raise CommandArgumentError(t("stats.usage", periods=" | ".join(PERIOD_TITLES)))
    return StatsRequest(period=period)


def parse_suggest(args: Optional[str]) -> SuggestRequest:
    raw = (args or "").strip()
    kind, _, content = raw.partition(" ")
    kind = kind.lower()
    content = content.strip()
    if kind not in SUGGESTION_TYPES or not content:
        raise CommandArgumentError(t("suggest.usage"))
    return SuggestRequest(kind=kind, content=content)


def parse_drink(data: str) -> DrinkConfirmation:
    parts = data.split(":")
    if len(parts) != 3 or parts[0] != DRINK_PREFIX:
        raise CommandArgumentError(t("drink.malformed"))
    amount = _to_int(parts[2])
    if not parts[1] or amount is None or not 0 < amount <= MAX_AMOUNT_ML:
        raise CommandArgumentError(t("drink.malformed"))
    return DrinkConfirmation(user_id=parts[1], amount=amount)


def parse_donation(data: str) -> DonationSelection:
    prefix, _, key = data.partition(":")
    if prefix != CRYPTO_PREFIX or not key:
        raise CommandArgumentError(t("donate.unknown"))
    return DonationSelection(key=key)

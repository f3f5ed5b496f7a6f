from __future__ import annotations

from aiogram import html

from waterbot.models.user_settings import UserSettings
from waterbot.services.donations import CryptoOption
from waterbot.services.hydration import BmiInfo
from waterbot.services.stats import StatsReport
from waterbot.services.texts import COMMANDS, t


def litres(ml: int) -> str:
    return f"{ml / 1000:.1f}"


def number(value: float) -> str:
    """Render 70.0 as 70 and 72.5 as 72.5."""
    return f"{value:g}"


def format_setbmi_reply(bmi: BmiInfo, goal: int) -> str:
    return t("setbmi.ok", bmi=f"{bmi.bmi:.1f}", category=bmi.category, goal=goal, goal_l=litres(goal))


def format_stats_caption(report: StatsReport) -> str:
    return "\n".join([
        t("stats.title", title=report.title),
        "",
        t("stats.total", total=report.total, total_l=litres(report.total)),
        t("stats.average", average=report.average),
        t("stats.goal", goal=report.goal),
    ])


def format_intake_info(settings: UserSettings, bmi: BmiInfo, goal: int, today: int) -> str:
    percentage = f"{today / goal * 100:.1f}"
    remaining = max(0, goal - today)
    return "\n".join([
        t("info.title"),
        "",
        t("info.height", height=number(settings.height_cm)),
        t("info.weight", weight=number(settings.weight_kg)),
        t("info.bmi", bmi=f"{bmi.bmi:.1f}", category=bmi.category),
        t("info.goal", goal=goal, goal_l=litres(goal)),
        t("info.today", today=today, percentage=percentage),
        t("info.remaining", remaining=remaining),
        "",
        t("info.why", weight=number(settings.weight_kg)),
    ])


def format_donation(option: CryptoOption, with_qr: bool = True) -> str:
    lines = [
        t("donate.title", name=option.name),
        "",
        t("donate.network", network=option.network),
        "",
        t("donate.address", address=html.quote(option.address)),
        "",
        t("donate.warning"),
        "",
        t("donate.scan") if with_qr else t("donate.copy"),
        "",
        t("donate.thanks"),
        t("donate.footer"),
    ]
    return "\n".join(lines)


def format_suggestion_receipt(kind: str, username: str, content: str) -> str:
    return t("suggest.ok", kind=kind, username=html.quote(username), content=html.quote(content))


def format_help() -> str:
    lines = [t("help.title"), ""]
    lines += [f"/{name} - {description}" for name, description in COMMANDS]
    lines += ["", t("help.footer")]
    return "\n".join(lines)


def format_completed_reminder(original_html: str) -> str:
    return f"<s>{original_html}</s> {t('reminder.completed')}"

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from waterbot.models.water_log import WaterLog
from waterbot.services.hydration import calculate_water_goal, round_half_up, DEFAULT_WATER_GOAL_ML
from waterbot.services.users import get_settings
from waterbot.services.water import start_of_day

PERIOD_TITLES = {
    "today": "Today",
    "week": "This Week",
    "month": "This Month",
    "year": "This Year",
}
DEFAULT_PERIOD = "today"


@dataclass(frozen=True)
class DailyTotal:
    day: str  # YYYY-MM-DD
    total: int


@dataclass
class StatsReport:
    period: str
    days: List[DailyTotal]
    goal: int

    @property
    def title(self) -> str:
        return PERIOD_TITLES[self.period]

    @property
    def total(self) -> int:
        return sum(d.total for d in self.days)

    @property
    def average(self) -> int:
        """Average over days that have entries, not over the period length."""
        if not self.days:
            return 0
        return round_half_up(self.total / len(self.days))


def period_start(period: str, now: datetime) -> datetime:
    """Start boundary of a calendar-aligned period in local time.

    Weeks start on Sunday.
    """
    midnight = start_of_day(now)
    if period == "today":
        return midnight
    if period == "week":
        days_since_sunday = (midnight.weekday() + 1) % 7
        return midnight - timedelta(days=days_since_sunday)
    if period == "month":
        return midnight.replace(day=1)
    if period == "year":
        return midnight.replace(month=1, day=1)
    raise ValueError(f"Unknown period: {period}")


def daily_totals(session: Session, user_id: str, since: datetime) -> List[DailyTotal]:
    day_expr = func.date(WaterLog.timestamp)
    rows = (
        session.query(day_expr, func.sum(WaterLog.amount))
        .filter(WaterLog.user_id == user_id)
        .filter(WaterLog.timestamp >= since)
        .group_by(day_expr)
        .order_by(day_expr)
        .all()
    )
    # date() comes back as str on SQLite and as a date elsewhere
    return [DailyTotal(day=str(d), total=int(t)) for d, t in rows]


def build_report(session: Session, user_id: str, period: str, now: datetime) -> Optional[StatsReport]:
    """Aggregate a user's intake for the period; None when there is nothing logged."""
    days = daily_totals(session, user_id, period_start(period, now))
    if not days:
        return None
    settings = get_settings(session, user_id)
    goal = calculate_water_goal(settings.weight_kg, settings.height_cm) if settings else DEFAULT_WATER_GOAL_ML
    return StatsReport(period=period, days=days, goal=goal)

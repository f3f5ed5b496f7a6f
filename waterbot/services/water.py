from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from waterbot.models.water_log import WaterLog


def log_intake(
    session: Session,
    user_id: str,
    amount: int,
    when: Optional[datetime] = None,
    reminder_message_id: Optional[int] = None,
) -> WaterLog:
    """Append an intake entry.

    With ``reminder_message_id`` set, a second entry for the same reminder
    raises ``IntegrityError`` and the session is left rolled back.
    """
    entry = WaterLog(user_id=user_id, amount=amount, reminder_message_id=reminder_message_id)
    if when is not None:
        entry.timestamp = when
    session.add(entry)
    try:
        session.commit()
    except Exception:
        session.rollback()
        raise
    return entry


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def today_total(session: Session, user_id: str, now: datetime) -> int:
    total = (
        session.query(func.sum(WaterLog.amount))
        .filter(WaterLog.user_id == user_id)
        .filter(WaterLog.timestamp >= start_of_day(now))
        .scalar()
    )
    return int(total or 0)

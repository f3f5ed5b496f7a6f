from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from waterbot.models.user_settings import UserSettings

logger = logging.getLogger(__name__)


def get_settings(session: Session, user_id: str) -> Optional[UserSettings]:
    return session.query(UserSettings).filter(UserSettings.user_id == user_id).first()


def get_or_create_settings(session: Session, user_id: str) -> UserSettings:
    """Fetch settings by user id or add a new row with defaults (not committed)."""
    settings = get_settings(session, user_id)
    if settings is None:
        settings = UserSettings(user_id=user_id)
        session.add(settings)
        session.flush()
        logger.info("Created settings for user_id=%s", user_id)
    return settings


def start_reminders(session: Session, user_id: str) -> UserSettings:
    settings = get_or_create_settings(session, user_id)
    settings.reminder_active = True
    settings.last_reminder = None
    session.commit()
    return settings


def stop_reminders(session: Session, user_id: str) -> bool:
    """Deactivate reminders. Returns False when the user has no settings yet."""
    settings = get_settings(session, user_id)
    if settings is None:
        return False
    settings.reminder_active = False
    session.commit()
    return True


def update_reminder_settings(session: Session, user_id: str, timer_minutes: int, water_amount: int) -> UserSettings:
    settings = get_or_create_settings(session, user_id)
    settings.timer_minutes = timer_minutes
    settings.water_amount = water_amount
    session.commit()
    return settings


def update_body_metrics(session: Session, user_id: str, weight_kg: float, height_cm: float) -> UserSettings:
    settings = get_or_create_settings(session, user_id)
    settings.weight_kg = weight_kg
    settings.height_cm = height_cm
    session.commit()
    return settings


def get_active_reminders(session: Session) -> List[UserSettings]:
    return (
        session.query(UserSettings)
        .filter(UserSettings.reminder_active.is_(True))
        .order_by(UserSettings.id)
        .all()
    )


def mark_reminded(session: Session, user_id: str, when: datetime) -> None:
    settings = get_settings(session, user_id)
    if settings is None:
        return
    settings.last_reminder = when
    session.commit()

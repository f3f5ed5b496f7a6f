from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, func

from waterbot.database import Base

DEFAULT_TIMER_MINUTES = 25
DEFAULT_WATER_AMOUNT = 250


class UserSettings(Base):
    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, unique=True, index=True, nullable=False)
    timer_minutes = Column(Integer, nullable=False, default=DEFAULT_TIMER_MINUTES)
    water_amount = Column(Integer, nullable=False, default=DEFAULT_WATER_AMOUNT)  # ml
    weight_kg = Column(Float, nullable=True)
    height_cm = Column(Float, nullable=True)
    reminder_active = Column(Boolean, nullable=False, default=False)
    last_reminder = Column(DateTime, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def has_bmi(self) -> bool:
        return bool(self.weight_kg) and bool(self.height_cm)

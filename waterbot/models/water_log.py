from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, UniqueConstraint

from waterbot.database import Base


class WaterLog(Base):
    """One intake event. Rows are never updated or deleted."""
    __tablename__ = "water_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "reminder_message_id", name="uq_water_logs_reminder"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    amount = Column(Integer, nullable=False)  # ml
    timestamp = Column(DateTime, nullable=False, default=datetime.now, index=True)
    # set only when the entry comes from a reminder's "I Drank!" button
    reminder_message_id = Column(BigInteger, nullable=True)

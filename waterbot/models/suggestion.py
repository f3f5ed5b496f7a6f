from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Integer, String, Text

from waterbot.database import Base

SUGGESTION_TYPES = ("suggestion", "issue")


class Suggestion(Base):
    __tablename__ = "suggestions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    username = Column(String, nullable=False)  # display name at submission time
    type = Column(Enum(*SUGGESTION_TYPES, name="suggestion_type"), nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime, nullable=False, default=datetime.now, index=True)

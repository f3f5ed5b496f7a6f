from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from waterbot.models.suggestion import Suggestion

logger = logging.getLogger(__name__)


def save_suggestion(session: Session, user_id: str, username: str, kind: str, content: str) -> Suggestion:
    suggestion = Suggestion(user_id=user_id, username=username, type=kind, content=content)
    session.add(suggestion)
    session.commit()
    logger.info("Saved %s from user_id=%s", kind, user_id)
    return suggestion

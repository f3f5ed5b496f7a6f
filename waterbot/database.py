from __future__ import annotations

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(url: str) -> sessionmaker:
    """Connect, create missing tables and return the session factory.

    Raises ``sqlalchemy.exc.SQLAlchemyError`` when the database is unreachable.
    """
    # models register themselves on Base.metadata
    from waterbot.models import suggestion, user_settings, water_log  # noqa: F401

    engine = build_engine(url)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    Base.metadata.create_all(bind=engine)
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    return build_session_factory(engine)

# infra/db/base.py
from __future__ import annotations
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy import create_engine
import logging
import os

from infra.path import default_db_path

logger = logging.getLogger(__name__)

Base = declarative_base()


def database_url() -> str:
    """FLETES_DATABASE_URL wins; otherwise a SQLite file in the user data dir."""
    override = (os.getenv("FLETES_DATABASE_URL") or "").strip()
    if override:
        return override
    db_path = default_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path.as_posix()}"


db_url = database_url()
logger.info("Using database at: %s", db_url)

engine = create_engine(
    db_url,
    echo=False,
    future=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

import sys
import time
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from patternbook.config import DATABASE_URL
from patternbook.db.models import Base


def make_engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Iterator[Session]:
    """FastAPI dependency: one session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None, retries: int = 5, delay: float = 2.0) -> bool:
    """Create tables, waiting for the database; False when it never came up"""
    bind = bind if bind is not None else engine
    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=bind)
            print("[DB] Database connected", file=sys.stderr)
            return True
        except OperationalError:
            print(f"[DB] Waiting for database... ({attempt + 1}/{retries})", file=sys.stderr)
            if attempt + 1 < retries:
                time.sleep(delay)

    print("[DB] Database not ready - running without persistence", file=sys.stderr)
    return False

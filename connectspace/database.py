# connectspace/database.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

load_dotenv()


def _default_db_url() -> str:
    """
    Use a file-based SQLite DB at the project root when DATABASE_URL is not provided.
    """
    root = Path(__file__).resolve().parents[1]
    return f"sqlite:///{(root / 'local_storage.db').as_posix()}"


def _normalize_database_url(raw_url: Optional[str]) -> Optional[str]:
    """Map platform-style URLs onto drivers SQLAlchemy understands synchronously."""

    if not raw_url:
        return raw_url

    try:
        url = make_url(raw_url)
    except Exception:
        # If SQLAlchemy can't parse the URL, fall back to the raw value.
        return raw_url

    driver = url.drivername.lower()
    if driver == "postgres":
        url = url.set(drivername="postgresql")
    elif driver == "sqlite+aiosqlite":
        url = url.set(drivername="sqlite")
    elif driver == "postgresql+asyncpg":
        url = url.set(drivername="postgresql")

    return url.render_as_string(hide_password=False)


def _database_url_from_env(env: Mapping[str, str]) -> Optional[str]:
    """Resolve the preferred database URL from environment variables."""

    candidates = [
        env.get("DATABASE_URL"),
        env.get("POSTGRES_URL"),
    ]

    for raw in candidates:
        normalized = _normalize_database_url(raw)
        if normalized:
            return normalized

    return None


DEFAULT_SQLITE_URL: str = _default_db_url()
DATABASE_URL: str = _database_url_from_env(os.environ) or DEFAULT_SQLITE_URL

# Optional echo flag for local debugging
ECHO = os.getenv("SQLALCHEMY_ECHO", "0").lower() in {"1", "true", "yes"}


def _build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=ECHO,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def _build_session_factory(bind_engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=bind_engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


Base = declarative_base()

# Public globals that can be reconfigured at runtime.
engine: Engine
SessionLocal: sessionmaker
CURRENT_DATABASE_URL: str


def configure_engine(database_url: str) -> None:
    """Configure the global engine/session factory pair.

    Tests point this at a temporary SQLite file; the app uses whatever
    DATABASE_URL resolved to at import time.
    """

    global engine, SessionLocal, CURRENT_DATABASE_URL

    engine = _build_engine(database_url)
    SessionLocal = _build_session_factory(engine)
    CURRENT_DATABASE_URL = database_url


# Initialise globals using the preferred database URL.
configure_engine(DATABASE_URL)


def init_models() -> None:
    """
    Import all model modules so they register with Base, then create tables.
    """

    # Ensure SQLAlchemy knows about every mapped class
    import connectspace.models  # noqa: F401

    Base.metadata.create_all(engine)

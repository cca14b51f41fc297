"""SQLAlchemy engine and session setup."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker


def normalize_database_url(url: str) -> str:
    # Heroku-style postgres:// but SQLAlchemy 2.x requires postgresql://
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def ensure_sqlite_dir(url) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)


def make_engine(url: str) -> Engine:
    """Build an engine for url. Nothing touches the database until first use."""
    url = normalize_database_url(url)
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        # Web requests hand sessions across threadpool workers
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, echo=False, connect_args=connect_args)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


def init_db(bind: Engine) -> None:
    """Create any missing tables."""
    ensure_sqlite_dir(bind.url)
    Base.metadata.create_all(bind)


class Base(DeclarativeBase):
    pass

"""Shared FastAPI dependencies — DB session and app config."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from profile_analyzer.config import AppConfig


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_config(request: Request) -> AppConfig:
    return request.app.state.config

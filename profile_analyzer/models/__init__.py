"""ORM models for stored profile analyses."""

from .base import Base, init_db, make_engine, make_session_factory
from .profile_analysis import ProfileAnalysisRecord

__all__ = [
    "Base",
    "init_db",
    "make_engine",
    "make_session_factory",
    "ProfileAnalysisRecord",
]

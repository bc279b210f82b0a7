"""Engine, sessions and time helpers for the store."""

from .session import Base, SessionLocal, get_db, session_scope

__all__ = ["Base", "SessionLocal", "get_db", "session_scope"]

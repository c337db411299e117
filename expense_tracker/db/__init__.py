"""
Database package
"""
from expense_tracker.db.base import Base, TimestampMixin
from expense_tracker.db.session import build_engine, build_session_factory

__all__ = [
    "Base",
    "TimestampMixin",
    "build_engine",
    "build_session_factory",
]

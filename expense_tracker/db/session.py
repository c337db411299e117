"""
Database session management
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for a SQLite URL

    Connections are used from FastAPI's threadpool,
    so the same-thread check is disabled.
    """
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        echo=echo,  # Log SQL queries in debug mode
    )


def build_session_factory(bind: Engine) -> sessionmaker:
    """Create session factory"""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=bind
    )

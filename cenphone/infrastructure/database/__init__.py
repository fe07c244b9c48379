"""Database engine and session lifecycle."""

from .lifecycle import (
    close_database,
    create_engine_for,
    create_session_factory,
    create_tables,
    get_session_factory,
    init_database,
)

__all__ = [
    "close_database",
    "create_engine_for",
    "create_session_factory",
    "create_tables",
    "get_session_factory",
    "init_database",
]

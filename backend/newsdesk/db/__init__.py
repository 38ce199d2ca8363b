"""Database connections package."""

from newsdesk.db.postgres import engine, get_session, init_db

__all__ = ["get_session", "init_db", "engine"]

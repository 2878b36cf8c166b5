"""
Database engine and schema bootstrap.

Builds the SQLAlchemy engine from settings and creates the two tables
idempotently at startup. There is no migration tooling beyond this.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from bookstore.core.config import Settings
from bookstore.domain.errors import PersistenceError

logger = logging.getLogger(__name__)

CREATE_BOOKS_TABLE = """
CREATE TABLE IF NOT EXISTS books (
    id SERIAL PRIMARY KEY NOT NULL,
    title TEXT NOT NULL,
    authors TEXT[] NOT NULL,
    publisher TEXT NOT NULL,
    isbn TEXT NOT NULL,
    price BIGINT NOT NULL,
    quantity BIGINT NOT NULL,
    created_by TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT NOW() NOT NULL
)
"""

CREATE_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    username TEXT PRIMARY KEY NOT NULL,
    email TEXT NOT NULL UNIQUE,
    fullname TEXT NOT NULL,
    hashed_password TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT NOW() NOT NULL
)
"""

SCHEMA_STATEMENTS = (CREATE_BOOKS_TABLE, CREATE_USERS_TABLE)


def build_engine(settings: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings.

    The configured driver name replaces whatever scheme the URL carries,
    so ``postgres://`` URLs handed out by hosting providers work as-is.
    """
    url = make_url(settings.database_url).set(drivername=settings.driver_name)
    return create_engine(url, pool_pre_ping=True)


def init_schema(engine: Engine) -> None:
    """Create the books and users tables if they do not exist.

    Raises:
        PersistenceError: A DDL statement failed.
    """
    try:
        with engine.begin() as conn:
            for statement in SCHEMA_STATEMENTS:
                conn.execute(text(statement))
    except SQLAlchemyError as exc:
        logger.error("Error Create Tables : %s", exc)
        raise PersistenceError("init_schema", exc) from exc
    logger.info("Database schema ready.")

"""
Database Configuration Module

SQLAlchemy 2.0 setup for the Biblioteca API.

Connection Handle
=================
There is no module-level engine. create_app() builds one Database
instance from the settings and stores it on app.state; the get_db
dependency pulls a session out of it for every request:

    Request arrives -> new Session -> one SQL statement -> close Session

The engine keeps a pool of connections shared by all requests. A Session
checks a connection out for its statement and gives it back on close.

SQLite
======
SQLite is supported for tests and local development. In-memory databases
use a StaticPool so every session sees the same data, and foreign key
enforcement is switched on for each new connection (SQLite leaves it off).
"""

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import Engine, create_engine, event, make_url, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from biblioteca.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Every table registered on Base.metadata is created by
    Database.create_tables().
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def is_sqlite_memory_url(database_url: str) -> bool:
    """True for sqlite:// and sqlite:///:memory: style URLs."""
    url = make_url(database_url)
    database = url.database or ""
    return database in ("", ":memory:") or url.query.get("mode") == "memory"


def postgres_connect_args(settings: Settings) -> dict[str, Any]:
    """libpq connection arguments; sslmode is passed through unless empty."""
    if settings.database_sslmode:
        return {"sslmode": settings.database_sslmode}
    return {}


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine described by the settings.

    PostgreSQL gets a sized connection pool with pre-ping so stale
    connections are replaced transparently. database_sslmode is passed to
    libpq as-is.

    Returns:
        Configured Engine (no connection is opened yet)
    """
    if settings.is_sqlite:
        # A file database keeps the default pool: one connection per session
        pool_args = {"poolclass": StaticPool} if is_sqlite_memory_url(settings.database_url) else {}
        engine = create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
            echo=settings.debug,
            **pool_args,
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
        connect_args=postgres_connect_args(settings),
    )


class Database:
    """
    Engine plus session factory, passed around explicitly.

    Example:
        database = Database(create_db_engine(settings))
        with database.session() as db:
            db.execute(...)
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_db_engine(settings))

    def session(self) -> Session:
        """Open a new session bound to this database."""
        return self._session_factory()

    def ping(self) -> None:
        """Run SELECT 1; raises SQLAlchemyError if the store is unreachable."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def create_tables(self) -> None:
        """
        Create all tables that don't exist yet.

        Used by tests, the seed script and CREATE_TABLES_ON_STARTUP.
        Existing tables are left untouched.
        """
        # Register every model on Base.metadata
        import biblioteca.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all tables. Deletes all data."""
        import biblioteca.models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()


# =============================================================================
# Dependency Injection
# =============================================================================
def get_database(request: Request) -> Database:
    """Return the Database handle attached to the running application."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields a fresh session for the request and closes it afterwards,
    returning its connection to the pool even if the handler raised.
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()

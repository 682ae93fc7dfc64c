"""
Database handle and storage error translation.

Guidelines:
- One Database per process (owned by the DI container, Scope.APP)
- One AsyncSession per request (Scope.REQUEST)
- Every engine-specific failure is translated into the domain taxonomy here,
  before it leaves the persistence package
"""

import logging
from contextlib import asynccontextmanager
from enum import Enum
from typing import AsyncIterator, Optional

from sqlalchemy import UniqueConstraint, event
from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from konektz.domain.exceptions import (
    ConflictError,
    DomainError,
    DomainValidationError,
    EntityNotFoundError,
    StorageUnavailableError,
)
from konektz.infrastructure.persistence.models import Base

logger = logging.getLogger(__name__)


class IntegrityKind(str, Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    CHECK = "check"


# PostgreSQL SQLSTATE codes
SQLSTATE_KINDS = {
    "23505": IntegrityKind.UNIQUE,
    "23503": IntegrityKind.FOREIGN_KEY,
    "23502": IntegrityKind.NOT_NULL,
    "23514": IntegrityKind.CHECK,
}

# SQLite only reports the constraint type in the message text
SQLITE_MESSAGE_KINDS = (
    ("UNIQUE constraint failed", IntegrityKind.UNIQUE),
    ("FOREIGN KEY constraint failed", IntegrityKind.FOREIGN_KEY),
    ("NOT NULL constraint failed", IntegrityKind.NOT_NULL),
    ("CHECK constraint failed", IntegrityKind.CHECK),
)

UNAVAILABLE_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    ConnectionError,
)


def _driver_errors(exc: IntegrityError) -> list:
    orig = getattr(exc, "orig", None)
    return [e for e in (orig, getattr(orig, "__cause__", None)) if e is not None]


def integrity_kind(exc: IntegrityError) -> Optional[IntegrityKind]:
    for driver_error in _driver_errors(exc):
        code = getattr(driver_error, "sqlstate", None) or getattr(
            driver_error, "pgcode", None
        )
        if code and str(code) in SQLSTATE_KINDS:
            return SQLSTATE_KINDS[str(code)]

    text = str(exc.orig if exc.orig is not None else exc)
    for marker, kind in SQLITE_MESSAGE_KINDS:
        if marker in text:
            return kind
    return None


def _sqlite_unique_names() -> dict[str, str]:
    """SQLite names the columns ("users.email") instead of the constraint."""
    names = {}
    for table in Base.metadata.tables.values():
        for constraint in table.constraints:
            if isinstance(constraint, UniqueConstraint) and constraint.name:
                columns = ", ".join(f"{table.name}.{c.name}" for c in constraint.columns)
                names[columns] = constraint.name
    return names


SQLITE_UNIQUE_NAMES = _sqlite_unique_names()


def constraint_name(exc: IntegrityError) -> Optional[str]:
    for driver_error in _driver_errors(exc):
        name = getattr(driver_error, "constraint_name", None)
        if name:
            return name
    text = str(exc.orig if exc.orig is not None else exc)
    if ": " in text:
        columns = text.split(": ", 1)[1].strip()
        return SQLITE_UNIQUE_NAMES.get(columns, columns)
    return None


def translate_storage_error(exc: BaseException) -> Optional[DomainError]:
    """
    Map a storage failure onto the error taxonomy.

    Returns None for failures that have no operational meaning; those
    propagate unchanged and surface as 500.
    """
    if isinstance(exc, IntegrityError):
        kind = integrity_kind(exc)
        if kind is IntegrityKind.UNIQUE:
            return ConflictError(constraint=constraint_name(exc))
        if kind is IntegrityKind.FOREIGN_KEY:
            return EntityNotFoundError("Referenced resource not found")
        if kind is IntegrityKind.NOT_NULL:
            return DomainValidationError("Missing required field")
        if kind is IntegrityKind.CHECK:
            return DomainValidationError("Constraint check failed")
        return None
    if isinstance(exc, UNAVAILABLE_ERRORS):
        return StorageUnavailableError()
    return None


@asynccontextmanager
async def storage_errors(session: AsyncSession) -> AsyncIterator[None]:
    """Roll back and re-raise storage failures as domain errors."""
    try:
        yield
    except (SQLAlchemyError, ConnectionError) as exc:
        await session.rollback()
        translated = translate_storage_error(exc)
        if translated is None:
            raise
        logger.debug(f"Storage error translated to {type(translated).__name__}: {exc}")
        raise translated from exc


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and hands out sessions."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]

    def __init__(self, url: str, echo: bool = False, pool_size: int = 5):
        if not url:
            raise ValueError("A database URL is required")

        options = {"echo": echo}
        is_sqlite = url.startswith("sqlite")
        if not is_sqlite:
            options.update(pool_size=pool_size, pool_pre_ping=True)

        self.engine = create_async_engine(url, **options)
        if is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

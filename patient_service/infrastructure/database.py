"""Database Session Manager — one async session per request, rollback on failure.

Invariants:
    - Every session rolls back on any exception escaping the request (no partial commits)
    - Unique medical_id violations never reach this layer: the repository turns them
      into DuplicateMedicalIdError (409) at commit
    - Any other SQLAlchemy failure becomes DatabaseError (500); nothing is retried
    - db_manager is None until init_db() runs in the FastAPI lifespan
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy import text

from patient_service.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    """Translate a storage failure into the client-safe DatabaseError."""
    if isinstance(exc, OperationalError):
        return DatabaseError("Connection or operational error", "execute")
    if isinstance(exc, DBAPIError):
        return DatabaseError("Database driver error", "query")
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out request-scoped patient sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Storage failure: {e}")
            raise to_database_error(e) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session

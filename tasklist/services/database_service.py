from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.pool import QueuePool
from sqlmodel import Session, SQLModel, create_engine, select
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from tasklist.core.config import Environment, settings
from tasklist.core.logging import logger

# Register every table on SQLModel.metadata before create_all runs
from tasklist.models import database as _models  # noqa: F401


def build_engine(url: str) -> Engine:
    """Create an engine; SQLite gets a thread-safe connection, everything else a QueuePool."""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_pre_ping=True,  # check if connection is alive before using it
        poolclass=QueuePool,
        pool_size=settings.POSTGRES_POOL_SIZE,
        max_overflow=settings.POSTGRES_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=1800,
    )


# Database Service
class DatabaseService:
    """
    Owns the engine and its connection pool.
    Request handlers get their own Session through `get_session`.
    """
    def __init__(self, url: str | None = None):
        self.engine = build_engine(url or settings.database_url)

    # The database container is often still booting when the API starts
    @retry(
        stop=stop_after_attempt(settings.DB_INIT_RETRIES),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(OperationalError),
        before_sleep=before_sleep_log(logger, 30),
        reraise=True,
    )
    def create_tables(self) -> None:
        """Create tables if they don't exist (code-first migration)."""
        SQLModel.metadata.create_all(self.engine)

    def init_db(self) -> None:
        try:
            self.create_tables()
            logger.info(
                "database_initialized",
                environment=settings.ENVIRONMENT.value,
                dialect=self.engine.dialect.name,
            )
        except SQLAlchemyError as e:
            logger.error("database_initialization_error", error=str(e), environment=settings.ENVIRONMENT.value)
            if settings.ENVIRONMENT != Environment.PRODUCTION:
                raise

    def get_session(self) -> Iterator[Session]:
        """FastAPI dependency: one session per request."""
        with Session(self.engine) as session:
            yield session

    def health_check(self) -> bool:
        """Check database connection health.

        Returns:
            bool: True if database is healthy, False otherwise
        """
        try:
            with Session(self.engine) as session:
                session.exec(select(1)).first()
                return True
        except SQLAlchemyError as e:
            logger.error("database_health_check_failed", error=str(e))
            return False

    def dispose(self) -> None:
        self.engine.dispose()


# Create a global singleton instance
database_service = DatabaseService()


def get_session() -> Iterator[Session]:
    yield from database_service.get_session()

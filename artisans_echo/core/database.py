"""
Database configuration and session management

The engine and session factory live on an ``AppContext`` that the application
lifespan builds at startup and disposes at shutdown. Request handlers reach it
through the ``get_db`` dependency instead of module-level globals.
"""
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi import Request
from typing import Generator, Optional
import logging
import time

from artisans_echo.core.exceptions import AppError, StoreUnavailable

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for ``database_url``"""
    if not database_url:
        raise ValueError("DATABASE_URL is not configured")

    if _is_sqlite(database_url):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_memory_sqlite(database_url):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=echo, **kwargs)

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,  # Recycle connections after 30 min
        echo=echo,
    )


class AppContext:
    """Owns the store engine and session factory for one application instance"""

    def __init__(self, database_url: str, echo: bool = False, retry_interval: float = 5.0):
        self.database_url = database_url
        self.retry_interval = retry_interval
        self.last_attempt: Optional[float] = None
        self.engine = build_engine(database_url, echo=echo)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )
        self.ready = False

    def ping(self) -> bool:
        """Run ``SELECT 1`` against the store"""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def connect(self, create_tables: bool = True) -> bool:
        """
        Verify the store answers and create missing tables.

        Marks the context ready on success. A failure is logged and leaves the
        context in degraded mode rather than aborting startup.
        """
        self.last_attempt = time.monotonic()
        try:
            self.ping()
            if create_tables:
                # Models must be imported so their tables are registered on Base
                import artisans_echo.models  # noqa: F401
                Base.metadata.create_all(bind=self.engine)
            self.ready = True
            logger.info("Database connected and tables initialized")
        except Exception as e:
            self.ready = False
            logger.error(f"Failed to connect to database: {e}")
        return self.ready

    def ensure_ready(self) -> bool:
        """
        Reconnect a degraded context, at most once per ``retry_interval``

        Returns:
            True if the store is usable
        """
        if self.ready:
            return True
        if self.last_attempt is not None and time.monotonic() - self.last_attempt < self.retry_interval:
            return False
        logger.info("Retrying database connection")
        return self.connect()

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.ready = False
        self.engine.dispose()
        logger.info("Database engine disposed")


def get_context(request: Request) -> Optional[AppContext]:
    return getattr(request.app.state, "context", None)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Raises StoreUnavailable while the store is not connected; a degraded
    context is retried first.

    Example:
        @router.post("/artworks")
        def create_artwork(db: Session = Depends(get_db)):
            ...
    """
    context = get_context(request)
    if context is None or not context.ensure_ready():
        raise StoreUnavailable()

    db = context.session()
    try:
        yield db
    except Exception as e:
        if not isinstance(e, AppError):
            logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def get_read_db(request: Request) -> Generator[Optional[Session], None, None]:
    """
    Session dependency for read endpoints.

    Yields None while the store is unavailable so listings can degrade to an
    empty result instead of failing.
    """
    context = get_context(request)
    if context is None or not context.ensure_ready():
        logger.warning("Database not ready, serving empty result")
        yield None
        return

    db = context.session()
    try:
        yield db
    finally:
        db.close()

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import ArgumentError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from staff_portal.core.config import Settings
from staff_portal.core.errors import ConfigError, StoreUnavailable

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    # NoSuchModuleError (unknown dialect) is an ArgumentError; a missing driver is an ImportError.
    try:
        return _create_engine(make_url(settings.DATABASE_URL), settings.POOL_TIMEOUT_SECONDS)
    except (ArgumentError, ImportError) as exc:
        raise ConfigError(f"Invalid DATABASE_URL: {exc}") from exc


def _create_engine(url: URL, timeout: float) -> Engine:
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            # Single shared connection, otherwise each checkout sees an empty database.
            return create_engine(
                url,
                future=True,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, future=True, connect_args={"timeout": timeout})

    return create_engine(
        url,
        future=True,
        pool_pre_ping=True,
        pool_timeout=timeout,
        connect_args={"connect_timeout": max(1, int(timeout))},
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


def get_db(request: Request) -> Generator[Session, None, None]:
    session = request.app.state.session_factory()
    try:
        try:
            session.connection()
        except (OperationalError, PoolTimeoutError) as exc:
            logger.warning("store_unavailable", extra={"error": str(exc)})
            raise StoreUnavailable("Store connection could not be acquired") from exc
        yield session
    finally:
        session.close()

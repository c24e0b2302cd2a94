from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from contextlib import contextmanager
from typing import Generator
import logging

from wanderlog.config.settings import get_settings
from wanderlog.core.exceptions import StoreOperationError

logger = logging.getLogger(__name__)

settings = get_settings()


def build_engine(url: str, echo: bool = False, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=echo, pool_pre_ping=True, future=True, **kwargs)


engine = build_engine(settings.database_url, echo=settings.db_echo)
SessionLocal = sessionmaker(
    bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
)

# SQLAlchemy declarative base for models
Base = declarative_base()


@contextmanager
def db_session():
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def store_operation(session: Session, failure_message: str):
    """Run store calls; any SQLAlchemy failure rolls back and becomes a StoreOperationError."""
    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error(
            f"{failure_message}: {type(exc).__name__}: {exc}",
            extra={"failure_message": failure_message},
        )
        raise StoreOperationError(failure_message) from exc


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create any missing tables."""
    # Import all models so SQLAlchemy can register them
    import wanderlog.models  # noqa: F401

    Base.metadata.create_all(bind=engine)

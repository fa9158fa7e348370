import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from .errors import StoreInitError
from .settings import get_settings

log = logging.getLogger(__name__)

IN_MEMORY_URL = "sqlite://"

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass


def _enable_sqlite_fks(dbapi_conn, _record):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.close()


def make_engine(url: str, *, echo: bool = False) -> Engine:
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in (IN_MEMORY_URL, "sqlite:///:memory:"):
            # one connection, so every session sees the same in-memory database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    eng = create_engine(url, **kwargs)
    if eng.dialect.name == "sqlite":
        event.listen(eng, "connect", _enable_sqlite_fks)
    return eng


def make_in_memory_engine(*, echo: bool = False) -> Engine:
    """Throwaway store for tests and previews; nothing is written to disk."""
    return make_engine(IN_MEMORY_URL, echo=echo)


def init_db(bind: Engine) -> None:
    """Create all tables. Failure here is fatal for the application."""
    from . import models  # noqa: F401  # registers the mappers on Base.metadata

    try:
        Base.metadata.create_all(bind)
    except SQLAlchemyError as e:
        log.critical("could not open store at %s: %s", bind.url, e)
        raise StoreInitError(str(e)) from e


settings = get_settings()

# Create the SQLAlchemy engine
engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

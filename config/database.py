"""Database engine, session factory and the request-scoped unit of work dependency."""
import logging
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from config.settings import DATABASE_URL, DB_ECHO
from models.category import CategoryModel  # noqa: F401
from models.movie import MovieModel  # noqa: F401
from repositories.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def build_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """Create an engine; SQLite gets cross-thread access and enforced foreign keys."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, echo=DB_ECHO, future=True, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    logger.debug(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
    return engine


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


def get_unit_of_work() -> Generator[UnitOfWork, None, None]:
    """FastAPI dependency: one unit of work per request, closed when the response is sent."""
    with UnitOfWork(SessionLocal) as uow:
        yield uow

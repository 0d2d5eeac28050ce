"""Unit of work: both repositories over one session with a single commit point."""
import logging
from pathlib import Path
from typing import Callable, Optional

from alembic import command
from alembic.config import Config
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.base_model import base as Base
from models.category import CategoryModel
from models.movie import MovieModel
from repositories.category_repository import CategoryRepository
from repositories.movie_repository import MovieRepository
from validation import ClassicMovieRule, EntityValidationError, ensure_valid, validate_category, validate_movie

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


class UnitOfWork:
    """
    Groups the category and movie repositories behind one ``save_changes`` call.

    Use it as a context manager; the session is closed on exit and anything not
    committed is rolled back, whether or not saving succeeded::

        with UnitOfWork(SessionLocal) as uow:
            uow.categories.insert(CategoryModel(name="Drama"))
            uow.save_changes()
    """

    def __init__(self, session_factory: Callable[[], Session], classic_rule: Optional[ClassicMovieRule] = None):
        self.session_factory = session_factory
        self.classic_rule = classic_rule or ClassicMovieRule()
        self.session: Optional[Session] = None
        self.categories: Optional[CategoryRepository] = None
        self.movies: Optional[MovieRepository] = None

    def __enter__(self) -> 'UnitOfWork':
        self.session = self.session_factory()
        self.categories = CategoryRepository(self.session)
        self.movies = MovieRepository(self.session, self.classic_rule)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            if exc_type is not None:
                self.session.rollback()
        finally:
            self.session.close()
            self.session = None

    def save_changes(self) -> int:
        """
        Validate and commit everything staged in this unit of work.

        Returns the number of inserted, updated and deleted entities. On a validation
        failure the session is rolled back and ``EntityValidationError`` is raised.
        """
        session = self.session
        changed = [obj for obj in session.dirty if session.is_modified(obj)]
        pending = list(session.new) + changed
        affected = len(pending) + len(session.deleted)

        try:
            for entity in pending:
                self._validate(entity)
            session.commit()
        except EntityValidationError as e:
            session.rollback()
            logger.warning(f"Rejected save batch: {e.message}")
            raise
        except IntegrityError as e:
            session.rollback()
            logger.warning(f"Rejected save batch, constraint violated: {e.orig}")
            raise EntityValidationError("The changes violate a database constraint") from e

        logger.info(f"Saved {affected} change(s)")
        return affected

    def _validate(self, entity) -> None:
        if isinstance(entity, MovieModel):
            ensure_valid(validate_movie(entity, self.classic_rule), entity)
        elif isinstance(entity, CategoryModel):
            ensure_valid(validate_category(entity), entity)

    def create_database(self) -> None:
        Base.metadata.create_all(bind=self.session.get_bind())
        logger.info("Database schema created")

    def migrate_database(self) -> None:
        """Apply all alembic migrations to the database this unit of work is bound to."""
        alembic_cfg = Config(str(ALEMBIC_INI))
        alembic_cfg.set_main_option("script_location", str(ALEMBIC_INI.parent / "alembic"))
        with self.session.get_bind().begin() as connection:
            alembic_cfg.attributes["connection"] = connection
            command.upgrade(alembic_cfg, "head")
        logger.info("Database migrated to head")

    def delete_database(self) -> None:
        Base.metadata.drop_all(bind=self.session.get_bind())
        logger.warning("Database schema dropped")

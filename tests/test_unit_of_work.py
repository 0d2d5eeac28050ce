"""Tests for the unit of work: commit point, all-or-nothing saves and store lifecycle."""
import pytest
from sqlalchemy import inspect
from sqlalchemy.orm import sessionmaker

from models.category import CategoryModel
from models.movie import MovieModel
from repositories.unit_of_work import UnitOfWork
from validation import EntityValidationError


class TestSaveChanges:

    def test_save_changes_returns_affected_count(self, unit_of_work):
        category = CategoryModel(name="Drama")
        unit_of_work.categories.insert(category)
        unit_of_work.movies.add_range([
            MovieModel(title="Casablanca", year=1942, duration=102, category=category),
            MovieModel(title="Forrest Gump", year=1994, duration=142, category=category),
        ])

        assert unit_of_work.save_changes() == 3
        assert category.id_key is not None
        assert unit_of_work.movies.get_count() == 2

    def test_save_changes_counts_updates_and_deletes(self, unit_of_work, seeded_db):
        drama = unit_of_work.categories.get_by_id(seeded_db["drama"].id_key)
        drama.name = "Dramas"
        unit_of_work.categories.delete(unit_of_work.categories.get_by_id(seeded_db["documentary"].id_key))

        assert unit_of_work.save_changes() == 2
        assert [c.name for c in unit_of_work.categories.get_all()] == ["Action", "Dramas"]

    def test_nothing_to_save(self, unit_of_work):
        assert unit_of_work.save_changes() == 0

    def test_invalid_movie_rejects_whole_batch(self, unit_of_work):
        category = CategoryModel(name="Epic")
        movie = MovieModel(title="Ben-Hur", year=1959, duration=100, category=category)
        unit_of_work.categories.insert(category)
        unit_of_work.movies.insert(movie)
        # changed after staging, caught when saving
        movie.duration = 212

        with pytest.raises(EntityValidationError) as exc_info:
            unit_of_work.save_changes()

        assert "1960" in exc_info.value.message
        assert "120" in exc_info.value.message
        assert unit_of_work.categories.get_all() == []
        assert unit_of_work.movies.get_count() == 0

    def test_invalid_category_rename_is_rejected(self, unit_of_work, seeded_db):
        drama = unit_of_work.categories.get_by_id(seeded_db["drama"].id_key)
        drama.name = "D"

        with pytest.raises(EntityValidationError):
            unit_of_work.save_changes()

        assert unit_of_work.categories.get_by_id(seeded_db["drama"].id_key).name == "Drama"

    def test_constraint_violation_becomes_validation_error(self, unit_of_work):
        unit_of_work.movies.insert(MovieModel(title="Orphan", year=2009, duration=123, category_id=999))

        with pytest.raises(EntityValidationError):
            unit_of_work.save_changes()

        assert unit_of_work.movies.get_count() == 0


class TestLifecycle:

    def test_repositories_share_one_session(self, unit_of_work):
        assert unit_of_work.categories.session is unit_of_work.movies.session

    def test_session_closed_on_exit(self, db_session_factory):
        with UnitOfWork(db_session_factory) as uow:
            uow.categories.insert(CategoryModel(name="Western"))

        assert uow.session is None
        with UnitOfWork(db_session_factory) as uow:
            assert uow.categories.get_all() == []

    def test_rollback_when_block_raises(self, db_session_factory):
        with pytest.raises(RuntimeError):
            with UnitOfWork(db_session_factory) as uow:
                uow.categories.insert(CategoryModel(name="Western"))
                uow.session.flush()
                raise RuntimeError("boom")

        with UnitOfWork(db_session_factory) as uow:
            assert uow.categories.get_all() == []

    def test_delete_and_create_database(self, engine, db_session_factory):
        with UnitOfWork(db_session_factory) as uow:
            uow.delete_database()
            assert inspect(engine).get_table_names() == []

            uow.create_database()
            assert set(inspect(engine).get_table_names()) == {"categories", "movies"}

    def test_migrate_database(self, engine):
        factory = sessionmaker(bind=engine)

        with UnitOfWork(factory) as uow:
            uow.migrate_database()
            uow.categories.insert(CategoryModel(name="Drama"))
            uow.save_changes()

        table_names = set(inspect(engine).get_table_names())
        assert {"categories", "movies", "alembic_version"} <= table_names

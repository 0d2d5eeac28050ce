"""Unit tests for SQLAlchemy models."""
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from models.category import CategoryModel as Category
from models.movie import MovieModel as Movie


class TestCategoryModel:
    """Tests for Category model."""

    def test_create_category(self, db_session_factory):
        session = db_session_factory()
        category = Category(name="Drama")
        session.add(category)
        session.commit()

        assert category.id_key is not None
        assert category.name == "Drama"

    def test_category_name_required(self, db_session_factory):
        session = db_session_factory()
        session.add(Category())
        with pytest.raises(IntegrityError):
            session.commit()

    def test_category_name_not_unique(self, db_session_factory):
        session = db_session_factory()
        session.add_all([Category(name="Drama"), Category(name="Drama")])
        session.commit()

        assert session.scalar(select(func.count(Category.id_key))) == 2

    def test_category_movies_relationship(self, db_session_factory):
        session = db_session_factory()
        category = Category(name="Drama")
        session.add(category)
        session.flush()

        session.add(Movie(title="Casablanca", year=1942, duration=102, category_id=category.id_key))
        session.commit()
        session.refresh(category)

        assert len(category.movies) == 1
        assert category.movies[0].title == "Casablanca"

    def test_delete_category_deletes_its_movies(self, db_session_factory):
        session = db_session_factory()
        category = Category(name="Drama")
        category.movies = [
            Movie(title="Casablanca", year=1942, duration=102),
            Movie(title="Forrest Gump", year=1994, duration=142),
        ]
        session.add(category)
        session.commit()

        session.delete(category)
        session.commit()

        assert session.scalar(select(func.count(Movie.id_key))) == 0


class TestMovieModel:
    """Tests for Movie model."""

    def test_create_movie(self, db_session_factory):
        session = db_session_factory()
        category = Category(name="Drama")
        session.add(category)
        session.flush()

        movie = Movie(title="Casablanca", year=1942, duration=102, category_id=category.id_key)
        session.add(movie)
        session.commit()

        assert movie.id_key is not None
        assert movie.category.name == "Drama"

    def test_movie_required_fields(self, db_session_factory):
        session = db_session_factory()
        session.add(Movie())
        with pytest.raises(IntegrityError):
            session.commit()

    def test_movie_requires_existing_category(self, db_session_factory):
        session = db_session_factory()
        session.add(Movie(title="Orphan", year=2009, duration=123, category_id=999))
        with pytest.raises(IntegrityError):
            session.commit()

"""Pytest configuration and fixtures for testing."""
import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app modules
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['CLASSIC_MOVIE_UNTIL_YEAR'] = '1960'
os.environ['CLASSIC_MOVIE_MAX_DURATION'] = '120'

from config.database import build_engine, get_unit_of_work  # noqa: E402
from main import create_fastapi_app  # noqa: E402
from models.base_model import base as Base  # noqa: E402
from models.category import CategoryModel  # noqa: E402
from models.movie import MovieModel  # noqa: E402
from repositories.unit_of_work import UnitOfWork  # noqa: E402
from validation import ClassicMovieRule  # noqa: E402


@pytest.fixture(scope="function")
def engine(tmp_path):
    """File-based SQLite database, one per test."""
    test_engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session_factory(engine) -> Generator[sessionmaker, None, None]:
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)
    yield SessionLocal


@pytest.fixture
def classic_rule() -> ClassicMovieRule:
    """Movies up to 1960 may last at most 120 minutes."""
    return ClassicMovieRule(classic_until_year=1960, max_classic_duration=120)


@pytest.fixture(scope="function")
def unit_of_work(db_session_factory, classic_rule) -> Generator[UnitOfWork, None, None]:
    with UnitOfWork(db_session_factory, classic_rule) as uow:
        yield uow


@pytest.fixture(scope="function")
def api_client(db_session_factory: sessionmaker, classic_rule) -> Generator[TestClient, None, None]:
    """Create a test client for API testing."""
    app = create_fastapi_app()

    def override_get_unit_of_work():
        with UnitOfWork(db_session_factory, classic_rule) as uow:
            yield uow

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    with TestClient(app) as test_client:
        yield test_client


# Model fixtures
@pytest.fixture
def sample_category_data():
    return {"CategoryName": "Horror"}


@pytest.fixture
def sample_movie_data():
    return {"Title": "Psycho", "Year": 1960, "Duration": 109}


# Database seeding fixtures
@pytest.fixture(scope="function")
def seeded_db(db_session_factory: sessionmaker) -> dict:
    """
    Three categories:

    - Drama: three movies (1990, 1990, 1991), 382 minutes in total
    - Action: two movies (1999, 2015), 256 minutes in total
    - Documentary: no movies
    """
    session = db_session_factory()
    try:
        drama = CategoryModel(name="Drama")
        action = CategoryModel(name="Action")
        documentary = CategoryModel(name="Documentary")
        session.add_all([drama, action, documentary])
        session.flush()

        movies = [
            MovieModel(title="Goodfellas", year=1990, duration=145, category_id=drama.id_key),
            MovieModel(title="Awakenings", year=1990, duration=121, category_id=drama.id_key),
            MovieModel(title="Barton Fink", year=1991, duration=116, category_id=drama.id_key),
            MovieModel(title="The Matrix", year=1999, duration=136, category_id=action.id_key),
            MovieModel(title="Mad Max: Fury Road", year=2015, duration=120, category_id=action.id_key),
        ]
        session.add_all(movies)
        session.commit()

        return {
            "drama": drama,
            "action": action,
            "documentary": documentary,
            "movies": movies,
        }
    finally:
        session.close()

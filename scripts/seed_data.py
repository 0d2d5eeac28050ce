"""
Seed the database with categories and movies from a JSON file.

    python scripts/seed_data.py [data/movies.json] [--reset]
"""
import json
import os
import sys

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.database import SessionLocal  # noqa: E402
from config.logging_config import setup_logging  # noqa: E402
from models.category import CategoryModel  # noqa: E402
from models.movie import MovieModel  # noqa: E402
from repositories.unit_of_work import UnitOfWork  # noqa: E402
from validation import EntityValidationError  # noqa: E402

DEFAULT_DATA_FILE = os.path.join(os.path.dirname(__file__), '..', 'data', 'movies.json')


def seed(uow: UnitOfWork, categories_data: list) -> int:
    """Stage every category with its movies and save them as one batch."""
    for cat_data in categories_data:
        category = CategoryModel(name=cat_data["name"])
        uow.categories.insert(category)
        uow.movies.add_range(
            MovieModel(title=m["title"], year=m["year"], duration=m["duration"], category=category)
            for m in cat_data.get("movies", [])
        )
    return uow.save_changes()


def main(argv: list) -> int:
    setup_logging()
    reset = "--reset" in argv
    paths = [arg for arg in argv if not arg.startswith("--")]
    data_file = paths[0] if paths else DEFAULT_DATA_FILE

    try:
        with open(data_file, "r", encoding="utf-8") as f:
            categories_data = json.load(f)
    except FileNotFoundError:
        print(f"Error: {data_file} not found.")
        return 1

    with UnitOfWork(SessionLocal) as uow:
        if reset:
            print("Recreating database...")
            uow.delete_database()
            uow.create_database()
        else:
            uow.migrate_database()

        try:
            saved = seed(uow, categories_data)
        except EntityValidationError as e:
            print(f"Error: seed data rejected: {e.message}")
            return 1

        print(f"Saved {saved} entities.")
        print(f"Movies in database: {uow.movies.get_count()}")
        longest = uow.movies.get_longest_movie()
        if longest is not None:
            print(f"Longest movie: {longest.title} ({longest.duration} min)")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

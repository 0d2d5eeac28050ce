from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.movie import MovieModel
from repositories.base_repository import BaseRepository
from validation import ClassicMovieRule, ensure_valid, validate_movie


class MovieRepository(BaseRepository[MovieModel]):

    def __init__(self, session: Session, classic_rule: ClassicMovieRule):
        super().__init__(session, MovieModel)
        self.classic_rule = classic_rule

    def get_all(self) -> List[MovieModel]:
        return list(self.session.scalars(
            select(MovieModel).order_by(MovieModel.title, MovieModel.id_key)
        ))

    def get_all_by_category_id(self, category_id: int) -> List[MovieModel]:
        return list(self.session.scalars(
            select(MovieModel)
            .where(MovieModel.category_id == category_id)
            .order_by(MovieModel.title, MovieModel.id_key)
        ))

    def get_count(self) -> int:
        return self.session.scalar(select(func.count(MovieModel.id_key)))

    def get_longest_movie(self) -> Optional[MovieModel]:
        """Movie with the longest duration (smallest title wins a tie), None if there are no movies."""
        return self.session.scalars(
            select(MovieModel)
            .order_by(MovieModel.duration.desc(), MovieModel.title, MovieModel.id_key)
            .limit(1)
        ).first()

    def insert(self, movie: MovieModel) -> None:
        ensure_valid(validate_movie(movie, self.classic_rule), movie)
        super().insert(movie)

    def add_range(self, movies: Iterable[MovieModel]) -> None:
        """Stage several movies; nothing is staged if any of them is invalid."""
        movies = list(movies)
        for movie in movies:
            ensure_valid(validate_movie(movie, self.classic_rule), movie)
        self.session.add_all(movies)

"""Category repository with the category-level report queries."""
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from models.category import CategoryModel
from models.movie import MovieModel
from repositories.base_repository import BaseRepository
from validation import ensure_valid, validate_category


@dataclass
class CategoryStatisticEntry:
    category: CategoryModel
    number_of_movies: int
    total_duration: int


@dataclass
class CategoryAverageEntry:
    category: CategoryModel
    average_length: float


class CategoryRepository(BaseRepository[CategoryModel]):

    def __init__(self, session: Session):
        super().__init__(session, CategoryModel)

    def get_all(self) -> List[CategoryModel]:
        """All categories ordered by name."""
        return list(self.session.scalars(
            select(CategoryModel).order_by(CategoryModel.name, CategoryModel.id_key)
        ))

    def get_by_id_with_movies(self, id_key: int) -> Optional[CategoryModel]:
        return self.session.scalars(
            select(CategoryModel)
            .options(selectinload(CategoryModel.movies))
            .where(CategoryModel.id_key == id_key)
        ).one_or_none()

    def _statistics_query(self):
        number_of_movies = func.count(MovieModel.id_key)
        total_duration = func.coalesce(func.sum(MovieModel.duration), 0)
        stmt = (
            select(CategoryModel, number_of_movies.label("number_of_movies"),
                   total_duration.label("total_duration"))
            .outerjoin(MovieModel, MovieModel.category_id == CategoryModel.id_key)
            .group_by(CategoryModel.id_key)
        )
        return stmt, number_of_movies

    def get_category_statistics(self) -> List[CategoryStatisticEntry]:
        """
        Number of movies and total duration per category, ordered by category name.

        Categories without movies are included with zero counts.
        """
        stmt, _ = self._statistics_query()
        rows = self.session.execute(stmt.order_by(CategoryModel.name, CategoryModel.id_key))
        return [CategoryStatisticEntry(category, count, int(total)) for category, count, total in rows]

    def get_category_with_most_movies(self) -> Optional[CategoryStatisticEntry]:
        """The category with the most movies (smallest name wins a tie), None if there are no categories."""
        stmt, number_of_movies = self._statistics_query()
        row = self.session.execute(
            stmt.order_by(number_of_movies.desc(), CategoryModel.name, CategoryModel.id_key).limit(1)
        ).first()
        if row is None:
            return None
        category, count, total = row
        return CategoryStatisticEntry(category, count, int(total))

    def get_categories_with_average_length_of_movies(self) -> List[CategoryAverageEntry]:
        """
        Average movie duration per category, longest average first, then by name.

        Categories without movies have no average and are left out.
        """
        average_length = func.avg(MovieModel.duration)
        rows = self.session.execute(
            select(CategoryModel, average_length.label("average_length"))
            .join(MovieModel, MovieModel.category_id == CategoryModel.id_key)
            .group_by(CategoryModel.id_key)
            .order_by(average_length.desc(), CategoryModel.name, CategoryModel.id_key)
        )
        return [CategoryAverageEntry(category, float(average)) for category, average in rows]

    def get_year_with_most_publications_for_category(self, category_name: str) -> Optional[int]:
        """Year with the most movies in the named category; the earliest year wins a tie."""
        publications = func.count(MovieModel.id_key)
        row = self.session.execute(
            select(MovieModel.year, publications)
            .join(MovieModel.category)
            .where(CategoryModel.name == category_name)
            .group_by(MovieModel.year)
            .order_by(publications.desc(), MovieModel.year)
            .limit(1)
        ).first()
        return row.year if row is not None else None

    def insert(self, category: CategoryModel) -> None:
        ensure_valid(validate_category(category), category)
        super().insert(category)

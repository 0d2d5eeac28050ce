"""Read-only report endpoints backed by the category repository's aggregate queries."""
from typing import List

from fastapi import Depends, status

from config.database import get_unit_of_work
from controllers.base_controller_impl import BaseControllerImpl
from repositories.unit_of_work import UnitOfWork
from schemas.statistics_schema import CategoryAverageLengthSchema, CategoryStatisticSchema, TopYearSchema


class StatisticsController(BaseControllerImpl):

    def __init__(self):
        super().__init__(prefix="/statistics", tags=["Statistics"])

    def _register_routes(self):

        @self.router.get("/categories", response_model=List[CategoryStatisticSchema],
                         status_code=status.HTTP_200_OK)
        async def get_category_statistics(uow: UnitOfWork = Depends(get_unit_of_work)):
            return [CategoryStatisticSchema.from_entry(entry) for entry in uow.categories.get_category_statistics()]

        @self.router.get("/categories/most-movies", response_model=CategoryStatisticSchema,
                         status_code=status.HTTP_200_OK)
        async def get_category_with_most_movies(uow: UnitOfWork = Depends(get_unit_of_work)):
            entry = self._found_or_404(uow.categories.get_category_with_most_movies(), "No categories stored")
            return CategoryStatisticSchema.from_entry(entry)

        @self.router.get("/categories/average-length", response_model=List[CategoryAverageLengthSchema],
                         status_code=status.HTTP_200_OK)
        async def get_average_length_per_category(uow: UnitOfWork = Depends(get_unit_of_work)):
            entries = uow.categories.get_categories_with_average_length_of_movies()
            return [CategoryAverageLengthSchema.from_entry(entry) for entry in entries]

        @self.router.get("/categories/{category_name}/top-year", response_model=TopYearSchema,
                         status_code=status.HTTP_200_OK)
        async def get_top_year_for_category(category_name: str, uow: UnitOfWork = Depends(get_unit_of_work)):
            year = self._found_or_404(
                uow.categories.get_year_with_most_publications_for_category(category_name),
                f"No movies stored for category '{category_name}'",
            )
            return TopYearSchema(category_name=category_name, year=year)

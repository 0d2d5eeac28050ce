"""Category endpoints: listing, lookup with movies, create, rename and delete."""
import logging
from typing import List

from fastapi import Depends, Request, Response, status

from config.database import get_unit_of_work
from controllers.base_controller_impl import BaseControllerImpl
from models.category import CategoryModel
from repositories.unit_of_work import UnitOfWork
from schemas.category_schema import CategoryCreatedSchema, CategorySchema, CategoryWithMoviesSchema
from schemas.movie_schema import MovieSchema

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"


class CategoryController(BaseControllerImpl):

    def __init__(self):
        super().__init__(prefix="/categories", tags=["Categories"])

    def _register_routes(self):

        @self.router.get("", response_model=List[str], status_code=status.HTTP_200_OK)
        async def get_categories(uow: UnitOfWork = Depends(get_unit_of_work)):
            """Names of all categories, sorted alphabetically."""
            return [category.name for category in uow.categories.get_all()]

        @self.router.get("/{id_key}", response_model=CategoryWithMoviesSchema, status_code=status.HTTP_200_OK,
                         name="get_category")
        async def get_category(id_key: int, uow: UnitOfWork = Depends(get_unit_of_work)):
            category = self._found_or_404(uow.categories.get_by_id_with_movies(id_key), CATEGORY_NOT_FOUND)
            return CategoryWithMoviesSchema.from_model(category)

        @self.router.get("/{id_key}/movies", response_model=List[MovieSchema], status_code=status.HTTP_200_OK)
        async def get_movies_by_category(id_key: int, uow: UnitOfWork = Depends(get_unit_of_work)):
            category = self._found_or_404(uow.categories.get_by_id_with_movies(id_key), CATEGORY_NOT_FOUND)
            return CategoryWithMoviesSchema.from_model(category).movies

        @self.router.post("", response_model=CategoryCreatedSchema, status_code=status.HTTP_201_CREATED)
        async def create_category(request: Request, response: Response, schema_in: CategorySchema,
                                  uow: UnitOfWork = Depends(get_unit_of_work)):
            category = CategoryModel(name=schema_in.category_name)
            try:
                uow.categories.insert(category)
            except ValueError as e:
                raise self._bad_request(e)
            self._save_changes(uow)

            logger.info(f"Created category {category.id_key} '{category.name}'")
            response.headers["Location"] = str(request.url_for("get_category", id_key=category.id_key))
            return CategoryCreatedSchema(id_key=category.id_key, category_name=category.name)

        @self.router.put("/{id_key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def update_category(id_key: int, schema_in: CategorySchema,
                                  uow: UnitOfWork = Depends(get_unit_of_work)):
            category = self._found_or_404(uow.categories.get_by_id(id_key), CATEGORY_NOT_FOUND)
            category.name = schema_in.category_name
            self._save_changes(uow)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.router.delete("/{id_key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def delete_category(id_key: int, uow: UnitOfWork = Depends(get_unit_of_work)):
            category = self._found_or_404(uow.categories.get_by_id(id_key), CATEGORY_NOT_FOUND)
            uow.categories.delete(category)
            self._save_changes(uow)
            logger.info(f"Deleted category {id_key}")
            return Response(status_code=status.HTTP_204_NO_CONTENT)

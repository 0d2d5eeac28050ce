"""Category schemas with validation."""
from typing import List

from pydantic import Field

from schemas.base_schema import BaseSchema
from schemas.movie_schema import MovieSchema
from validation.rules import MIN_CATEGORY_NAME_LENGTH


class CategorySchema(BaseSchema):
    """Request body for creating or renaming a category."""

    category_name: str = Field(..., alias="CategoryName", min_length=MIN_CATEGORY_NAME_LENGTH,
                               description="Category name (at least 2 characters)")


class CategoryWithMoviesSchema(BaseSchema):
    category_name: str = Field(..., alias="CategoryName")
    movies: List[MovieSchema] = Field(default_factory=list, alias="Movies")

    @classmethod
    def from_model(cls, category) -> 'CategoryWithMoviesSchema':
        return cls(
            category_name=category.name,
            movies=[MovieSchema.from_model(movie) for movie in category.movies],
        )


class CategoryCreatedSchema(BaseSchema):
    id_key: int = Field(..., alias="Id")
    category_name: str = Field(..., alias="CategoryName")

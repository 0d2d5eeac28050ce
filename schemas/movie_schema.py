"""Movie schemas with validation."""
from pydantic import Field

from schemas.base_schema import BaseSchema


class MovieSchema(BaseSchema):
    title: str = Field(..., alias="Title", min_length=1)
    year: int = Field(..., alias="Year")
    duration: int = Field(..., alias="Duration", gt=0, description="Duration in minutes")

    @classmethod
    def from_model(cls, movie) -> 'MovieSchema':
        return cls(title=movie.title, year=movie.year, duration=movie.duration)


class MovieCreateSchema(MovieSchema):
    """Request body for adding a movie to an existing category."""

    category_id: int = Field(..., alias="CategoryId")

from pydantic import Field

from schemas.base_schema import BaseSchema


class CategoryStatisticSchema(BaseSchema):
    category_name: str = Field(..., alias="CategoryName")
    number_of_movies: int = Field(..., alias="NumberOfMovies")
    total_duration: int = Field(..., alias="TotalDuration")

    @classmethod
    def from_entry(cls, entry) -> 'CategoryStatisticSchema':
        return cls(
            category_name=entry.category.name,
            number_of_movies=entry.number_of_movies,
            total_duration=entry.total_duration,
        )


class CategoryAverageLengthSchema(BaseSchema):
    category_name: str = Field(..., alias="CategoryName")
    average_length: float = Field(..., alias="AverageLength")

    @classmethod
    def from_entry(cls, entry) -> 'CategoryAverageLengthSchema':
        return cls(category_name=entry.category.name, average_length=entry.average_length)


class TopYearSchema(BaseSchema):
    category_name: str = Field(..., alias="CategoryName")
    year: int = Field(..., alias="Year")


class MovieCountSchema(BaseSchema):
    count: int = Field(..., alias="Count")

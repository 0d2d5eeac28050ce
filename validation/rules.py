"""
Write-time validation rules for categories and movies.

The rules are plain functions returning a ``ValidationResult``. Repositories call them
before staging an entity and the unit of work calls them again before committing, so an
invalid batch is rejected as a whole.
"""
from dataclasses import dataclass
from typing import Optional

from config.settings import CLASSIC_MOVIE_MAX_DURATION, CLASSIC_MOVIE_UNTIL_YEAR

MIN_CATEGORY_NAME_LENGTH = 2


class EntityValidationError(ValueError):
    """Raised when a staged entity breaks a domain rule."""

    def __init__(self, message: str, entity=None):
        super().__init__(message)
        self.message = message
        self.entity = entity


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None

    @classmethod
    def success(cls) -> 'ValidationResult':
        return cls(True)

    @classmethod
    def failure(cls, message: str) -> 'ValidationResult':
        return cls(False, message)


@dataclass(frozen=True)
class ClassicMovieRule:
    """Movies released up to ``classic_until_year`` may last at most ``max_classic_duration`` minutes."""

    classic_until_year: int = CLASSIC_MOVIE_UNTIL_YEAR
    max_classic_duration: int = CLASSIC_MOVIE_MAX_DURATION

    def message(self) -> str:
        return (f"Classical movies (until year '{self.classic_until_year}') may not last longer "
                f"than {self.max_classic_duration} minutes!")


def validate_movie(movie, rule: ClassicMovieRule) -> ValidationResult:
    """Check the field constraints of a movie and the classic-movie duration cap."""
    if not movie.title or not movie.title.strip():
        return ValidationResult.failure("Movie title must not be empty")
    if movie.year is None:
        return ValidationResult.failure("Movie year is required")
    if movie.duration is None or movie.duration <= 0:
        return ValidationResult.failure("Movie duration must be a positive number of minutes")
    if movie.year <= rule.classic_until_year and movie.duration > rule.max_classic_duration:
        return ValidationResult.failure(rule.message())
    return ValidationResult.success()


def validate_category(category) -> ValidationResult:
    name = (category.name or "").strip()
    if len(name) < MIN_CATEGORY_NAME_LENGTH:
        return ValidationResult.failure(
            f"Category name must have at least {MIN_CATEGORY_NAME_LENGTH} characters")
    return ValidationResult.success()


def ensure_valid(result: ValidationResult, entity=None) -> None:
    if not result.is_valid:
        raise EntityValidationError(result.message, entity)

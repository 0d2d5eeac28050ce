from validation.rules import (
    ClassicMovieRule,
    EntityValidationError,
    ValidationResult,
    ensure_valid,
    validate_category,
    validate_movie,
)

__all__ = [
    'ClassicMovieRule',
    'EntityValidationError',
    'ValidationResult',
    'ensure_valid',
    'validate_category',
    'validate_movie',
]

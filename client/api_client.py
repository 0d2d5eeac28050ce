"""HTTP client for the movie manager API."""
import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from config.settings import API_BASE_URL, API_TIMEOUT
from schemas.movie_schema import MovieSchema

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Base class for errors talking to the API."""


class ApiConnectionError(ApiClientError):
    """The API could not be reached (refused connection, DNS failure, timeout)."""


class ApiResponseError(ApiClientError):
    """The API answered with a non-success status code."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ApiClientError):
    """The API answered, but the body is not the JSON shape we expect."""


class MovieManagerClient:
    """
    Thin async wrapper around ``httpx.AsyncClient``.

    Usage:
        async with MovieManagerClient("http://localhost:5000") as client:
            names = await client.get_categories()
    """

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = API_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> 'MovieManagerClient':
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get_json(self, path: str) -> Any:
        try:
            response = await self._http.get(path)
        except httpx.RequestError as e:
            raise ApiConnectionError(f"GET {path} failed: {e}") from e

        if response.is_error:
            raise ApiResponseError(
                f"GET {path} failed with status {response.status_code}", response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"GET {path} did not return JSON") from e

    async def get_categories(self) -> List[Any]:
        """The raw JSON elements of ``GET /api/categories``."""
        data = await self._get_json("/api/categories")
        if not isinstance(data, list):
            raise MalformedResponseError("Expected a JSON array of categories")
        return data

    async def get_movies_for_category(self, category_id: int) -> List[MovieSchema]:
        """Movies of a category, sorted by title."""
        data = await self._get_json(f"/api/categories/{category_id}/movies")
        if not isinstance(data, list):
            raise MalformedResponseError("Expected a JSON array of movies")
        try:
            movies = [MovieSchema.model_validate(item) for item in data]
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected movie payload: {e}") from e
        logger.debug(f"Fetched {len(movies)} movies for category {category_id}")
        return sorted(movies, key=lambda movie: movie.title)

"""Movie endpoints."""
import logging
from typing import List

from fastapi import Depends, Request, Response, status

from config.database import get_unit_of_work
from controllers.base_controller_impl import BaseControllerImpl
from models.movie import MovieModel
from repositories.unit_of_work import UnitOfWork
from schemas.movie_schema import MovieCreateSchema, MovieSchema
from schemas.statistics_schema import MovieCountSchema

logger = logging.getLogger(__name__)

MOVIE_NOT_FOUND = "Movie not found"


class MovieController(BaseControllerImpl):
    """
    Controller for the Movie entity.

    Movies are created one at a time; the classic-movie rule is checked before the
    movie is staged and again when the unit of work is saved.
    """

    def __init__(self):
        super().__init__(prefix="/movies", tags=["Movies"])

    def _register_routes(self):
        # Literal paths first so they are not captured by /{id_key}

        @self.router.get("", response_model=List[MovieSchema], status_code=status.HTTP_200_OK)
        async def get_movies(uow: UnitOfWork = Depends(get_unit_of_work)):
            return [MovieSchema.from_model(movie) for movie in uow.movies.get_all()]

        @self.router.get("/count", response_model=MovieCountSchema, status_code=status.HTTP_200_OK)
        async def get_movie_count(uow: UnitOfWork = Depends(get_unit_of_work)):
            return MovieCountSchema(count=uow.movies.get_count())

        @self.router.get("/longest", response_model=MovieSchema, status_code=status.HTTP_200_OK)
        async def get_longest_movie(uow: UnitOfWork = Depends(get_unit_of_work)):
            movie = self._found_or_404(uow.movies.get_longest_movie(), "No movies stored")
            return MovieSchema.from_model(movie)

        @self.router.get("/{id_key}", response_model=MovieSchema, status_code=status.HTTP_200_OK, name="get_movie")
        async def get_movie(id_key: int, uow: UnitOfWork = Depends(get_unit_of_work)):
            movie = self._found_or_404(uow.movies.get_by_id(id_key), MOVIE_NOT_FOUND)
            return MovieSchema.from_model(movie)

        @self.router.post("", response_model=MovieSchema, status_code=status.HTTP_201_CREATED)
        async def create_movie(request: Request, response: Response, schema_in: MovieCreateSchema,
                               uow: UnitOfWork = Depends(get_unit_of_work)):
            if uow.categories.get_by_id(schema_in.category_id) is None:
                raise self._bad_request(ValueError(f"Category {schema_in.category_id} does not exist"))

            movie = MovieModel(
                title=schema_in.title,
                year=schema_in.year,
                duration=schema_in.duration,
                category_id=schema_in.category_id,
            )
            try:
                uow.movies.insert(movie)
            except ValueError as e:
                raise self._bad_request(e)
            self._save_changes(uow)

            logger.info(f"Created movie {movie.id_key} '{movie.title}'")
            response.headers["Location"] = str(request.url_for("get_movie", id_key=movie.id_key))
            return MovieSchema.from_model(movie)

        @self.router.delete("/{id_key}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def delete_movie(id_key: int, uow: UnitOfWork = Depends(get_unit_of_work)):
            movie = self._found_or_404(uow.movies.get_by_id(id_key), MOVIE_NOT_FOUND)
            uow.movies.delete(movie)
            self._save_changes(uow)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

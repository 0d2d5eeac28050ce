"""FastAPI application factory for the movie manager API."""
import logging
import os

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.logging_config import setup_logging
from controllers.category_controller import CategoryController
from controllers.movie_controller import MovieController
from controllers.statistics_controller import StatisticsController
from validation import EntityValidationError

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and parameters are reported as 400, not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def entity_validation_exception_handler(request: Request, exc: EntityValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_fastapi_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="Movie Manager API", version="1.0.0")

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(EntityValidationError, entity_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    for controller in (CategoryController(), MovieController(), StatisticsController()):
        app.include_router(controller.router, prefix=API_PREFIX)

    @app.get("/health_check", tags=["Health"])
    async def health_check():
        return {"status": "ok"}

    logger.info(f"Movie Manager API ready with {len(app.routes)} routes")
    return app


if __name__ == "__main__":
    uvicorn.run(
        "main:create_fastapi_app",
        factory=True,
        host=os.getenv('API_HOST', '127.0.0.1'),
        port=int(os.getenv('API_PORT', '5000')),
        reload=True,
    )

"""Base controller implementation module with FastAPI dependency injection."""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from repositories.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class BaseControllerImpl:
    """
    Base controller owning an ``APIRouter``.

    Subclasses register their endpoints in ``_register_routes``; every endpoint receives a
    request-scoped ``UnitOfWork`` through ``Depends(get_unit_of_work)``.
    """

    def __init__(self, prefix: str, tags: Optional[List[str]] = None):
        """
        Args:
            prefix: Path prefix of the router, e.g. ``/categories``
            tags: Optional list of tags for API documentation
        """
        self.router = APIRouter(prefix=prefix, tags=tags or [])
        self._register_routes()
        logger.debug(f"{type(self).__name__}: Registered {len(self.router.routes)} routes.")

    def _register_routes(self):
        raise NotImplementedError

    @staticmethod
    def _save_changes(uow: UnitOfWork) -> int:
        """Commit the unit of work, turning validation failures into a 400 response."""
        try:
            return uow.save_changes()
        except ValueError as e:
            raise BaseControllerImpl._bad_request(e)

    @staticmethod
    def _bad_request(error: ValueError) -> HTTPException:
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    @staticmethod
    def _found_or_404(instance, detail: str = "Not found"):
        if instance is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
        return instance

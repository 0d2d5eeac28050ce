"""Shared persistence operations for the entity repositories."""
import logging
from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.base_model import BaseModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository bound to a session owned by the unit of work.

    Repositories only stage changes; nothing is written until ``UnitOfWork.save_changes``.
    """

    def __init__(self, session: Session, model: Type[ModelType]):
        self.session = session
        self.model = model

    def get_by_id(self, id_key: int) -> Optional[ModelType]:
        """Return the entity with the given id, or None when it does not exist."""
        return self.session.scalars(
            select(self.model).where(self.model.id_key == id_key)
        ).one_or_none()

    def insert(self, instance: ModelType) -> None:
        self.session.add(instance)
        logger.debug(f"Staged new {self.model.__name__}")

    def delete(self, instance: ModelType) -> None:
        self.session.delete(instance)
        logger.debug(f"Staged removal of {self.model.__name__} {instance.id_key}")

"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common persistence operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def add(self, entity: ModelType) -> ModelType:
        """Persist a new entity and commit"""
        self.db.add(entity)
        self.db.commit()
        return entity

    def remove(self, entity: ModelType) -> None:
        """Delete a loaded entity and commit"""
        self.db.delete(entity)
        self.db.commit()

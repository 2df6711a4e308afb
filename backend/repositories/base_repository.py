"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from constants import ResultMessages
from dtos.response.business_card_response import ResultResponse
from .specifications import Specification

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Writes commit immediately, so each add/remove is its own unit of work.
    Store failures on writes are rolled back and reported through a
    ResultResponse instead of being raised.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def add(self, obj: T) -> ResultResponse:
        """
        Insert a new record.

        Args:
            obj: Model instance to insert

        Returns:
            ResultResponse; on failure the message carries the store error
        """
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return ResultResponse(succeeded=True, message=ResultMessages.ENTITY_ADDED)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"Insert into {self.model.__tablename__} failed: {e}")
            return ResultResponse(succeeded=False, message=ResultMessages.ADD_FAILED.format(error=e))

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        try:
            return self.db.get(self.model, id)
        except OverflowError:
            # Outside the column's integer range, so no row can have it
            logger.debug(f"Lookup of out-of-range id {id} in {self.model.__tablename__}")
            return None

    def get_all(self) -> List[T]:
        """
        Retrieve all records in store order.

        Returns:
            List of model instances
        """
        return self.db.query(self.model).all()

    def get_by_filter(self, spec: Optional[Specification[T]] = None) -> List[T]:
        """
        Retrieve records matching a Specification.

        Args:
            spec: Predicate to match; None matches every record

        Returns:
            List of matching model instances

        Example:
            spec = NameContainsSpec('Doe') & GenderEqualsSpec('male')
            cards = card_repo.get_by_filter(spec)
        """
        query = self.db.query(self.model)
        if spec is not None:
            query = query.filter(spec.to_sql_filter())
        return query.all()

    def remove(self, obj: T) -> ResultResponse:
        """
        Delete a record.

        Args:
            obj: Model instance to delete

        Returns:
            ResultResponse; on failure the message carries the store error
        """
        try:
            self.db.delete(obj)
            self.db.commit()
            return ResultResponse(succeeded=True, message=ResultMessages.ENTITY_REMOVED)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"Delete from {self.model.__tablename__} failed: {e}")
            return ResultResponse(succeeded=False, message=ResultMessages.REMOVE_FAILED.format(error=e))

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

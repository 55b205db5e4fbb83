"""Base repository with common database operations."""
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any

from sqlalchemy.orm import Session
from sqlalchemy import desc, asc

from exceptions import PersistenceError
from logging_config import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing common CRUD operations.

    Every storage failure is rolled back and re-raised as PersistenceError.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def get_by_id(self, id: str) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            id: Entity ID

        Returns:
            Entity or None if not found
        """
        try:
            return self.db.query(self.model).filter(
                self.model.id == id
            ).first()
        except Exception as e:
            logger.error("Lookup failed", model=self.model.__name__, id=id, error=str(e))
            raise PersistenceError(f"Failed to get {self.model.__name__}") from e

    def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        order_by: Optional[str] = "created_at",
        order_direction: str = "desc"
    ) -> List[ModelType]:
        """
        Get all entities with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            order_by: Field to order by
            order_direction: "asc" or "desc"

        Returns:
            List of entities
        """
        try:
            query = self.db.query(self.model)

            if order_by:
                order_field = getattr(self.model, order_by, None)
                if order_field is not None:
                    if order_direction == "asc":
                        query = query.order_by(asc(order_field))
                    else:
                        query = query.order_by(desc(order_field))

            return query.offset(skip).limit(limit).all()

        except Exception as e:
            logger.error("Listing failed", model=self.model.__name__, error=str(e))
            raise PersistenceError(f"Failed to get {self.model.__name__} list") from e

    def create(self, **kwargs) -> ModelType:
        """
        Create new entity.

        Args:
            **kwargs: Entity attributes

        Returns:
            Created entity
        """
        try:
            entity = self.model(**kwargs)
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)

            logger.info("Created entity", model=self.model.__name__, id=entity.id)
            return entity

        except Exception as e:
            self.db.rollback()
            logger.error("Create failed", model=self.model.__name__, error=str(e))
            raise PersistenceError(f"Failed to create {self.model.__name__}") from e

    def update_where(self, filters: List[Any], values: Dict[str, Any]) -> int:
        """
        Conditionally update rows in a single statement.

        The filters carry the precondition; callers treat zero affected
        rows as a failed precondition.

        Args:
            filters: SQLAlchemy filter expressions
            values: Column values to set

        Returns:
            Number of rows affected
        """
        try:
            affected = self.db.query(self.model).filter(*filters).update(
                values, synchronize_session=False
            )
            self.db.commit()
            return affected

        except Exception as e:
            self.db.rollback()
            logger.error("Conditional update failed", model=self.model.__name__, error=str(e))
            raise PersistenceError(f"Failed to update {self.model.__name__}") from e

    def delete_where(self, filters: List[Any]) -> int:
        """
        Conditionally delete rows in a single statement.

        Args:
            filters: SQLAlchemy filter expressions

        Returns:
            Number of rows deleted
        """
        try:
            affected = self.db.query(self.model).filter(*filters).delete(
                synchronize_session=False
            )
            self.db.commit()
            return affected

        except Exception as e:
            self.db.rollback()
            logger.error("Conditional delete failed", model=self.model.__name__, error=str(e))
            raise PersistenceError(f"Failed to delete {self.model.__name__}") from e

    def delete(self, id: str) -> bool:
        """
        Delete entity by ID.

        Args:
            id: Entity ID

        Returns:
            True if deleted, False if not found
        """
        deleted = self.delete_where([self.model.id == id]) > 0
        if deleted:
            logger.info("Deleted entity", model=self.model.__name__, id=id)
        return deleted

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count entities with optional filters.

        List values are matched with IN.

        Args:
            filters: Optional filter dictionary

        Returns:
            Count of entities
        """
        try:
            query = self.db.query(self.model)

            if filters:
                for key, value in filters.items():
                    column = getattr(self.model, key, None)
                    if column is None:
                        continue
                    if isinstance(value, (list, tuple, set)):
                        query = query.filter(column.in_(list(value)))
                    else:
                        query = query.filter(column == value)

            return query.count()

        except Exception as e:
            logger.error("Count failed", model=self.model.__name__, error=str(e))
            raise PersistenceError(f"Failed to count {self.model.__name__}") from e

    def exists(self, id: str) -> bool:
        """
        Check if entity exists by ID.

        Args:
            id: Entity ID

        Returns:
            True if exists, False otherwise
        """
        return self.count({"id": id}) > 0

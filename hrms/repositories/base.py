"""
Base repository providing common CRUD operations.

Repositories flush but never commit; the caller owns the transaction.
"""
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy import String, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


def applies_to_role(column, role: str):
    """
    Build a predicate matching rows whose comma-separated role list contains
    ``role`` as a whole entry (case-insensitive). NULL matches every role.
    """
    normalized = literal(",").concat(func.replace(column, " ", "")).concat(",")
    needle = f",{role.replace(' ', '').lower()},"
    return column.is_(None) | func.lower(normalized, type_=String).contains(needle, autoescape=True)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common CRUD operations.

    Subclass this to create model-specific repositories with additional queries.
    """

    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        """
        Initialize repository with database session and model class.

        Args:
            session: SQLAlchemy async session
            model: SQLAlchemy model class
        """
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Retrieve single record by primary key.

        Args:
            id: Integer primary key

        Returns:
            Model instance or None if not found
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs) -> ModelType:
        """
        Create new record from keyword arguments.

        Returns:
            Created model instance with server defaults loaded
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count records with optional filters.

        Args:
            filters: Dictionary of field: value filters

        Returns:
            Count of matching records
        """
        query = select(func.count()).select_from(self.model)
        if filters:
            query = self._apply_filters(query, filters)
        result = await self.session.execute(query)
        return result.scalar()

    def _apply_filters(self, query, filters: Dict[str, Any]):
        """Apply equality WHERE clauses for fields the model defines."""
        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)
        return query

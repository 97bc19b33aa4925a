"""Base repository with the CRUD operations the domain repositories share."""

from typing import Generic, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .session import get_session

# Generic type for ORM models
ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """Base repository bound to one ORM model.

    Subclasses should set the model_class attribute to their ORM model.

    Example:
        class UserRepository(BaseRepository[User]):
            model_class = User
    """

    model_class: Type[ModelT]

    def _get_session(self):
        """Get a database session context manager."""
        return get_session()

    def create(self, **kwargs) -> ModelT:
        """Insert a record and return it with generated columns loaded."""
        with self._get_session() as session:
            instance = self._create_session(session, **kwargs)
            session.refresh(instance)
            return instance

    def delete(self, id: int) -> bool:
        """Delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        with self._get_session() as session:
            instance = session.get(self.model_class, id)
            if instance is None:
                return False
            session.delete(instance)
            session.flush()
            return True

    def count(self) -> int:
        with self._get_session() as session:
            stmt = select(func.count()).select_from(self.model_class)
            return int(session.execute(stmt).scalar_one())

    def _create_session(self, session: Session, **kwargs) -> ModelT:
        """Create within an existing session."""
        instance = self.model_class(**kwargs)  # type: ignore[call-arg]
        session.add(instance)
        session.flush()
        return instance

# ticket_system/user/services.py
import logging
import uuid
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ticket_system.auth.security import hash_password
from ticket_system.core.errors import NotFoundError, ServiceError, StorageError
from ticket_system.user.models import User, UserRole

logger = logging.getLogger(__name__)


class UserService:
    """User CRUD straight over the session; no separate repository."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _commit(self, action: str, user: User | None = None) -> None:
        try:
            self.db.commit()
            if user is not None:
                self.db.refresh(user)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("Failed to %s: %s", action, exc)
            raise StorageError(f"failed to {action}: {exc}") from exc

    def _first(self, *criteria) -> User:
        try:
            user = self.db.query(User).filter(*criteria).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to get user: {exc}") from exc
        if user is None:
            raise NotFoundError("user not found")
        return user

    def create_user(self, email: str, password: str, role: UserRole) -> User:
        try:
            hashed = hash_password(password)
        except ValueError as exc:
            raise ServiceError(f"failed to hash password: {exc}") from exc

        user = User(id=uuid.uuid4(), email=email, password=hashed, role=role)
        self.db.add(user)
        self._commit("create user", user)
        logger.info("Created user %s (role=%s)", user.id, user.role.value)
        return user

    def get_user_by_id(self, user_id: UUID) -> User:
        return self._first(User.id == user_id)

    def get_user_by_email(self, email: str) -> User:
        return self._first(User.email == email)

    def list_users(self) -> list[User]:
        try:
            return self.db.query(User).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to list users: {exc}") from exc

    def update_user(self, user_id: UUID, email: str, role: UserRole) -> User:
        user = self.get_user_by_id(user_id)
        user.email = email
        user.role = role
        self._commit("update user", user)
        logger.info("Updated user %s", user.id)
        return user

    def delete_user(self, user_id: UUID) -> None:
        try:
            self.db.query(User).filter(User.id == user_id).delete(synchronize_session="fetch")
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to delete user: {exc}") from exc
        self._commit("delete user")
        logger.info("Deleted user %s", user_id)

    def ensure_admin(self, email: str, password: str) -> User:
        """Create an admin with ``email`` unless a user with that email already exists."""
        try:
            return self.get_user_by_email(email)
        except NotFoundError:
            logger.info("Bootstrapping admin user %s", email)
            return self.create_user(email, password, UserRole.ADMIN)

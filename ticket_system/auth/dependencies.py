# ticket_system/auth/dependencies.py
import logging
from uuid import UUID

from fastapi import Depends, Request
from jose import JWTError
from sqlalchemy.orm import Session

from ticket_system.auth.security import decode_access_token
from ticket_system.core.config import Settings, get_settings
from ticket_system.core.database import get_db
from ticket_system.core.errors import AuthenticationError, AuthorizationError, NotFoundError
from ticket_system.user.models import User, UserRole
from ticket_system.user.services import UserService

logger = logging.getLogger(__name__)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def _bearer_token(request: Request) -> str:
    header = request.headers.get("Authorization")
    if not header:
        raise AuthenticationError("Authorization header required")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Invalid authorization header format")
    return token.strip()


def require_auth(
    request: Request,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the bearer token to a live user and attach it to ``request.state.user``."""
    token = _bearer_token(request)
    try:
        claims = decode_access_token(token, settings.JWT_SECRET, settings.JWT_ALGORITHM)
        user_id = UUID(str(claims["sub"]))
    except (JWTError, KeyError, ValueError):
        logger.debug("Rejected bearer token for %s", request.url.path)
        raise AuthenticationError("Invalid or expired token") from None

    try:
        user = users.get_user_by_id(user_id)
    except NotFoundError:
        logger.info("Token subject %s no longer exists", user_id)
        raise AuthenticationError("User not found") from None

    request.state.user = user
    return user


def require_admin(user: User = Depends(require_auth)) -> User:
    if user.role != UserRole.ADMIN:
        raise AuthorizationError("Admin access required")
    return user

# ticket_system/auth/routes.py
import logging
from datetime import timedelta

from fastapi import APIRouter, Depends

from ticket_system.auth.dependencies import get_user_service
from ticket_system.auth.schemas import LoginRequest, TokenOut
from ticket_system.auth.security import create_access_token, verify_password
from ticket_system.core.config import Settings, get_settings
from ticket_system.core.errors import AuthenticationError, NotFoundError
from ticket_system.user.services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["Auth"])


@router.post("/login", response_model=TokenOut)
def login(
    credentials: LoginRequest,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    try:
        user = users.get_user_by_email(credentials.email)
    except NotFoundError:
        user = None
    if user is None or not verify_password(user.password, credentials.password):
        logger.info("Failed login for %s", credentials.email)
        raise AuthenticationError("Invalid credentials")

    token = create_access_token(
        str(user.id),
        settings.JWT_SECRET,
        settings.JWT_ALGORITHM,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return TokenOut(access_token=token)

# ticket_system/user/routes.py
from uuid import UUID

from fastapi import APIRouter, Depends, status

from ticket_system.auth.dependencies import get_user_service, require_admin
from ticket_system.core.errors import ApiError, NotFoundError
from ticket_system.core.metrics import MetricsSink, get_metrics
from ticket_system.core.schemas import MessageOut
from ticket_system.user.schemas import UserCreate, UserOut, UserUpdate
from ticket_system.user.services import UserService

router = APIRouter(
    prefix="/api/v1/admin/users",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


def parse_user_id(user_id: str, metrics: MetricsSink = Depends(get_metrics)) -> UUID:
    try:
        return UUID(user_id)
    except ValueError:
        metrics.error("invalid_id")
        raise ApiError("Invalid user ID") from None


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, users: UserService = Depends(get_user_service)):
    return users.create_user(payload.email, payload.password, payload.role)


@router.get("", response_model=list[UserOut])
def list_users(users: UserService = Depends(get_user_service)):
    return users.list_users()


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: UUID = Depends(parse_user_id), users: UserService = Depends(get_user_service)):
    try:
        return users.get_user_by_id(user_id)
    except NotFoundError:
        raise ApiError("User not found", status.HTTP_404_NOT_FOUND) from None


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    payload: UserUpdate,
    user_id: UUID = Depends(parse_user_id),
    users: UserService = Depends(get_user_service),
):
    return users.update_user(user_id, payload.email, payload.role)


@router.delete("/{user_id}", response_model=MessageOut)
def delete_user(user_id: UUID = Depends(parse_user_id), users: UserService = Depends(get_user_service)):
    users.delete_user(user_id)
    return {"message": "User deleted successfully"}

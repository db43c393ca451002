# ticket_system/user/schemas.py
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from ticket_system.user.models import UserRole


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole


class UserUpdate(BaseModel):
    email: EmailStr
    role: UserRole


class UserOut(BaseModel):
    id: UUID
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

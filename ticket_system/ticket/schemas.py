# ticket_system/ticket/schemas.py
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from ticket_system.ticket.models import TicketPriority, TicketStatus


class TicketBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class TicketCreate(TicketBase):
    created_by: str = Field(..., min_length=1)


class TicketUpdate(TicketBase):
    status: TicketStatus
    priority: TicketPriority
    assigned_to: str | None = None


class TicketOut(BaseModel):
    id: UUID
    title: str
    description: str
    status: TicketStatus
    priority: TicketPriority
    created_by: str
    assigned_to: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

# ticket_system/ticket/models.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, String, Text, Uuid

from ticket_system.core.database import Base


class TicketStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _values(enum_cls):
    return [member.value for member in enum_cls]


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        Enum(TicketStatus, native_enum=False, length=20, values_callable=_values),
        nullable=False,
        default=TicketStatus.OPEN,
        index=True,
    )
    priority = Column(
        Enum(TicketPriority, native_enum=False, length=20, values_callable=_values),
        nullable=False,
        default=TicketPriority.MEDIUM,
    )
    created_by = Column(String, nullable=False)
    assigned_to = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    @classmethod
    def new(cls, title: str, description: str, created_by: str) -> "Ticket":
        """Build an unsaved ticket: fresh id, open, medium priority, both timestamps equal."""
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid.uuid4(),
            title=title,
            description=description,
            status=TicketStatus.OPEN,
            priority=TicketPriority.MEDIUM,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )

# ticket_system/ticket/services.py
import logging
from datetime import datetime, timezone
from typing import Protocol
from uuid import UUID

from ticket_system.core.errors import ServiceError
from ticket_system.core.metrics import MetricsSink
from ticket_system.ticket.models import Ticket, TicketPriority, TicketStatus
from ticket_system.ticket.repository import TicketRepository

logger = logging.getLogger(__name__)


class TicketServiceProtocol(Protocol):
    def create_ticket(self, title: str, description: str, created_by: str) -> Ticket: ...

    def get_ticket(self, ticket_id: UUID) -> Ticket: ...

    def get_all_tickets(self) -> list[Ticket]: ...

    def update_ticket(
        self,
        ticket_id: UUID,
        title: str,
        description: str,
        status: TicketStatus,
        priority: TicketPriority,
        assigned_to: str | None,
    ) -> Ticket: ...

    def delete_ticket(self, ticket_id: UUID) -> None: ...


def _status_label(status) -> str:
    return TicketStatus(status).value


class TicketService:
    """Ticket use cases: one repository call chain per operation, metrics alongside.

    The status gauge is adjusted in separate steps around the row write
    (old status down before, new status up after), so it is not atomic with
    the write. A failed write after the decrement leaves the gauge one short,
    and concurrent updates of one ticket can make it drift.
    """

    def __init__(self, repository: TicketRepository, metrics: MetricsSink) -> None:
        self.repository = repository
        self.metrics = metrics

    def create_ticket(self, title: str, description: str, created_by: str) -> Ticket:
        ticket = Ticket.new(title, description, created_by)
        try:
            ticket = self.repository.create(ticket)
        except ServiceError:
            self.metrics.error("create_ticket")
            raise
        self.metrics.ticket_operation("create")
        self.metrics.ticket_status_added(_status_label(ticket.status))
        logger.info("Created ticket %s", ticket.id)
        return ticket

    def get_ticket(self, ticket_id: UUID) -> Ticket:
        try:
            ticket = self.repository.get_by_id(ticket_id)
        except ServiceError:
            self.metrics.error("get_ticket")
            raise
        self.metrics.ticket_operation("get")
        return ticket

    def get_all_tickets(self) -> list[Ticket]:
        try:
            tickets = self.repository.get_all()
        except ServiceError:
            self.metrics.error("get_all_tickets")
            raise
        self.metrics.ticket_operation("get_all")
        return tickets

    def update_ticket(
        self,
        ticket_id: UUID,
        title: str,
        description: str,
        status: TicketStatus,
        priority: TicketPriority,
        assigned_to: str | None,
    ) -> Ticket:
        try:
            ticket = self.repository.get_by_id(ticket_id)
        except ServiceError:
            self.metrics.error("update_ticket")
            raise

        self.metrics.ticket_status_removed(_status_label(ticket.status))

        ticket.title = title
        ticket.description = description
        ticket.status = status
        ticket.priority = priority
        ticket.assigned_to = assigned_to
        ticket.updated_at = datetime.now(timezone.utc)

        try:
            ticket = self.repository.update(ticket)
        except ServiceError:
            self.metrics.error("update_ticket")
            raise

        self.metrics.ticket_status_added(_status_label(ticket.status))
        self.metrics.ticket_operation("update")
        logger.info("Updated ticket %s (status=%s)", ticket.id, _status_label(ticket.status))
        return ticket

    def delete_ticket(self, ticket_id: UUID) -> None:
        try:
            ticket = self.repository.get_by_id(ticket_id)
            last_status = _status_label(ticket.status)
            self.repository.delete(ticket_id)
        except ServiceError:
            self.metrics.error("delete_ticket")
            raise

        self.metrics.ticket_status_removed(last_status)
        self.metrics.ticket_operation("delete")
        logger.info("Deleted ticket %s", ticket_id)

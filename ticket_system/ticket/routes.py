# ticket_system/ticket/routes.py
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ticket_system.core.database import get_db
from ticket_system.core.errors import ApiError, NotFoundError
from ticket_system.core.metrics import MetricsSink, get_metrics
from ticket_system.core.schemas import MessageOut
from ticket_system.ticket.repository import TicketRepository
from ticket_system.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from ticket_system.ticket.services import TicketService, TicketServiceProtocol

router = APIRouter(prefix="/api/v1/tickets", tags=["Tickets"])


def get_ticket_service(
    db: Session = Depends(get_db),
    metrics: MetricsSink = Depends(get_metrics),
) -> TicketServiceProtocol:
    return TicketService(TicketRepository(db), metrics)


def parse_ticket_id(ticket_id: str, metrics: MetricsSink = Depends(get_metrics)) -> UUID:
    try:
        return UUID(ticket_id)
    except ValueError:
        metrics.error("invalid_id")
        raise ApiError("Invalid ticket ID") from None


@router.post("/", response_model=TicketOut, status_code=status.HTTP_201_CREATED)
def create(ticket: TicketCreate, service: TicketServiceProtocol = Depends(get_ticket_service)):
    return service.create_ticket(ticket.title, ticket.description, ticket.created_by)


@router.get("/", response_model=list[TicketOut])
def list_all(service: TicketServiceProtocol = Depends(get_ticket_service)):
    return service.get_all_tickets()


@router.get("/{ticket_id}", response_model=TicketOut)
def get(
    ticket_id: UUID = Depends(parse_ticket_id),
    service: TicketServiceProtocol = Depends(get_ticket_service),
):
    try:
        return service.get_ticket(ticket_id)
    except NotFoundError:
        raise ApiError("Ticket not found", status.HTTP_404_NOT_FOUND) from None


# update and delete surface a missing ticket as a 500, unlike get
@router.put("/{ticket_id}", response_model=TicketOut)
def update(
    payload: TicketUpdate,
    ticket_id: UUID = Depends(parse_ticket_id),
    service: TicketServiceProtocol = Depends(get_ticket_service),
):
    return service.update_ticket(
        ticket_id,
        payload.title,
        payload.description,
        payload.status,
        payload.priority,
        payload.assigned_to,
    )


@router.delete("/{ticket_id}", response_model=MessageOut)
def delete(
    ticket_id: UUID = Depends(parse_ticket_id),
    service: TicketServiceProtocol = Depends(get_ticket_service),
):
    service.delete_ticket(ticket_id)
    return {"message": "Ticket deleted successfully"}

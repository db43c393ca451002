# ticket_system/ticket/repository.py
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ticket_system.core.errors import NotFoundError, StorageError
from ticket_system.ticket.models import Ticket


class TicketRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, ticket: Ticket) -> Ticket:
        try:
            self.db.add(ticket)
            self.db.commit()
            self.db.refresh(ticket)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to create ticket: {exc}") from exc
        return ticket

    def get_by_id(self, ticket_id: UUID) -> Ticket:
        try:
            ticket = self.db.query(Ticket).filter(Ticket.id == ticket_id).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to get ticket: {exc}") from exc
        if ticket is None:
            raise NotFoundError("ticket not found")
        return ticket

    def get_all(self) -> list[Ticket]:
        try:
            return self.db.query(Ticket).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to list tickets: {exc}") from exc

    def update(self, ticket: Ticket) -> Ticket:
        # full-row write by primary key; existence is the caller's concern
        try:
            ticket = self.db.merge(ticket)
            self.db.commit()
            self.db.refresh(ticket)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to update ticket: {exc}") from exc
        return ticket

    def delete(self, ticket_id: UUID) -> None:
        # zero matched rows is not an error here
        try:
            self.db.query(Ticket).filter(Ticket.id == ticket_id).delete(synchronize_session="fetch")
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StorageError(f"failed to delete ticket: {exc}") from exc

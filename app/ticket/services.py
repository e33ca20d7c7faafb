# app/ticket/services.py
import logging

from sqlalchemy.orm import Session
from app.core.exceptions import ResourceNotFoundError
from app.ticket.models import Ticket
from app.ticket.schemas import TicketCreate, TicketUpdate

logger = logging.getLogger(__name__)


def get_all_tickets(db: Session) -> list[Ticket]:
    return db.query(Ticket).order_by(Ticket.id).all()

def get_ticket(db: Session, ticket_id: int) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()

def get_by_id(db: Session, ticket_id: int) -> Ticket:
    db_ticket = get_ticket(db, ticket_id)
    if not db_ticket:
        raise ResourceNotFoundError()
    return db_ticket

def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    db_ticket = Ticket(**payload.model_dump())
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    logger.info("Created ticket %s", db_ticket.id)
    return db_ticket

def save_ticket(db: Session, ticket: Ticket) -> Ticket:
    """Commit the ticket's in-memory state, images included."""
    db.add(ticket)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(ticket)
    return ticket

def update_ticket(db: Session, ticket_id: int, payload: TicketUpdate) -> Ticket:
    db_ticket = get_by_id(db, ticket_id)
    # an explicit null leaves the field as it is
    for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_ticket, field, value)
    return save_ticket(db, db_ticket)

def delete_ticket(db: Session, ticket_id: int) -> Ticket:
    db_ticket = get_by_id(db, ticket_id)
    db.delete(db_ticket)
    db.commit()
    logger.info("Deleted ticket %s", ticket_id)
    return db_ticket


class SqlTicketStore:
    """Ticket lookup and update bound to one session."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, ticket_id: int) -> Ticket:
        return get_by_id(self.db, ticket_id)

    def update(self, ticket: Ticket) -> Ticket:
        return save_ticket(self.db, ticket)

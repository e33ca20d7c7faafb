# app/ticket/routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.ticket.enums import TicketStatus
from app.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from app.ticket import services as ticket_service
router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.post("/", response_model=TicketOut, status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    return ticket_service.create_ticket(db, ticket)

@router.get("/", response_model=list[TicketOut])
def list_all(
    status: TicketStatus | None = Query(default=None, description="Filter by status"),
    db: Session = Depends(get_db),
):
    items = ticket_service.get_all_tickets(db)
    if status:
        items = [t for t in items if t.status == status]
    return items


# unknown ids raise ResourceNotFoundError, answered with 404 by the app's handler
@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: int, db: Session = Depends(get_db)):
    return ticket_service.get_by_id(db, ticket_id)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(ticket_id: int, ticket: TicketUpdate, db: Session = Depends(get_db)):
    return ticket_service.update_ticket(db, ticket_id, ticket)


@router.delete("/{ticket_id}", response_model=TicketOut)
def delete(ticket_id: int, db: Session = Depends(get_db)):
    return ticket_service.delete_ticket(db, ticket_id)

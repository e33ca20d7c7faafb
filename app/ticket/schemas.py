# app/ticket/schemas.py
from pydantic import BaseModel, Field
from app.ticket.enums import TicketStatus


class TicketImageOut(BaseModel):
    image_name: str

    model_config = {"from_attributes": True}


class TicketBase(BaseModel):
    message: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

class TicketCreate(TicketBase):
    pass

class TicketUpdate(BaseModel):
    message: str | None = Field(default=None, min_length=1)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    status: TicketStatus | None = None

class TicketOut(TicketBase):
    id: int
    status: TicketStatus
    images: list[TicketImageOut] = []

    model_config = {"from_attributes": True}

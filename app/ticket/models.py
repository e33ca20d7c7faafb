# app/ticket/models.py
from sqlalchemy import Column, Enum, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.ticket.enums import TicketStatus


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    message = Column(String, nullable=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    status = Column(Enum(TicketStatus), default=TicketStatus.NEW, nullable=False, index=True)

    images = relationship(
        "TicketImage",
        back_populates="ticket",
        cascade="all, delete-orphan",
        order_by="TicketImage.id",
    )

    def has_image(self, image_name: str) -> bool:
        return any(image.image_name == image_name for image in self.images)

    def __repr__(self) -> str:
        return f"<Ticket id={self.id} status={self.status} images={len(self.images)}>"


class TicketImage(Base):
    """Metadata of an image stored on disk under the same name."""

    __tablename__ = "ticket_images"
    __table_args__ = (UniqueConstraint("ticket_id", "image_name", name="uq_ticket_image_name"),)

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id", ondelete="CASCADE"), nullable=False, index=True)
    image_name = Column(String, nullable=False)

    ticket = relationship("Ticket", back_populates="images")

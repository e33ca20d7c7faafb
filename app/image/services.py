# app/image/services.py
import logging
from pathlib import Path
from typing import BinaryIO, Protocol

from app.core.exceptions import (
    ImageAlreadyExistsError,
    ImageNotFoundError,
    ImageSaveError,
    InvalidImageNameError,
)
from app.image.locks import TicketLocks
from app.image.storage import ImageStorage
from app.ticket.models import Ticket, TicketImage

logger = logging.getLogger(__name__)


class TicketStore(Protocol):
    def get_by_id(self, ticket_id: int) -> Ticket: ...

    def update(self, ticket: Ticket) -> Ticket: ...


class NamedStream(Protocol):
    """Anything shaped like an UploadFile."""

    filename: str | None
    file: BinaryIO


def validate_image_name(name: str | None) -> str:
    if not name or name in (".", "..") or any(c in name for c in ("/", "\\", "\x00")):
        raise InvalidImageNameError(f"Invalid image name: {name!r}")
    return name


class ImageService:
    """Stores ticket images on disk and records them on the owning ticket.

    Every call on a ticket runs under that ticket's lock, so the duplicate
    check, the file write and the ticket update are never interleaved with
    another call on the same ticket.
    """

    def __init__(self, tickets: TicketStore, storage: ImageStorage, locks: TicketLocks | None = None):
        self.tickets = tickets
        self.storage = storage
        self.locks = locks if locks is not None else TicketLocks()

    def save_image(self, ticket_id: int, image: NamedStream) -> Ticket:
        with self.locks.hold(ticket_id):
            ticket = self.tickets.get_by_id(ticket_id)
            name = validate_image_name(image.filename)
            if ticket.has_image(name):
                logger.info("Ticket %s already has image %r", ticket_id, name)
                raise ImageAlreadyExistsError(f"Image {name!r} already exists for ticket {ticket_id}")

            self.storage.write(ticket_id, name, image.file)

            ticket_image = TicketImage(image_name=name)
            ticket.images.append(ticket_image)
            try:
                saved = self.tickets.update(ticket)
            except Exception as exc:
                logger.error("Saving image %r on ticket %s failed, removing file: %s", name, ticket_id, exc)
                if ticket_image in ticket.images:
                    ticket.images.remove(ticket_image)
                self.storage.delete(ticket_id, name)
                raise ImageSaveError(f"Could not save image {name!r} for ticket {ticket_id}") from exc

        logger.info("Saved image %r on ticket %s", name, ticket_id)
        return saved

    def get_ticket_images(self, ticket_id: int) -> list[Path]:
        # files are not checked for existence here
        with self.locks.hold(ticket_id):
            ticket = self.tickets.get_by_id(ticket_id)
            return [self.storage.path_for(ticket_id, image.image_name) for image in ticket.images]

    def get_ticket_image(self, ticket_id: int, image_name: str) -> Path:
        with self.locks.hold(ticket_id):
            ticket = self.tickets.get_by_id(ticket_id)
            if not ticket.has_image(image_name):
                raise ImageNotFoundError(f"Image {image_name!r} not found for ticket {ticket_id}")
            path = self.storage.path_for(ticket_id, image_name)
        if not path.is_file():
            logger.warning("Image %r of ticket %s is missing from %s", image_name, ticket_id, path.parent)
            raise ImageNotFoundError(f"Image {image_name!r} not found for ticket {ticket_id}")
        return path

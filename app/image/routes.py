# app/image/routes.py
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.image.locks import TicketLocks
from app.image.schemas import ImageFileOut
from app.image.services import ImageService
from app.image.storage import ImageStorage
from app.ticket.schemas import TicketOut
from app.ticket.services import SqlTicketStore

router = APIRouter(prefix="/tickets", tags=["Images"])

# shared by every request so saves on one ticket are serialized
ticket_locks = TicketLocks()


def get_image_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ImageService:
    storage = ImageStorage(settings.IMAGES_FOLDER, partition_by_ticket=settings.IMAGES_PER_TICKET)
    return ImageService(SqlTicketStore(db), storage, ticket_locks)


@router.post("/{ticket_id}/images", response_model=TicketOut, status_code=201)
def upload(
    ticket_id: int,
    image: UploadFile = File(...),
    service: ImageService = Depends(get_image_service),
):
    return service.save_image(ticket_id, image)


@router.get("/{ticket_id}/images", response_model=list[ImageFileOut])
def list_images(ticket_id: int, service: ImageService = Depends(get_image_service)):
    return [
        ImageFileOut(image_name=path.name, size=path.stat().st_size if path.is_file() else None)
        for path in service.get_ticket_images(ticket_id)
    ]


@router.get("/{ticket_id}/images/{image_name}")
def download(ticket_id: int, image_name: str, service: ImageService = Depends(get_image_service)):
    path = service.get_ticket_image(ticket_id, image_name)
    return FileResponse(path, filename=path.name)

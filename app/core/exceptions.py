# app/core/exceptions.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DimoError(Exception):
    """Base exception for the application."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class ResourceNotFoundError(DimoError):
    """The requested ticket has no backing record."""
    status_code = status.HTTP_404_NOT_FOUND
    message = "Ticket not found"


class ImageNotFoundError(ResourceNotFoundError):
    """The ticket has no such image, or its file is gone from storage."""
    message = "Image not found"


class ImageAlreadyExistsError(DimoError):
    """An image with the same name is already attached to the ticket."""
    status_code = status.HTTP_409_CONFLICT
    message = "Image already exists"


class InvalidImageNameError(DimoError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid image name"


class ImageStorageError(DimoError):
    """Writing the image file failed. The ticket was not touched."""
    message = "Could not store image"


class ImageSaveError(DimoError):
    """The ticket update failed after the file was written.

    The written file has already been removed when this is raised.
    """
    message = "Could not save image metadata"


async def dimo_error_handler(request: Request, exc: DimoError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DimoError, dimo_error_handler)


__all__ = [
    "DimoError",
    "ResourceNotFoundError",
    "ImageNotFoundError",
    "ImageAlreadyExistsError",
    "InvalidImageNameError",
    "ImageStorageError",
    "ImageSaveError",
    "register_exception_handlers",
]

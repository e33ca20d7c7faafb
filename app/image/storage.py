# app/image/storage.py
import logging
import shutil
from pathlib import Path
from typing import BinaryIO

from app.core.exceptions import ImageAlreadyExistsError, ImageStorageError

logger = logging.getLogger(__name__)


class ImageStorage:
    """Image files under a storage root.

    With ``partition_by_ticket`` each ticket gets its own folder
    (``root/<ticket_id>/<name>``), otherwise every file lands directly in
    ``root`` and a name already taken by another ticket is refused.
    """

    def __init__(self, root: str | Path, partition_by_ticket: bool = True):
        self.root = Path(root).resolve()
        self.partition_by_ticket = partition_by_ticket

    def folder_for(self, ticket_id: int) -> Path:
        if self.partition_by_ticket:
            return self.root / str(ticket_id)
        return self.root

    def path_for(self, ticket_id: int, name: str) -> Path:
        return self.folder_for(ticket_id) / name

    def write(self, ticket_id: int, name: str, stream: BinaryIO) -> Path:
        """Create the file, never replacing one that is already there."""
        path = self.path_for(ticket_id, name)
        opened = False
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            try:
                out = path.open("xb")
            except FileExistsError as exc:
                logger.warning("Refusing to overwrite existing file %s", path)
                raise ImageAlreadyExistsError(f"Image {name!r} already exists for ticket {ticket_id}") from exc
            opened = True
            with out:
                shutil.copyfileobj(stream, out)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            if opened:
                self.delete(ticket_id, name)
            raise ImageStorageError(f"Could not store image {name!r}") from exc
        logger.debug("Wrote %s (%d bytes)", path, path.stat().st_size)
        return path

    def delete(self, ticket_id: int, name: str) -> None:
        path = self.path_for(ticket_id, name)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.error("Failed to remove %s: %s", path, exc)

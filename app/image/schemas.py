# app/image/schemas.py
from pydantic import BaseModel


class ImageFileOut(BaseModel):
    image_name: str
    size: int | None = None  # None when the file is missing from storage

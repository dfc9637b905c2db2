# backend/schemas/image.py
from pydantic import BaseModel, ConfigDict

from models.image import Image


# Public view of a stored image; the binary payload is served by the download endpoint only
class ImageDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    file_name: str
    download_url: str


def image_to_dto(image: Image) -> ImageDto:
    return ImageDto(id=image.id, file_name=image.file_name, download_url=image.download_url)

# backend/services/image_service.py
"""
ImageService: zapis zdjęć produktów bezpośrednio w bazie (kolumna binarna).

Każdy plik zapisywany jest dwuetapowo: pierwszy flush nadaje id,
potem przepisujemy download_url, który to id zawiera. Cała paczka
plików idzie w jednej transakcji, błąd odczytu dowolnego pliku
wycofuje wszystkie wiersze.
"""

import logging
from typing import List

from fastapi import UploadFile
from sqlalchemy.orm import Session

import crud.image as image_crud
from config import settings
from database import transaction
from exceptions import EntityNotFoundError
from models.image import Image
from schemas.image import ImageDto, image_to_dto
from services import product_service

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def download_path() -> str:
    return f"{settings.API_PREFIX}/images/image/download/"


def _read_bytes(file: UploadFile) -> bytes:
    file.file.seek(0)
    return file.file.read()


def get_image_by_id(db: Session, image_id: int, with_payload: bool = False) -> Image:
    image = image_crud.get_by_id(db, image_id, with_payload=with_payload)
    if image is None:
        raise EntityNotFoundError("Image not found!")
    return image


def delete_image_by_id(db: Session, image_id: int) -> None:
    image = get_image_by_id(db, image_id)
    with transaction(db):
        image_crud.delete(db, image)
    logger.info("Image deleted: id=%s", image_id)


def update_image(db: Session, file: UploadFile, image_id: int) -> Image:
    image = get_image_by_id(db, image_id)
    with transaction(db):
        image.file_name = file.filename
        image.file_type = file.content_type or DEFAULT_CONTENT_TYPE
        image.image = _read_bytes(file)
        image_crud.save(db, image)
    return image


def save_images(db: Session, product_id: int, files: List[UploadFile]) -> List[ImageDto]:
    product = product_service.get_product_by_id(db, product_id)
    base_url = download_path()

    saved: List[Image] = []
    with transaction(db):
        for file in files:
            image = Image(
                file_name=file.filename,
                file_type=file.content_type or DEFAULT_CONTENT_TYPE,
                image=_read_bytes(file),
                download_url=base_url, # id is not known before the first flush
                product=product,
            )
            image_crud.save(db, image)

            image.download_url = f"{base_url}{image.id}"
            image_crud.save(db, image)
            saved.append(image)

    logger.info("Saved %d image(s) for product %s", len(saved), product_id)
    return [image_to_dto(img) for img in saved]

# backend/crud/image.py
from typing import List, Optional

from sqlalchemy.orm import Session, undefer

from models.image import Image


def get_by_id(db: Session, image_id: int, with_payload: bool = False) -> Optional[Image]:
    query = db.query(Image)
    if with_payload:
        query = query.options(undefer(Image.image))
    return query.filter(Image.id == image_id).first()


def get_by_product_id(db: Session, product_id: int) -> List[Image]:
    return db.query(Image).filter(Image.product_id == product_id).order_by(Image.id).all()


def save(db: Session, image: Image) -> Image:
    db.add(image)
    db.flush()
    return image


def delete(db: Session, image: Image) -> None:
    db.delete(image)
    db.flush()


def delete_by_product_id(db: Session, product_id: int) -> int:
    images = get_by_product_id(db, product_id)
    for img in images:
        db.delete(img)
    db.flush()
    return len(images)

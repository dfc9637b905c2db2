# backend/crud/category.py
from typing import List, Optional

from sqlalchemy.orm import Session

from models.category import Category


def get_all(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.id).all()


def get_by_id(db: Session, category_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def get_by_name(db: Session, name: str) -> Optional[Category]:
    return db.query(Category).filter(Category.name == name).first()


def exists_by_name(db: Session, name: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(Category.id).filter(Category.name == name)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    return query.first() is not None


def save(db: Session, category: Category) -> Category:
    """Add (or re-add) the row and flush so the generated id is available; the caller commits."""
    db.add(category)
    db.flush()
    return category


def delete(db: Session, category: Category) -> None:
    db.delete(category)
    db.flush()

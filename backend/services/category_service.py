# backend/services/category_service.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

import crud.category as category_crud
import crud.product as product_crud
from database import transaction
from exceptions import EntityExistsError, EntityNotFoundError
from models.category import Category

logger = logging.getLogger(__name__)


def add_category(db: Session, name: str) -> Category:
    if category_crud.exists_by_name(db, name):
        raise EntityExistsError(f"{name} already exists!")

    with transaction(db):
        category = category_crud.save(db, Category(name=name))
    db.refresh(category)
    logger.info("Category created: id=%s name=%s", category.id, category.name)
    return category


def update_category(db: Session, category_id: int, name: str) -> Category:
    category = get_category_by_id(db, category_id)
    if category_crud.exists_by_name(db, name, exclude_id=category_id):
        raise EntityExistsError(f"{name} already exists!")

    with transaction(db):
        category.name = name
        category_crud.save(db, category)
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> None:
    category = get_category_by_id(db, category_id)
    with transaction(db):
        # Products stay, they just lose the category link
        detached = product_crud.detach_category(db, category.id)
        category_crud.delete(db, category)
    logger.info("Category deleted: id=%s (%d products detached)", category_id, detached)


def get_all_categories(db: Session) -> List[Category]:
    return category_crud.get_all(db)


def get_category_by_id(db: Session, category_id: int) -> Category:
    category = category_crud.get_by_id(db, category_id)
    if category is None:
        raise EntityNotFoundError("Category not found!")
    return category


def get_category_by_name(db: Session, name: str) -> Optional[Category]:
    return category_crud.get_by_name(db, name)


def get_or_create_category(db: Session, name: str) -> Category:
    """Resolve a category by name, creating it when missing. Runs inside the caller's transaction."""
    category = category_crud.get_by_name(db, name)
    if category is None:
        category = category_crud.save(db, Category(name=name))
        logger.info("Category auto-created: %s", name)
    return category

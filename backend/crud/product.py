# backend/crud/product.py
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.category import Category
from models.product import Product


def get_all(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.id).all()


def get_by_id(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def exists_by_name_and_brand(db: Session, name: str, brand: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(Product.id).filter(Product.name == name, Product.brand == brand)
    if exclude_id is not None:
        query = query.filter(Product.id != exclude_id)
    return query.first() is not None


def get_by_category_id(db: Session, category_id: int) -> List[Product]:
    return db.query(Product).filter(Product.category_id == category_id).order_by(Product.id).all()


def get_by_category_name(db: Session, category: str) -> List[Product]:
    return (
        db.query(Product)
        .join(Category, Product.category_id == Category.id)
        .filter(Category.name == category)
        .order_by(Product.id)
        .all()
    )


def get_by_category_name_and_brand(db: Session, category: str, brand: str) -> List[Product]:
    return (
        db.query(Product)
        .join(Category, Product.category_id == Category.id)
        .filter(Category.name == category, Product.brand == brand)
        .order_by(Product.id)
        .all()
    )


def get_by_brand(db: Session, brand: str) -> List[Product]:
    return db.query(Product).filter(Product.brand == brand).order_by(Product.id).all()


def get_by_brand_and_name(db: Session, brand: str, name: str) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.brand == brand, Product.name == name)
        .order_by(Product.id)
        .all()
    )


def search_by_name(db: Session, name: str) -> List[Product]:
    # Case-insensitive literal substring: % and _ in the term are escaped
    return (
        db.query(Product)
        .filter(Product.name.icontains(name, autoescape=True))
        .order_by(Product.id)
        .all()
    )


def count_by_brand_and_name(db: Session, brand: str, name: str) -> int:
    return (
        db.query(func.count(Product.id))
        .filter(Product.brand == brand, Product.name == name)
        .scalar()
    )


def detach_category(db: Session, category_id: int) -> int:
    """Null the category reference of every product in the category; returns the number of rows touched."""
    products = get_by_category_id(db, category_id)
    for p in products:
        p.category = None
        p.category_id = None
    db.flush()
    return len(products)


def save(db: Session, product: Product) -> Product:
    db.add(product)
    db.flush()
    return product


def delete(db: Session, product: Product) -> None:
    db.delete(product)
    db.flush()

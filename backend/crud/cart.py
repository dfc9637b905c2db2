# backend/crud/cart.py
from typing import List

from sqlalchemy.orm import Session

from models.cart import CartItem


def get_items_by_product_id(db: Session, product_id: int) -> List[CartItem]:
    return db.query(CartItem).filter(CartItem.product_id == product_id).all()


def delete_item(db: Session, item: CartItem) -> None:
    db.delete(item)
    db.flush()

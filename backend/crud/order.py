# backend/crud/order.py
from typing import List

from sqlalchemy.orm import Session

from models.order import OrderItem


def get_items_by_product_id(db: Session, product_id: int) -> List[OrderItem]:
    return db.query(OrderItem).filter(OrderItem.product_id == product_id).all()


def save_item(db: Session, item: OrderItem) -> OrderItem:
    db.add(item)
    db.flush()
    return item

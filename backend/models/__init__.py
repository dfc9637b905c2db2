# backend/models/__init__.py
"""
Import wszystkich modeli, żeby SQLAlchemy (create_all) i Alembic widziały każdą tabelę.
"""

from .category import Category
from .product import Product
from .image import Image
from .users import User
from .cart import Cart, CartItem
from .order import Order, OrderItem, OrderStatus
from .log import Log

__all__ = [
    "Category",
    "Product",
    "Image",
    "User",
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Log",
]

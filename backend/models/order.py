# backend/models/order.py
import enum
from sqlalchemy import Column, Integer, Float, ForeignKey, DateTime, Enum, func
from sqlalchemy.orm import relationship
from database import Base

# Enumeration of possible order states
class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    order_date = Column(DateTime(timezone=True), server_default=func.now())
    total_amount = Column(Float, nullable=False, default=0)
    status = Column(Enum(OrderStatus), default=OrderStatus.PENDING, nullable=False)

    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")

# Order lines outlive their product: product_id is nulled when the product is deleted,
# quantity and price stay as a historical snapshot
class OrderItem(Base):
    __tablename__ = "order_items"
    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), index=True, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), index=True, nullable=True)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")

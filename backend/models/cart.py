# backend/models/cart.py
from sqlalchemy import Column, Integer, ForeignKey, Float
from sqlalchemy.orm import relationship
from database import Base

# Represents the user's shopping cart
class Cart(Base):
    __tablename__ = "carts" # Table name

    id = Column(Integer, primary_key=True, index=True) # Primary key
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, index=True, nullable=False) # One cart per user
    total_amount = Column(Float, nullable=False, default=0) # Sum of item totals

    # One-to-many relationship with cart items
    items = relationship("CartItem", back_populates="cart", cascade="all, delete-orphan")

    def add_item(self, item: "CartItem"):
        self.items.append(item)
        self.update_total_amount()

    def remove_item(self, item: "CartItem"):
        # Drop the item from the collection and keep the total consistent
        if item in self.items:
            self.items.remove(item)
        self.update_total_amount()

    def update_total_amount(self):
        self.total_amount = sum((it.total_price or 0) for it in self.items)


# Represents a single item (product + quantity) within a cart
class CartItem(Base):
    __tablename__ = "cart_items" # Table name

    id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("carts.id"), index=True, nullable=False) # Foreign key to parent cart
    product_id = Column(Integer, ForeignKey("products.id"), index=True, nullable=False) # Foreign key to product
    quantity = Column(Integer, nullable=False, default=1) # Product quantity
    unit_price = Column(Float, nullable=False) # Unit price at the moment of addition
    total_price = Column(Float, nullable=False, default=0) # unit_price * quantity

    cart = relationship("Cart", back_populates="items") # Relationship back to Cart
    product = relationship("Product") # Relationship to Product

    def set_total_price(self):
        self.total_price = self.unit_price * self.quantity

# backend/models/users.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database import Base

# Represents a customer account; cart and orders are removed together with the user
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)

    cart = relationship("Cart", uselist=False, cascade="all, delete-orphan")
    orders = relationship("Order", cascade="all, delete-orphan")

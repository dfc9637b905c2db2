# backend/models/product.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base

# Model Product
# Reprezentuje pojedynczy produkt dostępny w sklepie.
# Para (name, brand) jest unikalna, kategoria jest opcjonalna
# (zerowana przy usuwaniu kategorii lub produktu).
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    brand = Column(String, nullable=False, index=True)

    # Cena i stan magazynowy, kontrolowane poprzez ograniczenia.
    price = Column(Float, CheckConstraint("price >= 0"), nullable=False, default=0)
    inventory = Column(Integer, CheckConstraint("inventory >= 0"), nullable=False, default=0)

    description = Column(String)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    category = relationship("Category", lazy="joined")

    __table_args__ = (
        UniqueConstraint("name", "brand", name="uq_product_name_brand"),
    )

    def __repr__(self):
        return f"<Product {self.brand} {self.name}>"

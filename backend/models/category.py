# backend/models/category.py
from sqlalchemy import Column, Integer, String
from database import Base

# Model Category
# Grupuje produkty. Lista produktów kategorii nie jest trzymana w pamięci,
# zawsze pobieramy ją zapytaniem po products.category_id.
class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)

    def __repr__(self):
        return f"<Category {self.name}>"

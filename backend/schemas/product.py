# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List

from models.product import Product
from schemas.category import CategoryBase, CategoryOut, category_to_out
from schemas.image import ImageDto


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Category reference inside product requests, resolved (or created) by name
class CategoryRef(CategoryBase):
    pass


# Shared base attributes for product requests
class ProductBase(ORMBase):
    name: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    price: float = Field(default=0, ge=0)
    inventory: int = Field(default=0, ge=0)
    description: Optional[str] = None
    category: CategoryRef

    @field_validator("category", mode="before")
    @classmethod
    def accept_plain_name(cls, v):
        # Clients may send "category": "Electronics" instead of {"name": "Electronics"}
        if isinstance(v, str):
            return {"name": v}
        return v


# Schema for creating a new product
class AddProductRequest(ProductBase):
    pass


# Schema for full product updates (PUT)
class UpdateProductRequest(ProductBase):
    pass


# Full product representation including category and images
class ProductDto(ORMBase):
    id: int
    name: str
    brand: str
    price: float
    inventory: int
    description: Optional[str] = None
    category: Optional[CategoryOut] = None
    images: List[ImageDto] = []


def product_to_dto(product: Product, images: List[ImageDto]) -> ProductDto:
    """Map scalar fields and the category; images are loaded separately by the caller."""
    return ProductDto(
        id=product.id,
        name=product.name,
        brand=product.brand,
        price=product.price,
        inventory=product.inventory,
        description=product.description,
        category=category_to_out(product.category) if product.category else None,
        images=images,
    )

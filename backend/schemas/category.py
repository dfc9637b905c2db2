# backend/schemas/category.py
from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.category import Category


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Category name must not be blank")
        return v.strip()


# Request schema for adding or renaming a category
class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


# Output schema for a single category
class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


def category_to_out(category: Category) -> CategoryOut:
    return CategoryOut(id=category.id, name=category.name)

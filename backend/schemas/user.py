# backend/schemas/user.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional

from models.users import User

# Shared properties for user models
class UserBase(BaseModel):
    email: EmailStr

# Schema for user creation requests
class CreateUserRequest(UserBase):
    password: str = Field(..., min_length=1)
    first_name: str
    last_name: str

# Schema for profile updates; email and password are not editable here
class UserUpdateRequest(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None

# Output schema for user profile details
class UserDto(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None


def user_to_dto(user: User) -> UserDto:
    return UserDto(id=user.id, email=user.email, first_name=user.first_name, last_name=user.last_name)

# backend/schemas/response.py
from typing import Any, Optional
from pydantic import BaseModel


# Uniform envelope for every non-binary response
class ApiResponse(BaseModel):
    message: str
    data: Optional[Any] = None

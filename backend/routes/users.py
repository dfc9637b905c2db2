# backend/routes/users.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from database import get_db
from utils.audit import client_ip, write_log
from schemas.user import CreateUserRequest, UserUpdateRequest
from schemas.response import ApiResponse
from services import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/user/{user_id}/user", response_model=ApiResponse)
def get_user_by_id(user_id: int, db: Session = Depends(get_db)):
    user = user_service.get_user_by_id(db, user_id)
    return ApiResponse(message="Found!", data=user_service.convert_user_to_dto(user))


# Register a new user
@router.post("/add", response_model=ApiResponse)
def create_user(payload: CreateUserRequest, request: Request, db: Session = Depends(get_db)):
    user = user_service.create_user(db, payload)
    write_log(
        db, user_id=user.id, action="USER_CREATE", resource="users", ip=client_ip(request),
        meta={"email": user.email},
    )
    return ApiResponse(message="Create user successfully!", data=user_service.convert_user_to_dto(user))


@router.put("/{user_id}/update", response_model=ApiResponse)
def update_user(user_id: int, payload: UserUpdateRequest, request: Request, db: Session = Depends(get_db)):
    user = user_service.update_user(db, payload, user_id)
    write_log(db, user_id=user.id, action="USER_UPDATE", resource="users", ip=client_ip(request))
    return ApiResponse(message="Update user successfully!", data=user_service.convert_user_to_dto(user))


@router.delete("/{user_id}/delete", response_model=ApiResponse)
def delete_user(user_id: int, request: Request, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    write_log(db, action="USER_DELETE", resource="users", ip=client_ip(request), meta={"id": user_id})
    return ApiResponse(message="Delete user successfully!", data=None)

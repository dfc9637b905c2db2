# backend/services/user_service.py
import logging

from sqlalchemy.orm import Session

import crud.user as user_crud
from database import transaction
from exceptions import EntityExistsError, EntityNotFoundError
from models.users import User
from schemas.user import CreateUserRequest, UserDto, UserUpdateRequest, user_to_dto
from utils.hashing import get_password_hash

logger = logging.getLogger(__name__)


def create_user(db: Session, request: CreateUserRequest) -> User:
    # Normalize email input
    normalized_email = request.email.strip().lower()
    if user_crud.exists_by_email(db, normalized_email):
        raise EntityExistsError(f"Oops! {request.email} already exists!")

    with transaction(db):
        user = user_crud.save(db, User(
            email=normalized_email,
            password_hash=get_password_hash(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
        ))
    db.refresh(user)
    logger.info("User created: id=%s", user.id)
    return user


def update_user(db: Session, request: UserUpdateRequest, user_id: int) -> User:
    user = get_user_by_id(db, user_id)
    with transaction(db):
        if request.first_name is not None:
            user.first_name = request.first_name
        if request.last_name is not None:
            user.last_name = request.last_name
        user_crud.save(db, user)
    db.refresh(user)
    return user


def get_user_by_id(db: Session, user_id: int) -> User:
    user = user_crud.get_by_id(db, user_id)
    if user is None:
        raise EntityNotFoundError("User not found!")
    return user


def delete_user(db: Session, user_id: int) -> None:
    user = get_user_by_id(db, user_id)
    with transaction(db):
        user_crud.delete(db, user)
    logger.info("User deleted: id=%s", user_id)


def convert_user_to_dto(user: User) -> UserDto:
    return user_to_dto(user)

# backend/crud/user.py
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.users import User


def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def exists_by_email(db: Session, email: str) -> bool:
    # Emails are stored lower-cased, compare the same way
    return db.query(User.id).filter(func.lower(User.email) == email.strip().lower()).first() is not None


def save(db: Session, user: User) -> User:
    db.add(user)
    db.flush()
    return user


def delete(db: Session, user: User) -> None:
    db.delete(user)
    db.flush()

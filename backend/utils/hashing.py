# backend/utils/hashing.py
from passlib.context import CryptContext

from config import settings

pwd_context = CryptContext(schemes=settings.PASSWORD_SCHEMES, deprecated="auto")

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

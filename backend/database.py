# backend/database.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from config import settings

# 1. Adres bazy z ustawień (.env / zmienne środowiskowe), domyślnie lokalny SQLite
SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# 2. Poprawka dla Heroku/Azure (zamienia postgres:// na postgresql://, bo SQLAlchemy tego wymaga)
if SQLALCHEMY_DATABASE_URL and SQLALCHEMY_DATABASE_URL.startswith("postgres://"):
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("postgres://", "postgresql://", 1)

# 3. Konfiguracja zależna od bazy
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    connect_args = {"check_same_thread": False} # Tylko dla SQLite
else:
    connect_args = {} # Puste dla PostgreSQL

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit everything done inside the block, roll back on any exception."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise

def init_db():
    # Modele muszą być zaimportowane, żeby trafiły do Base.metadata
    import models  # noqa: F401
    Base.metadata.create_all(bind=engine)

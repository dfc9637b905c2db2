# backend/tests/conftest.py
import io
import os

# Import-time init_db() in main must not touch a file on disk
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi import UploadFile
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.datastructures import Headers

import models  # noqa: F401
from database import Base, get_db
from main import app
from schemas.product import AddProductRequest
from services import product_service

engine = create_engine(
    "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    # Unexpected errors must come back as 500 responses, not as raised exceptions
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def make_product(db):
    def _make(name="Phone", brand="Acme", category="Electronics", price=499.0, inventory=10):
        request = AddProductRequest(
            name=name, brand=brand, price=price, inventory=inventory,
            description=f"{brand} {name}", category={"name": category},
        )
        return product_service.add_product(db, request)
    return _make


def make_upload(filename: str, content: bytes, content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture(name="upload")
def upload_fixture():
    return make_upload

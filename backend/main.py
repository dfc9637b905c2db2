# backend/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from config import settings
from database import init_db
from exceptions import register_exception_handlers

load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Import routerów
from routes.categories import router as categories_router
from routes.products import router as products_router
from routes.images import router as images_router
from routes.users import router as users_router

# Inicjalizacja
init_db()

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 409 / 404 / 500 w jednym miejscu
register_exception_handlers(app)

# Rejestracja routerów
app.include_router(categories_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(images_router, prefix=settings.API_PREFIX)
app.include_router(users_router, prefix=settings.API_PREFIX)

@app.get("/")
def read_root():
    return {"message": "Boxpoint API działa!"}

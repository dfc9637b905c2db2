# backend/routes/categories.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from database import get_db
from exceptions import EntityNotFoundError
from utils.audit import client_ip, write_log
from schemas.category import CategoryCreate, CategoryUpdate, category_to_out
from schemas.response import ApiResponse
from services import category_service

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("/all", response_model=ApiResponse)
def get_all_categories(db: Session = Depends(get_db)):
    categories = category_service.get_all_categories(db)
    return ApiResponse(message="FOUND", data=[category_to_out(c) for c in categories])


@router.post("/add", response_model=ApiResponse)
def add_category(payload: CategoryCreate, request: Request, db: Session = Depends(get_db)):
    category = category_service.add_category(db, payload.name)
    write_log(
        db, action="CATEGORY_CREATE", resource="categories", ip=client_ip(request),
        meta={"id": category.id, "name": category.name},
    )
    return ApiResponse(message="Success", data=category_to_out(category))


@router.get("/category/{category_id}/category", response_model=ApiResponse)
def get_category_by_id(category_id: int, db: Session = Depends(get_db)):
    category = category_service.get_category_by_id(db, category_id)
    return ApiResponse(message="Found", data=category_to_out(category))


@router.get("/category/{name}/category/by-name", response_model=ApiResponse)
def get_category_by_name(name: str, db: Session = Depends(get_db)):
    category = category_service.get_category_by_name(db, name)
    if category is None:
        raise EntityNotFoundError("Category not found!")
    return ApiResponse(message="Found", data=category_to_out(category))


@router.put("/category/{category_id}/update", response_model=ApiResponse)
def update_category(category_id: int, payload: CategoryUpdate, request: Request, db: Session = Depends(get_db)):
    category = category_service.update_category(db, category_id, payload.name)
    write_log(
        db, action="CATEGORY_UPDATE", resource="categories", ip=client_ip(request),
        meta={"id": category_id, "name": category.name},
    )
    return ApiResponse(message="Update success!", data=category_to_out(category))


@router.delete("/category/{category_id}/delete", response_model=ApiResponse)
def delete_category(category_id: int, request: Request, db: Session = Depends(get_db)):
    category_service.delete_category(db, category_id)
    write_log(db, action="CATEGORY_DELETE", resource="categories", ip=client_ip(request), meta={"id": category_id})
    return ApiResponse(message="Delete success!", data=None)

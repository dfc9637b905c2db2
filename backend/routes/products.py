# backend/routes/products.py
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from database import get_db
from utils.audit import client_ip, write_log
from schemas.product import AddProductRequest, UpdateProductRequest
from schemas.response import ApiResponse
from services import product_service

router = APIRouter(prefix="/products", tags=["Products"])


# =========================
# LISTA PRODUKTÓW
# =========================
@router.get("/all", response_model=ApiResponse)
def get_all_products(db: Session = Depends(get_db)):
    products = product_service.get_all_products(db)
    return ApiResponse(message="FOUND", data=product_service.get_converted_products(db, products))


# =========================
# POJEDYNCZY PRODUKT
# =========================
@router.get("/product/{product_id}/product", response_model=ApiResponse)
def get_product_by_id(product_id: int, db: Session = Depends(get_db)):
    product = product_service.get_product_by_id(db, product_id)
    return ApiResponse(message="FOUND", data=product_service.convert_to_dto(db, product))


# =========================
# DODAWANIE PRODUKTU
# =========================
@router.post("/add", response_model=ApiResponse)
def add_product(payload: AddProductRequest, request: Request, db: Session = Depends(get_db)):
    product = product_service.add_product(db, payload)
    dto = product_service.convert_to_dto(db, product)

    write_log(
        db, action="PRODUCT_CREATE", resource="products", ip=client_ip(request),
        meta={"id": dto.id, "name": dto.name, "brand": dto.brand},
    )
    return ApiResponse(message="Product successfully added!", data=dto)


# =========================
# AKTUALIZACJA PRODUKTU (PUT - Pełna)
# =========================
@router.put("/product/{product_id}/update", response_model=ApiResponse)
def update_product(
    product_id: int, payload: UpdateProductRequest, request: Request, db: Session = Depends(get_db),
):
    product = product_service.update_product(db, payload, product_id)
    dto = product_service.convert_to_dto(db, product)

    write_log(
        db, action="PRODUCT_UPDATE", resource="products", ip=client_ip(request),
        meta={"id": product_id},
    )
    return ApiResponse(message="Product successfully updated!", data=dto)


# =========================
# USUWANIE
# =========================
@router.delete("/product/{product_id}/delete", response_model=ApiResponse)
def delete_product(product_id: int, request: Request, db: Session = Depends(get_db)):
    product_service.delete_product(db, product_id)
    write_log(db, action="PRODUCT_DELETE", resource="products", ip=client_ip(request), meta={"id": product_id})
    return ApiResponse(message="Product successfully deleted!", data=product_id)


# =========================
# FILTRY
# =========================
@router.get("/products/by/brand-and-name", response_model=ApiResponse)
def get_products_by_brand_and_name(
    brand_name: str = Query(..., alias="brandName"),
    product_name: str = Query(..., alias="productName"),
    db: Session = Depends(get_db),
):
    products = product_service.get_products_by_brand_and_name(db, brand_name, product_name)
    return ApiResponse(message="success", data=product_service.get_converted_products(db, products))


@router.get("/products/by/category-and-brand", response_model=ApiResponse)
def get_products_by_category_and_brand(
    category: str = Query(...),
    brand_name: str = Query(..., alias="brandName"),
    db: Session = Depends(get_db),
):
    products = product_service.get_products_by_category_and_brand(db, category, brand_name)
    return ApiResponse(message="success", data=product_service.get_converted_products(db, products))


@router.get("/products/{name}/products", response_model=ApiResponse)
def get_products_by_name(name: str, db: Session = Depends(get_db)):
    products = product_service.get_products_by_name(db, name)
    return ApiResponse(message="success", data=product_service.get_converted_products(db, products))


@router.get("/product/by-brand", response_model=ApiResponse)
def get_products_by_brand(brand: str = Query(...), db: Session = Depends(get_db)):
    products = product_service.get_products_by_brand(db, brand)
    return ApiResponse(message="success", data=product_service.get_converted_products(db, products))


@router.get("/product/{category}/all/products", response_model=ApiResponse)
def get_products_by_category(category: str, db: Session = Depends(get_db)):
    products = product_service.get_products_by_category(db, category)
    return ApiResponse(message="success", data=product_service.get_converted_products(db, products))


@router.get("/product/count/by-brand/and-name", response_model=ApiResponse)
def count_products_by_brand_and_name(
    brand: str = Query(...), name: str = Query(...), db: Session = Depends(get_db),
):
    count = product_service.count_products_by_brand_and_name(db, brand, name)
    return ApiResponse(message="Product count!", data=count)

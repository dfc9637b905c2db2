# backend/services/product_service.py
import logging
from typing import List

from sqlalchemy.orm import Session

import crud.cart as cart_crud
import crud.image as image_crud
import crud.order as order_crud
import crud.product as product_crud
from database import transaction
from exceptions import EntityExistsError, EntityNotFoundError
from models.product import Product
from schemas.image import image_to_dto
from schemas.product import AddProductRequest, ProductDto, UpdateProductRequest, product_to_dto
from services.category_service import get_or_create_category

logger = logging.getLogger(__name__)


def add_product(db: Session, request: AddProductRequest) -> Product:
    if product_crud.exists_by_name_and_brand(db, request.name, request.brand):
        raise EntityExistsError(f"{request.brand} {request.name} already exists!")

    with transaction(db):
        category = get_or_create_category(db, request.category.name)
        product = product_crud.save(db, Product(
            name=request.name,
            brand=request.brand,
            price=request.price,
            inventory=request.inventory,
            description=request.description,
            category=category,
        ))
    db.refresh(product)
    logger.info("Product created: id=%s %s/%s", product.id, product.brand, product.name)
    return product


def update_product(db: Session, request: UpdateProductRequest, product_id: int) -> Product:
    product = get_product_by_id(db, product_id)
    if product_crud.exists_by_name_and_brand(db, request.name, request.brand, exclude_id=product_id):
        raise EntityExistsError(f"{request.brand} {request.name} already exists!")

    with transaction(db):
        product.name = request.name
        product.brand = request.brand
        product.price = request.price
        product.inventory = request.inventory
        product.description = request.description
        # A category that does not exist yet is created, same as on add
        product.category = get_or_create_category(db, request.category.name)
        product_crud.save(db, product)
    db.refresh(product)
    return product


def delete_product(db: Session, product_id: int) -> None:
    product = get_product_by_id(db, product_id)

    with transaction(db):
        # 1. Cart items: drop from the owning cart and delete
        for item in cart_crud.get_items_by_product_id(db, product_id):
            if item.cart is not None:
                item.cart.remove_item(item)
            cart_crud.delete_item(db, item)

        # 2. Order items: keep the row for history, lose the product link
        for item in order_crud.get_items_by_product_id(db, product_id):
            item.product = None
            order_crud.save_item(db, item)

        # 3. Category link
        product.category = None

        # 4. Images belong to the product only
        image_crud.delete_by_product_id(db, product_id)

        product_crud.delete(db, product)
    logger.info("Product deleted: id=%s", product_id)


def get_product_by_id(db: Session, product_id: int) -> Product:
    product = product_crud.get_by_id(db, product_id)
    if product is None:
        raise EntityNotFoundError("Product not found!")
    return product


def get_all_products(db: Session) -> List[Product]:
    return product_crud.get_all(db)


def get_products_by_category_and_brand(db: Session, category: str, brand: str) -> List[Product]:
    return product_crud.get_by_category_name_and_brand(db, category, brand)


def get_products_by_category(db: Session, category: str) -> List[Product]:
    return product_crud.get_by_category_name(db, category)


def get_products_by_brand_and_name(db: Session, brand: str, name: str) -> List[Product]:
    return product_crud.get_by_brand_and_name(db, brand, name)


def get_products_by_brand(db: Session, brand: str) -> List[Product]:
    return product_crud.get_by_brand(db, brand)


def get_products_by_name(db: Session, name: str) -> List[Product]:
    return product_crud.search_by_name(db, name)


def count_products_by_brand_and_name(db: Session, brand: str, name: str) -> int:
    return product_crud.count_by_brand_and_name(db, brand, name)


def convert_to_dto(db: Session, product: Product) -> ProductDto:
    images = [image_to_dto(img) for img in image_crud.get_by_product_id(db, product.id)]
    return product_to_dto(product, images)


def get_converted_products(db: Session, products: List[Product]) -> List[ProductDto]:
    return [convert_to_dto(db, p) for p in products]

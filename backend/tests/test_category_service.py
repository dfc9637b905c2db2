# backend/tests/test_category_service.py
import pytest

import crud.product as product_crud
from exceptions import EntityExistsError, EntityNotFoundError
from models.category import Category
from services import category_service


def test_add_category(db):
    category = category_service.add_category(db, "Electronics")

    assert category.id is not None
    assert category.name == "Electronics"
    assert category_service.get_category_by_id(db, category.id).name == "Electronics"


def test_add_duplicate_category_leaves_store_unchanged(db):
    category_service.add_category(db, "Electronics")

    with pytest.raises(EntityExistsError):
        category_service.add_category(db, "Electronics")

    assert db.query(Category).count() == 1


def test_get_missing_category_raises_not_found(db):
    with pytest.raises(EntityNotFoundError):
        category_service.get_category_by_id(db, 999)


def test_get_category_by_name_returns_none_when_missing(db):
    assert category_service.get_category_by_name(db, "Nope") is None

    category_service.add_category(db, "Books")
    assert category_service.get_category_by_name(db, "Books").name == "Books"


def test_update_category(db):
    category = category_service.add_category(db, "Electronics")

    updated = category_service.update_category(db, category.id, "Gadgets")

    assert updated.id == category.id
    assert updated.name == "Gadgets"


def test_update_category_to_taken_name_conflicts(db):
    category_service.add_category(db, "Electronics")
    books = category_service.add_category(db, "Books")

    with pytest.raises(EntityExistsError):
        category_service.update_category(db, books.id, "Electronics")


def test_update_missing_category_raises_not_found(db):
    with pytest.raises(EntityNotFoundError):
        category_service.update_category(db, 42, "Anything")


def test_delete_category_detaches_products(db, make_product):
    phone = make_product(name="Phone", category="Electronics")
    category_id = phone.category_id

    category_service.delete_category(db, category_id)

    assert db.query(Category).count() == 0
    assert product_crud.get_by_id(db, phone.id).category_id is None


def test_delete_missing_category_raises_not_found(db):
    with pytest.raises(EntityNotFoundError):
        category_service.delete_category(db, 7)


def test_get_all_categories_in_insert_order(db):
    for name in ("B", "A", "C"):
        category_service.add_category(db, name)

    assert [c.name for c in category_service.get_all_categories(db)] == ["B", "A", "C"]

# backend/tests/test_api.py
from models.log import Log
from routes.images import content_disposition
from services import product_service

API = "/api/v1"


def _add_product(client, name="Phone", brand="Acme", category="Electronics", **extra):
    payload = {"name": name, "brand": brand, "price": 499.99, "inventory": 5,
               "description": "test", "category": category, **extra}
    return client.post(f"{API}/products/add", json=payload)


def test_root(client):
    assert client.get("/").status_code == 200


def test_category_endpoints(client, db):
    resp = client.post(f"{API}/categories/add", json={"name": "Electronics"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Success"
    category_id = body["data"]["id"]

    resp = client.get(f"{API}/categories/category/{category_id}/category")
    assert resp.json()["data"] == {"id": category_id, "name": "Electronics"}

    resp = client.get(f"{API}/categories/all")
    assert resp.json() == {"message": "FOUND", "data": [{"id": category_id, "name": "Electronics"}]}

    resp = client.get(f"{API}/categories/category/Electronics/category/by-name")
    assert resp.json()["data"]["id"] == category_id

    resp = client.put(f"{API}/categories/category/{category_id}/update", json={"name": "Gadgets"})
    assert resp.json()["data"]["name"] == "Gadgets"

    resp = client.delete(f"{API}/categories/category/{category_id}/delete")
    assert resp.status_code == 200
    assert resp.json()["data"] is None

    assert db.query(Log).filter(Log.resource == "categories").count() == 3


def test_duplicate_category_returns_409(client):
    client.post(f"{API}/categories/add", json={"name": "Electronics"})

    resp = client.post(f"{API}/categories/add", json={"name": "Electronics"})

    assert resp.status_code == 409
    assert resp.json() == {"message": "Electronics already exists!", "data": None}


def test_blank_category_name_is_rejected(client):
    resp = client.post(f"{API}/categories/add", json={"name": "   "})
    assert resp.status_code == 422


def test_missing_entities_return_404(client):
    urls = [
        f"{API}/categories/category/1/category",
        f"{API}/categories/category/Nope/category/by-name",
        f"{API}/products/product/1/product",
        f"{API}/images/image/download/1",
        f"{API}/users/user/1/user",
    ]
    for url in urls:
        resp = client.get(url)
        assert resp.status_code == 404, url
        assert resp.json()["data"] is None

    assert client.delete(f"{API}/products/product/1/delete").status_code == 404
    assert client.delete(f"{API}/images/image/1/delete").status_code == 404
    assert client.delete(f"{API}/users/1/delete").status_code == 404


def test_product_scenario(client):
    client.post(f"{API}/categories/add", json={"name": "Electronics"})

    resp = _add_product(client)
    assert resp.status_code == 200
    product = resp.json()["data"]
    assert product["category"]["name"] == "Electronics"
    assert product["images"] == []

    categories = client.get(f"{API}/categories/all").json()["data"]
    assert len(categories) == 1

    resp = _add_product(client)
    assert resp.status_code == 409

    resp = client.delete(f"{API}/products/product/{product['id']}/delete")
    assert resp.json() == {"message": "Product successfully deleted!", "data": product["id"]}

    resp = client.get(f"{API}/products/product/Electronics/all/products")
    assert resp.json()["data"] == []
    assert client.get(f"{API}/categories/category/{categories[0]['id']}/category").status_code == 200


def test_product_accepts_nested_category(client):
    resp = _add_product(client, category={"name": "Phones"})
    assert resp.json()["data"]["category"]["name"] == "Phones"


def test_update_product(client):
    product_id = _add_product(client).json()["data"]["id"]

    resp = client.put(
        f"{API}/products/product/{product_id}/update",
        json={"name": "Phone 2", "brand": "Acme", "price": 10, "inventory": 1, "category": "Mobile"},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["name"] == "Phone 2"
    assert data["category"]["name"] == "Mobile"

    resp = client.put(
        f"{API}/products/product/999/update",
        json={"name": "X", "brand": "Y", "category": "Z"},
    )
    assert resp.status_code == 404


def test_product_filters(client):
    _add_product(client, name="Phone", brand="Acme", category="Electronics")
    _add_product(client, name="Kettle", brand="Acme", category="Kitchen")
    _add_product(client, name="Headphones", brand="Globex", category="Electronics")

    def names(resp):
        assert resp.status_code == 200
        return [p["name"] for p in resp.json()["data"]]

    assert names(client.get(f"{API}/products/all")) == ["Phone", "Kettle", "Headphones"]
    assert names(client.get(f"{API}/products/product/by-brand", params={"brand": "Acme"})) == ["Phone", "Kettle"]
    assert names(client.get(f"{API}/products/products/phone/products")) == ["Phone", "Headphones"]
    assert names(client.get(f"{API}/products/product/Kitchen/all/products")) == ["Kettle"]
    assert names(client.get(
        f"{API}/products/products/by/brand-and-name", params={"brandName": "Acme", "productName": "Phone"},
    )) == ["Phone"]
    assert names(client.get(
        f"{API}/products/products/by/category-and-brand", params={"category": "Electronics", "brandName": "Globex"},
    )) == ["Headphones"]

    resp = client.get(f"{API}/products/product/count/by-brand/and-name", params={"brand": "Acme", "name": "Kettle"})
    assert resp.json()["data"] == 1


def test_upload_and_download_images(client):
    product_id = _add_product(client).json()["data"]["id"]

    resp = client.post(
        f"{API}/images/upload",
        data={"productId": str(product_id)},
        files=[
            ("files", ("front.png", b"\x89PNG front", "image/png")),
            ("files", ("back.jpg", b"\xff\xd8 back", "image/jpeg")),
        ],
    )

    assert resp.status_code == 200
    images = resp.json()["data"]
    assert [img["file_name"] for img in images] == ["front.png", "back.jpg"]
    for img in images:
        assert img["download_url"] == f"{API}/images/image/download/{img['id']}"

    download = client.get(images[0]["download_url"])
    assert download.status_code == 200
    assert download.content == b"\x89PNG front"
    assert download.headers["content-type"] == "image/png"
    assert download.headers["content-disposition"] == 'attachment; filename="front.png"'

    product = client.get(f"{API}/products/product/{product_id}/product").json()["data"]
    assert [img["id"] for img in product["images"]] == [img["id"] for img in images]


def test_upload_for_missing_product_returns_404(client):
    resp = client.post(
        f"{API}/images/upload",
        data={"productId": "77"},
        files=[("files", ("a.png", b"a", "image/png"))],
    )
    assert resp.status_code == 404


def test_update_and_delete_image(client):
    product_id = _add_product(client).json()["data"]["id"]
    image = client.post(
        f"{API}/images/upload",
        data={"productId": str(product_id)},
        files=[("files", ("a.png", b"a", "image/png"))],
    ).json()["data"][0]

    resp = client.put(
        f"{API}/images/image/{image['id']}/update",
        files={"file": ("b.gif", b"gif-bytes", "image/gif")},
    )
    assert resp.json() == {"message": "Image updated successfully!", "data": None}

    download = client.get(image["download_url"])
    assert download.content == b"gif-bytes"
    assert download.headers["content-type"] == "image/gif"

    assert client.delete(f"{API}/images/image/{image['id']}/delete").status_code == 200
    assert client.get(image["download_url"]).status_code == 404


def test_user_endpoints(client):
    payload = {"email": "jane@example.com", "password": "pw", "first_name": "Jane", "last_name": "Doe"}
    resp = client.post(f"{API}/users/add", json=payload)
    assert resp.status_code == 200
    user = resp.json()["data"]
    assert "password" not in user and "password_hash" not in user

    assert client.post(f"{API}/users/add", json=payload).status_code == 409

    resp = client.get(f"{API}/users/user/{user['id']}/user")
    assert resp.json() == {"message": "Found!", "data": user}

    resp = client.put(f"{API}/users/{user['id']}/update", json={"first_name": "Janet"})
    assert resp.json()["data"]["first_name"] == "Janet"

    assert client.delete(f"{API}/users/{user['id']}/delete").json()["message"] == "Delete user successfully!"
    assert client.get(f"{API}/users/user/{user['id']}/user").status_code == 404


def test_unexpected_error_returns_500(client, monkeypatch):
    def boom(db):
        raise RuntimeError("boom")

    monkeypatch.setattr(product_service, "get_all_products", boom)

    resp = client.get(f"{API}/products/all")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Error: boom", "data": None}


def test_download_non_ascii_file_name(client):
    product_id = _add_product(client).json()["data"]["id"]
    image = client.post(
        f"{API}/images/upload",
        data={"productId": str(product_id)},
        files=[("files", ("zdjęcie.png", b"x", "image/png"))],
    ).json()["data"][0]
    assert image["file_name"] == "zdjęcie.png"

    download = client.get(image["download_url"])

    assert download.status_code == 200
    assert download.content == b"x"
    assert download.headers["content-disposition"] == (
        "attachment; filename=\"zdjcie.png\"; filename*=utf-8''zdj%C4%99cie.png"
    )


def test_content_disposition_strips_quotes_from_fallback():
    assert content_disposition('say "hi".png') == (
        "attachment; filename=\"say hi.png\"; filename*=utf-8''say%20%22hi%22.png"
    )
    assert content_disposition("żółw.png") == (
        "attachment; filename=\"w.png\"; filename*=utf-8''%C5%BC%C3%B3%C5%82w.png"
    )


def test_product_category_name_is_trimmed(client):
    client.post(f"{API}/categories/add", json={"name": "Electronics"})

    resp = _add_product(client, category=" Electronics ")

    assert resp.json()["data"]["category"]["name"] == "Electronics"
    assert len(client.get(f"{API}/categories/all").json()["data"]) == 1

    assert _add_product(client, name="Tablet", category="   ").status_code == 422
    assert _add_product(client, name="Tablet", category={"name": "  "}).status_code == 422

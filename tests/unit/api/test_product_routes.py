"""Tests for the JSON product API."""

from unittest.mock import Mock

from fastapi.testclient import TestClient

from code_verifier.api.http.app import app
from code_verifier.api.http.deps import get_product_service
from code_verifier.core.exceptions import StorageError
from code_verifier.core.services import ProductService
from code_verifier.entities.product import Product, ProductRepository


def test_create_product(client: TestClient):
    response = client.post("/api/products/", json={"code": " abc123 ", "name": "Widget"})

    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert data["code"] == "ABC123"
    assert data["name"] == "Widget"
    assert data["created_at"] is not None


def test_create_duplicate_product(client: TestClient, widget: Product):
    response = client.post("/api/products/", json={"code": "abc123", "name": "Copy"})

    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


def test_create_invalid_code(client: TestClient):
    response = client.post("/api/products/", json={"code": "not valid!", "name": "Widget"})

    assert response.status_code == 400
    assert "letters and digits" in response.json()["detail"]


def test_verify_found(client: TestClient, widget: Product):
    response = client.post("/api/products/verify", json={"code": " abc123 "})

    assert response.status_code == 200
    assert response.json() == {
        "code_exists": True,
        "code": "ABC123",
        "product_name": "Widget",
        "error": None,
    }


def test_verify_not_found(client: TestClient):
    response = client.post("/api/products/verify", json={"code": "ZZZZZZ"})

    assert response.json() == {
        "code_exists": False,
        "code": "ZZZZZZ",
        "product_name": None,
        "error": None,
    }


def test_verify_blank(client: TestClient):
    response = client.post("/api/products/verify", json={"code": ""})

    body = response.json()
    assert body["code_exists"] is False
    assert body["error"] == "Please provide a product code."


def test_list_products_by_name(client: TestClient):
    client.post("/api/products/", json={"code": "Z1", "name": "Zinc"})
    client.post("/api/products/", json={"code": "A1", "name": "Acorn"})

    response = client.get("/api/products/")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Acorn", "Zinc"]


def test_count(client: TestClient, widget: Product):
    response = client.get("/api/products/count")

    assert response.status_code == 200
    assert response.json() == {"count": 1}


def test_get_by_id(client: TestClient, widget: Product):
    response = client.get(f"/api/products/{widget.id}")

    assert response.status_code == 200
    assert response.json()["code"] == "ABC123"


def test_get_by_id_not_found(client: TestClient):
    assert client.get("/api/products/999").status_code == 404


def test_get_by_code(client: TestClient, widget: Product):
    response = client.get("/api/products/by-code/abc123")

    assert response.status_code == 200
    assert response.json()["id"] == widget.id


def test_get_by_code_not_found(client: TestClient):
    assert client.get("/api/products/by-code/NOPE").status_code == 404


def test_update_product(client: TestClient, widget: Product):
    response = client.put(
        f"/api/products/{widget.id}", json={"code": "abc123", "name": "Widget Pro"}
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Widget Pro"


def test_update_missing_product(client: TestClient):
    response = client.put("/api/products/999", json={"code": "ABC123", "name": "Widget"})

    assert response.status_code == 400
    assert client.get("/api/products/count").json() == {"count": 0}


def test_delete_product(client: TestClient, widget: Product):
    response = client.delete(f"/api/products/{widget.id}")

    assert response.status_code == 204
    assert client.get("/api/products/count").json() == {"count": 0}


def test_delete_unknown_product_is_not_an_error(client: TestClient, widget: Product):
    response = client.delete("/api/products/999")

    assert response.status_code == 204
    assert client.get("/api/products/count").json() == {"count": 1}


def test_delete_invalid_id(client: TestClient):
    assert client.delete("/api/products/0").status_code == 400


def test_storage_failure_maps_to_503(client: TestClient):
    repo = Mock(spec=ProductRepository)
    repo.list_all.side_effect = StorageError()
    app.dependency_overrides[get_product_service] = lambda: ProductService(repo)

    response = client.get("/api/products/")

    assert response.status_code == 503
    assert response.json()["detail"] == "Database operation failed"


def test_out_of_range_id_is_not_found(client: TestClient, widget: Product):
    assert client.get("/api/products/99999999999999999999").status_code == 404

    response = client.delete("/api/products/99999999999999999999")

    assert response.status_code == 204
    assert client.get("/api/products/count").json() == {"count": 1}


def test_duplicate_caught_by_unique_constraint(
    client: TestClient, widget: Product, monkeypatch
):
    # Another request inserted the code after the existence check passed
    monkeypatch.setattr(ProductRepository, "exists_by_code", lambda self, code: False)

    response = client.post("/api/products/", json={"code": "abc123", "name": "Copy"})

    assert response.status_code == 400
    assert response.json()["detail"] == "A product with code ABC123 already exists"


def test_update_of_row_deleted_after_check(client: TestClient, monkeypatch):
    # The row vanished between the existence check and the write
    monkeypatch.setattr(
        ProductRepository,
        "get",
        lambda self, product_id: Product(id=product_id, code="GONE1", name="Gone"),
    )

    response = client.put("/api/products/42", json={"code": "GONE1", "name": "Gone"})

    assert response.status_code == 400
    assert "not found" in response.json()["detail"]

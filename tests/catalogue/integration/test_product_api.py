"""Integration tests for the product endpoints."""

import pytest


@pytest.fixture()
def products(add_product):
    return {
        "bands": add_product(name="Resistance Bands Set", price=79.99, category="equipment", stock=30),
        "guide": add_product(
            name="Nutrition Guide Book",
            price=49.99,
            category="nutrition",
            stock=100,
            featured=True,
            description="Complete nutrition guide with meal plans",
            image_url="https://images.example.com/guide.jpg",
        ),
    }


class TestListProductsEndpoint:
    def test_envelope_and_camel_case(self, api, products):
        response = api.get("/api/products")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        guide = next(p for p in body["data"] if p["name"] == "Nutrition Guide Book")
        assert guide["imageUrl"] == "https://images.example.com/guide.jpg"
        assert guide["featured"] is True
        assert guide["stock"] == 100
        assert "createdAt" in guide

    def test_filter_by_category(self, api, products):
        body = api.get("/api/products", params={"category": "equipment"}).json()
        assert [p["name"] for p in body["data"]] == ["Resistance Bands Set"]

    def test_filter_by_featured(self, api, products):
        body = api.get("/api/products", params={"featured": "true"}).json()
        assert [p["name"] for p in body["data"]] == ["Nutrition Guide Book"]

    def test_search(self, api, products):
        body = api.get("/api/products", params={"search": "meal plans"}).json()
        assert [p["name"] for p in body["data"]] == ["Nutrition Guide Book"]


class TestGetProductEndpoint:
    def test_get_product(self, api, products):
        product_id = products["bands"].id
        body = api.get(f"/api/products/{product_id}").json()
        assert body["data"]["id"] == product_id
        assert body["data"]["price"] == 79.99

    def test_not_found(self, api):
        response = api.get("/api/products/missing")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Product missing not found"}

"""
API tests for the cart endpoints: reading a user's cart (with dangling
product references filtered out), adding lines and removing them.
"""
from bson import ObjectId
from fastapi.testclient import TestClient


def _add(test_client: TestClient, user_id: str, product_id: str, quantity=1):
    return test_client.post(
        "/cart",
        json={"userId": user_id, "productId": product_id, "quantity": quantity},
    )


class TestGetCart:
    def test_missing_user_id_is_rejected(self, test_client: TestClient):
        response = test_client.get("/cart")

        assert response.status_code == 400
        assert response.json()["detail"] == "userId is required"

    def test_user_without_cart_gets_empty_items(self, test_client: TestClient):
        response = test_client.get("/cart", params={"userId": "nobody"})

        assert response.status_code == 200
        assert response.json() == {"items": []}

    def test_cart_contains_items_with_products(self, test_client: TestClient, product):
        _add(test_client, "alice", product["id"], 2)

        response = test_client.get("/cart", params={"userId": "alice"})

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == "alice"
        assert len(data["items"]) == 1
        line = data["items"][0]
        assert line["productId"] == product["id"]
        assert line["quantity"] == 2
        assert line["cartId"] == data["id"]
        assert line["product"]["title"] == "iPhone 15"

    def test_items_of_deleted_products_are_filtered(self, test_client: TestClient, product_payload):
        """
        Every line pointing at a deleted product disappears from the read,
        lines for surviving products stay.
        """
        # Arrange
        keep = test_client.post("/products", json=product_payload).json()
        gone_1 = test_client.post("/products", json={**product_payload, "title": "Old phone"}).json()
        gone_2 = test_client.post("/products", json={**product_payload, "title": "Older phone"}).json()
        for p in (keep, gone_1, gone_2, gone_1):
            assert _add(test_client, "bob", p["id"]).status_code == 201

        # Act
        test_client.delete(f"/products/{gone_1['id']}")
        test_client.delete(f"/products/{gone_2['id']}")
        response = test_client.get("/cart", params={"userId": "bob"})

        # Assert
        assert response.status_code == 200
        items = response.json()["items"]
        assert [i["productId"] for i in items] == [keep["id"]]

    def test_orphaned_items_stay_in_storage(self, test_client: TestClient, product, db_session):
        from shop_api.data.models.cart_item import CartItemModel

        _add(test_client, "carol", product["id"])
        test_client.delete(f"/products/{product['id']}")

        assert test_client.get("/cart", params={"userId": "carol"}).json()["items"] == []
        assert db_session.query(CartItemModel).filter_by(product_id=product["id"]).count() == 1


class TestAddItem:
    def test_add_item_creates_cart_and_line(self, test_client: TestClient, product):
        response = _add(test_client, "dave", product["id"], 3)

        assert response.status_code == 201
        item = response.json()
        assert item["productId"] == product["id"]
        assert item["quantity"] == 3
        assert len(item["id"]) == 24

    def test_repeated_add_creates_duplicate_lines(self, test_client: TestClient, product):
        first = _add(test_client, "erin", product["id"], 1).json()
        second = _add(test_client, "erin", product["id"], 1).json()

        assert first["id"] != second["id"]
        assert first["cartId"] == second["cartId"]
        items = test_client.get("/cart", params={"userId": "erin"}).json()["items"]
        assert [i["quantity"] for i in items] == [1, 1]

    def test_carts_are_per_user(self, test_client: TestClient, product):
        a = _add(test_client, "frank", product["id"]).json()
        b = _add(test_client, "grace", product["id"]).json()

        assert a["cartId"] != b["cartId"]

    def test_missing_fields_are_rejected(self, test_client: TestClient, product):
        response = test_client.post("/cart", json={"userId": "henry", "productId": product["id"]})

        assert response.status_code == 400
        assert response.json()["detail"] == "userId, productId, and quantity are required"

    def test_non_positive_or_fractional_quantity_is_rejected(self, test_client: TestClient, product):
        for quantity in (0, -1, 1.5, "2", True):
            response = _add(test_client, "ivan", product["id"], quantity)

            assert response.status_code == 400, quantity
            assert response.json()["detail"] == "Quantity must be a positive integer"

        assert test_client.get("/cart", params={"userId": "ivan"}).json() == {"items": []}

    def test_unknown_product_is_not_found(self, test_client: TestClient):
        response = _add(test_client, "judy", str(ObjectId()))

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    def test_malformed_product_id_is_rejected(self, test_client: TestClient):
        response = _add(test_client, "judy", "not-an-id")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid product ID format"

    def test_wrong_body_types_are_client_errors(self, test_client: TestClient, product):
        response = test_client.post("/cart", json={"userId": 42, "productId": product["id"], "quantity": 1})

        assert response.status_code == 400
        assert "userId" in response.json()["detail"]


class TestRemoveItem:
    def test_remove_item(self, test_client: TestClient, product):
        item = _add(test_client, "kate", product["id"]).json()

        response = test_client.delete(f"/cart/{item['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Item removed from cart"}
        assert test_client.get("/cart", params={"userId": "kate"}).json()["items"] == []

    def test_second_delete_is_not_found(self, test_client: TestClient, product):
        item = _add(test_client, "leo", product["id"]).json()

        assert test_client.delete(f"/cart/{item['id']}").status_code == 200
        response = test_client.delete(f"/cart/{item['id']}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Cart item not found"

    def test_invalid_item_id_format(self, test_client: TestClient):
        for bad in ("123", "z" * 24, "a" * 25):
            response = test_client.delete(f"/cart/{bad}")

            assert response.status_code == 400
            assert response.json()["detail"] == "Invalid item ID format"


class TestQuantityLimit:
    def test_quantity_beyond_integer_column_is_rejected(self, test_client: TestClient, product):
        response = _add(test_client, "mia", product["id"], 2**70)

        assert response.status_code == 400
        assert response.json()["detail"] == "Quantity must be a positive integer"
        assert test_client.get("/cart", params={"userId": "mia"}).json() == {"items": []}

    def test_largest_storable_quantity_is_accepted(self, test_client: TestClient, product):
        response = _add(test_client, "nina", product["id"], 2**31 - 1)

        assert response.status_code == 201
        assert response.json()["quantity"] == 2**31 - 1

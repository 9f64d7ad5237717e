"""HTTP surface of the product service, including the purchase endpoint."""

PRODUCT = {
    "name": "Pen",
    "description": "Blue ballpoint pen",
    "availableQuantity": 100,
    "price": 10.0,
}


class TestProductEndpoints:

    def test_create_and_get(self, product_client):
        response = product_client.post("/api/v1/products", json=PRODUCT)
        assert response.status_code == 200
        product_id = response.json()
        assert isinstance(product_id, int)

        body = product_client.get(f"/api/v1/products/{product_id}").json()
        assert body == {"id": product_id, **PRODUCT}

    def test_list_ordered_by_id(self, product_client):
        ids = [
            product_client.post("/api/v1/products", json={**PRODUCT, "name": name}).json()
            for name in ("Pen", "Notebook", "Eraser")
        ]
        listed = product_client.get("/api/v1/products").json()
        assert [p["id"] for p in listed] == sorted(ids)

    def test_get_missing_is_404(self, product_client):
        response = product_client.get("/api/v1/products/999")
        assert response.status_code == 404
        assert response.json() == {"detail": "Product not found with ID:: 999"}

    def test_zero_quantity_allowed(self, product_client):
        response = product_client.post("/api/v1/products", json={**PRODUCT, "availableQuantity": 0})
        assert response.status_code == 200

    def test_invalid_product_is_400(self, product_client):
        response = product_client.post(
            "/api/v1/products",
            json={**PRODUCT, "name": " ", "availableQuantity": -1, "price": 0},
        )
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert {"name", "availableQuantity", "price"} <= set(errors)


class TestPurchaseEndpoint:

    def test_purchase(self, product_client, add_products, read_stock):
        add_products({1: 5, 2: 0})
        response = product_client.post(
            "/api/v1/products/purchase", json=[{"productId": 1, "quantity": 3}]
        )

        assert response.status_code == 200
        assert response.json() == [{
            "productId": 1,
            "name": "Product 1",
            "description": "Description 1",
            "price": 10.0,
            "quantity": 3,
        }]
        assert read_stock(1) == 2

    def test_response_order_ascending(self, product_client, add_products):
        add_products({1: 5, 2: 5})
        response = product_client.post(
            "/api/v1/products/purchase",
            json=[{"productId": 2, "quantity": 1}, {"productId": 1, "quantity": 1}],
        )
        assert [line["productId"] for line in response.json()] == [1, 2]

    def test_unknown_product_is_400(self, product_client, add_products, read_stock):
        add_products({1: 5})
        response = product_client.post(
            "/api/v1/products/purchase",
            json=[{"productId": 1, "quantity": 3}, {"productId": 2, "quantity": 1}],
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "One or more products does not exist"}
        assert read_stock(1) == 5

    def test_insufficient_stock_is_400(self, product_client, add_products, read_stock):
        add_products({1: 2})
        response = product_client.post(
            "/api/v1/products/purchase", json=[{"productId": 1, "quantity": 5}]
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Insufficient stock quantity for product with ID:: 1"}
        assert read_stock(1) == 2

    def test_non_positive_quantity_is_400(self, product_client, add_products, read_stock):
        add_products({1: 2})
        response = product_client.post(
            "/api/v1/products/purchase", json=[{"productId": 1, "quantity": 0}]
        )

        assert response.status_code == 400
        assert "0.quantity" in response.json()["errors"]
        assert read_stock(1) == 2


class TestOutOfRangeIds:

    def test_get_huge_id_is_404(self, product_client):
        huge = 2**70
        response = product_client.get(f"/api/v1/products/{huge}")
        assert response.status_code == 404
        assert response.json() == {"detail": f"Product not found with ID:: {huge}"}

    def test_purchase_huge_id_rejects_batch(self, product_client, add_products, read_stock):
        add_products({1: 5})
        response = product_client.post(
            "/api/v1/products/purchase",
            json=[{"productId": 1, "quantity": 1}, {"productId": 2**70, "quantity": 1}],
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "One or more products does not exist"}
        assert read_stock(1) == 5

    def test_huge_quantity_is_400(self, product_client, add_products, read_stock):
        add_products({1: 5})
        response = product_client.post(
            "/api/v1/products/purchase", json=[{"productId": 1, "quantity": 2**70}]
        )
        assert response.status_code == 400
        assert "0.quantity" in response.json()["errors"]
        assert read_stock(1) == 5

    def test_create_huge_stock_is_400(self, product_client):
        response = product_client.post("/api/v1/products", json={**PRODUCT, "availableQuantity": 2**70})
        assert response.status_code == 400
        assert "availableQuantity" in response.json()["errors"]

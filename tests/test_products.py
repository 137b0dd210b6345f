"""Tests for Product API endpoints."""


def test_create_product(client):
    """Test adding a new product."""
    response = client.post(
        "/api/v1/products/",
        json={
            "name": "Test Product",
            "price": 99.99,
            "stock": 10
        }
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Test Product"
    assert data["price"] == 99.99
    assert data["stock"] == 10
    assert data["price_display"] == "100.0"


def test_create_product_invalid_price(client):
    """Test adding product with invalid price fails."""
    response = client.post(
        "/api/v1/products/",
        json={
            "name": "Test Product",
            "price": -10.00,  # Invalid: negative price
            "stock": 10
        }
    )

    assert response.status_code == 422  # Validation error


def test_create_product_invalid_stock(client):
    """Test adding product with negative stock fails."""
    response = client.post(
        "/api/v1/products/",
        json={
            "name": "Test Product",
            "price": 99.99,
            "stock": -5  # Invalid: negative stock
        }
    )

    assert response.status_code == 422


def test_create_product_blank_name(client, ledger):
    """Test a whitespace-only name is rejected by the ledger."""
    response = client.post(
        "/api/v1/products/",
        json={"name": "   ", "price": 1.00, "stock": 1}
    )

    assert response.status_code == 422
    assert len(ledger) == 0


def test_create_product_duplicate_name(client):
    """Test adding the same name in another case returns 409."""
    client.post(
        "/api/v1/products/",
        json={"name": "Milk", "price": 2.50, "stock": 10}
    )

    response = client.post(
        "/api/v1/products/",
        json={"name": "milk", "price": 3.00, "stock": 5}
    )

    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]

    # Original entry untouched
    items = client.get("/api/v1/products/").json()["items"]
    assert len(items) == 1
    assert items[0] == {"name": "Milk", "price": 2.50, "stock": 10, "price_display": "2.5"}


def test_get_product(client):
    """Test getting a product by name, ignoring case."""
    client.post(
        "/api/v1/products/",
        json={"name": "Bread", "price": 1.20, "stock": 3}
    )

    response = client.get("/api/v1/products/bREAD")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Bread"
    assert data["stock"] == 3


def test_get_product_not_found(client):
    """Test getting non-existent product returns 404."""
    response = client.get("/api/v1/products/Unknown")

    assert response.status_code == 404


def test_list_products(client):
    """Test listing products keeps insertion order."""
    names = ["Egg", "Milk", "Bread"]
    for i, name in enumerate(names):
        client.post(
            "/api/v1/products/",
            json={"name": name, "price": 1.00 + i, "stock": 5}
        )

    response = client.get("/api/v1/products/")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [item["name"] for item in data["items"]] == names


def test_list_products_empty(client):
    """Test listing an empty inventory is not an error."""
    response = client.get("/api/v1/products/")

    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["total"] == 0


def test_search_products(client):
    """Test searching products by name fragment."""
    for name, price in [("Egg", 1.00), ("Milk", 2.50), ("Bread", 1.20)]:
        client.post(
            "/api/v1/products/",
            json={"name": name, "price": price, "stock": 5}
        )

    response = client.get("/api/v1/products/?search=RE")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["items"][0]["name"] == "Bread"
    assert data["search"] == "RE"


def test_statistics(client):
    """Test cheapest and most expensive products."""
    for name, price in [("Egg", 1.00), ("Milk", 2.50), ("Bread", 1.20)]:
        client.post(
            "/api/v1/products/",
            json={"name": name, "price": price, "stock": 5}
        )

    response = client.get("/api/v1/products/statistics")

    assert response.status_code == 200
    data = response.json()
    assert data["empty"] is False
    assert data["cheapest"]["name"] == "Egg"
    assert data["most_expensive"]["name"] == "Milk"


def test_statistics_empty(client):
    """Test statistics on an empty inventory."""
    response = client.get("/api/v1/products/statistics")

    assert response.status_code == 200
    data = response.json()
    assert data["empty"] is True
    assert data["cheapest"] is None
    assert data["most_expensive"] is None


def test_long_product_names(client, ledger):
    """Test names longer than 255 characters are accepted and listed."""
    long_name = "x" * 300
    ledger.add_product(long_name, 1.00, 1)

    response = client.post(
        "/api/v1/products/",
        json={"name": "y" * 300, "price": 2.00, "stock": 1}
    )
    assert response.status_code == 201

    response = client.get("/api/v1/products/")
    assert response.status_code == 200
    assert [len(item["name"]) for item in response.json()["items"]] == [300, 300]

    assert client.get(f"/api/v1/products/{long_name}").status_code == 200

    stats = client.get("/api/v1/products/statistics").json()
    assert stats["cheapest"]["name"] == long_name

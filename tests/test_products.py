"""
API tests for the /products resource.

Each test runs against the seeded catalogue:
1 Widget 9.99, 2 Gadget 24.50, 3 Gizmo 3.75, 4 Doohickey 12.00
"""


def test_list_products_returns_seeded_catalogue(client):
    r = client.get("/products")
    assert r.status_code == 200
    data = r.json()
    assert [p["name"] for p in data] == ["Widget", "Gadget", "Gizmo", "Doohickey"]
    assert data[0] == {"id": 1, "name": "Widget", "price": 9.99}


def test_get_product_by_id(client):
    r = client.get("/products/2")
    assert r.status_code == 200
    assert r.json() == {"id": 2, "name": "Gadget", "price": 24.5}


def test_get_missing_product_returns_404(client):
    r = client.get("/products/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Product not found"


def test_get_product_with_non_integer_id_is_rejected(client):
    r = client.get("/products/abc")
    assert r.status_code == 400


def test_create_product_then_fetch_it(client):
    r = client.post("/products", json={"name": "Sprocket", "price": 5.25})
    assert r.status_code == 201
    created = r.json()
    assert created["name"] == "Sprocket"
    assert created["price"] == 5.25
    assert created["id"] == 5
    assert r.headers["location"] == f"/products/{created['id']}"

    r = client.get(f"/products/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_create_product_ignores_client_supplied_id(client):
    r = client.post("/products", json={"id": 1, "name": "Cog", "price": 1.00})
    assert r.status_code == 201
    assert r.json()["id"] != 1
    # the seeded product is untouched
    assert client.get("/products/1").json()["name"] == "Widget"


def test_create_product_rounds_price_to_cents(client):
    r = client.post("/products", json={"name": "Bolt", "price": 0.125})
    assert r.status_code == 201
    assert r.json()["price"] == 0.13


def test_create_product_accepts_price_as_string(client):
    r = client.post("/products", json={"name": "Nut", "price": "2.40"})
    assert r.status_code == 201
    assert r.json()["price"] == 2.4


def test_create_product_requires_name_and_price(client):
    assert client.post("/products", json={"name": "No price"}).status_code == 400
    assert client.post("/products", json={"price": 1.5}).status_code == 400


def test_create_product_with_malformed_json(client):
    r = client.post(
        "/products",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["detail"][0]["type"] == "json_invalid"


def test_create_product_with_price_beyond_two_decimal_columns_is_rejected(client):
    r = client.post("/products", json={"name": "Yacht", "price": "12345678901234567.89"})
    assert r.status_code == 400
    assert [p["name"] for p in client.get("/products").json()] == ["Widget", "Gadget", "Gizmo", "Doohickey"]


def test_create_product_with_largest_price_keeps_cents(client):
    created = client.post("/products", json={"name": "Estate", "price": "99999999.99"}).json()
    r = client.get(f"/products/{created['id']}")
    assert r.json()["price"] == 99999999.99


def test_delete_product_then_get_returns_404(client):
    r = client.delete("/products/3")
    assert r.status_code == 204
    assert r.content == b""

    assert client.get("/products/3").status_code == 404
    assert [p["id"] for p in client.get("/products").json()] == [1, 2, 4]


def test_delete_missing_product_returns_404(client):
    r = client.delete("/products/999")
    assert r.status_code == 404


def test_deleted_product_id_is_not_reused(client):
    created = client.post("/products", json={"name": "Temp", "price": 1}).json()
    assert client.delete(f"/products/{created['id']}").status_code == 204

    again = client.post("/products", json={"name": "Temp", "price": 1}).json()
    assert again["id"] > created["id"]


def test_delete_product_removes_its_cart_item(client):
    item = client.post("/cart", json={"productId": 2, "quantity": 1}).json()

    assert client.delete("/products/2").status_code == 204
    assert client.get(f"/cart/{item['id']}").status_code == 404
    assert client.get("/cart").json() == []

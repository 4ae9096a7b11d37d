"""Product Routes — CRUD contract, category enrichment and ON DELETE SET NULL.

Invariants:
    - every product response carries category_name (None when uncategorized)
    - deleting a category detaches its products instead of deleting them
    - price accepts at most 2 decimal places and 8 whole digits (numeric(10,2)); else 400
    - unknown category_id → 409 from the foreign key
"""

import pytest


async def _category(client, headers, name="Garden"):
    res = await client.post("/categories/create", json={"name": name}, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()


async def _product(client, headers, **fields):
    payload = {"name": "Rake", "price": 19.99, "category_id": None}
    payload.update(fields)
    res = await client.post("/products/create", json=payload, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_then_fetch_returns_same_fields(client, admin_headers):
    """Fetched product matches what was created, including its category name."""
    category = await _category(client, admin_headers)
    created = await _product(
        client, admin_headers, name="Shovel", price=24.5, category_id=category["id"],
    )

    res = await client.get(f"/products/{created['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Shovel"
    assert body["price"] == 24.5
    assert body["category_id"] == category["id"]
    assert body["category_name"] == "Garden"


async def test_product_without_category_has_null_name(client, admin_headers):
    """Uncategorized product reports both category fields as null."""
    created = await _product(client, admin_headers)
    assert created["category_id"] is None
    assert created["category_name"] is None


async def test_list_is_newest_first_with_category_names(client, admin_headers):
    """List is newest first and joins each row's category name."""
    category = await _category(client, admin_headers)
    await _product(client, admin_headers, name="A", category_id=category["id"])
    await _product(client, admin_headers, name="B")
    await _product(client, admin_headers, name="C", category_id=category["id"])

    res = await client.get("/products")
    assert res.status_code == 200
    rows = res.json()
    assert [p["name"] for p in rows] == ["C", "B", "A"]
    assert [p["category_name"] for p in rows] == ["Garden", None, "Garden"]


async def test_unknown_category_is_409(client, admin_headers):
    """Dangling category_id is rejected by the foreign key."""
    res = await client.post(
        "/products/create",
        json={"name": "Rake", "price": 5, "category_id": 999},
        headers=admin_headers,
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONSTRAINT_VIOLATION"


async def test_negative_price_is_400(client, admin_headers):
    """Negative price fails validation."""
    res = await client.post(
        "/products/create", json={"name": "Rake", "price": -1}, headers=admin_headers,
    )
    assert res.status_code == 400


@pytest.mark.parametrize("price", [1.239, 0.005, 99_999_999.995, 100_000_000])
async def test_price_outside_column_precision_is_400(client, admin_headers, price):
    """Prices numeric(10,2) would round or overflow are refused before the DB."""
    res = await client.post(
        "/products/create", json={"name": "Rake", "price": price},
        headers=admin_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.price"


async def test_two_decimal_price_is_stored_exactly(client, admin_headers):
    """A cent-precise price reads back unchanged."""
    created = await _product(client, admin_headers, price=1.23)
    fetched = await client.get(f"/products/{created['id']}")
    assert fetched.json()["price"] == 1.23


async def test_deleting_category_nulls_product_reference(client, admin_headers):
    """ON DELETE SET NULL keeps the product but clears its category."""
    category = await _category(client, admin_headers)
    product = await _product(client, admin_headers, category_id=category["id"])

    res = await client.delete(
        f"/categories/delete/{category['id']}", headers=admin_headers,
    )
    assert res.status_code == 200

    fetched = await client.get(f"/products/{product['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["category_id"] is None
    assert fetched.json()["category_name"] is None


async def test_update_replaces_fields(client, admin_headers):
    """Update swaps name, price and category in one call."""
    garden = await _category(client, admin_headers, "Garden")
    kitchen = await _category(client, admin_headers, "Kitchen")
    product = await _product(client, admin_headers, category_id=garden["id"])

    res = await client.put(
        f"/products/edit/{product['id']}",
        json={"name": "Ladle", "price": 3.25, "category_id": kitchen["id"]},
        headers=admin_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Ladle"
    assert body["price"] == 3.25
    assert body["category_name"] == "Kitchen"


async def test_update_missing_is_404(client, admin_headers):
    """Updating an unknown id does not create it."""
    res = await client.put(
        "/products/edit/999", json={"name": "Ghost", "price": 1},
        headers=admin_headers,
    )
    assert res.status_code == 404


async def test_delete_then_fetch_is_404(client, admin_headers):
    """Deleted product is gone."""
    product = await _product(client, admin_headers)
    res = await client.delete(
        f"/products/delete/{product['id']}", headers=admin_headers,
    )
    assert res.status_code == 200
    assert (await client.get(f"/products/{product['id']}")).status_code == 404


async def test_delete_missing_is_404(client, admin_headers):
    """Deleting an unknown id reports 404."""
    res = await client.delete("/products/delete/999", headers=admin_headers)
    assert res.status_code == 404


async def test_writes_require_token(client):
    """Create without a token is 401."""
    res = await client.post("/products/create", json={"name": "Rake", "price": 1})
    assert res.status_code == 401

import re

import pytest

CHECKOUT_FORM = {
    "name": "Asha Rao",
    "email": "asha@example.com",
    "phone": "9876543210",
    "address": "12 MG Road",
    "city": "Pune",
    "state": "Maharashtra",
    "pincode": "411001",
    "paymentMethod": "upi",
}


@pytest.mark.anyio
async def test_checkout_requires_session(client, catalog):
    resp = await client.post("/api/checkout", json=CHECKOUT_FORM)
    assert resp.status_code == 401


@pytest.mark.anyio
async def test_empty_cart_is_400(client, catalog, auth_headers):
    resp = await client.post("/api/checkout", json=CHECKOUT_FORM, headers=auth_headers)

    assert resp.status_code == 400
    assert "cart" in resp.json()["details"]["fields"]


@pytest.mark.anyio
async def test_checkout_confirms_order_and_keeps_cart(client, catalog, auth_headers):
    await client.post("/api/cart", json={"productId": catalog["jeans"].id, "quantity": 1}, headers=auth_headers)

    resp = await client.post("/api/checkout", json=CHECKOUT_FORM, headers=auth_headers)

    assert resp.status_code == 201
    body = resp.json()
    assert re.fullmatch(r"ATTIRE-\d{1,4}", body["orderNumber"])
    assert body["status"] == "confirmed"
    assert body["totals"] == {
        "subtotal": 1299.0,
        "shipping": 0.0,
        "tax": 234.0,
        "total": 1533.0,
        "itemCount": 1,
    }

    # simulated placement leaves the cart untouched
    lines = (await client.get("/api/cart", headers=auth_headers)).json()
    assert len(lines) == 1


@pytest.mark.anyio
@pytest.mark.parametrize(
    "field,value",
    [
        ("name", "A"),
        ("email", "not-an-email"),
        ("phone", "12345"),
        ("address", "x"),
        ("pincode", "4110"),
        ("paymentMethod", "cheque"),
    ],
)
async def test_invalid_form_field_is_400(client, catalog, auth_headers, field, value):
    await client.post("/api/cart", json={"productId": catalog["tee"].id}, headers=auth_headers)

    resp = await client.post("/api/checkout", json={**CHECKOUT_FORM, field: value}, headers=auth_headers)

    assert resp.status_code == 400
    assert field in resp.json()["details"]["fields"]

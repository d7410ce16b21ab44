import pytest


@pytest.mark.anyio
async def test_wishlist_requires_session(client, catalog):
    resp = await client.post("/api/wishlist", json={"productId": catalog["tee"].id})
    assert resp.status_code == 401


@pytest.mark.anyio
async def test_add_is_idempotent(client, catalog, auth_headers):
    tee = catalog["tee"]

    first = await client.post("/api/wishlist", json={"productId": tee.id}, headers=auth_headers)
    second = await client.post("/api/wishlist", json={"productId": tee.id}, headers=auth_headers)

    assert first.status_code == 201
    assert second.json()["id"] == first.json()["id"]

    entries = (await client.get("/api/wishlist", headers=auth_headers)).json()
    assert len(entries) == 1
    assert entries[0]["product"]["slug"] == "cotton-tee"


@pytest.mark.anyio
async def test_add_unknown_product_is_400(client, catalog, auth_headers):
    resp = await client.post("/api/wishlist", json={"productId": 9999}, headers=auth_headers)
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_toggle_by_product_id(client, catalog, auth_headers):
    jeans = catalog["jeans"]

    resp = await client.post("/api/wishlist/toggle", json={"productId": jeans.id}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["wishlisted"] is True
    assert resp.json()["item"]["productId"] == jeans.id

    resp = await client.post("/api/wishlist/toggle", json={"productId": jeans.id}, headers=auth_headers)
    assert resp.json() == {"wishlisted": False, "item": None}

    assert (await client.get("/api/wishlist", headers=auth_headers)).json() == []


@pytest.mark.anyio
async def test_delete_by_entry_id_is_idempotent(client, catalog, auth_headers):
    added = await client.post("/api/wishlist", json={"productId": catalog["scarf"].id}, headers=auth_headers)
    entry_id = added.json()["id"]

    assert (await client.delete(f"/api/wishlist/{entry_id}", headers=auth_headers)).status_code == 204
    assert (await client.delete(f"/api/wishlist/{entry_id}", headers=auth_headers)).status_code == 204
    assert (await client.get("/api/wishlist", headers=auth_headers)).json() == []


@pytest.mark.anyio
async def test_wishlists_are_per_user(client, catalog, auth_headers, register_user):
    other = await register_user("bina")
    await client.post("/api/wishlist", json={"productId": catalog["tee"].id}, headers=other)

    assert (await client.get("/api/wishlist", headers=auth_headers)).json() == []

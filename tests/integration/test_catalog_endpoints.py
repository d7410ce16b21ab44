import pytest


@pytest.mark.anyio
async def test_list_categories(client, catalog):
    resp = await client.get("/api/categories")
    assert resp.status_code == 200
    assert [c["slug"] for c in resp.json()] == ["women", "men"]


@pytest.mark.anyio
async def test_category_by_slug(client, catalog):
    resp = await client.get("/api/categories/men")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Men"

    resp = await client.get("/api/categories/shoes")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_list_products_with_filters(client, catalog):
    resp = await client.get("/api/products", params={"category": "women", "trending": "true"})

    assert resp.status_code == 200
    assert [p["slug"] for p in resp.json()] == ["silk-scarf"]


@pytest.mark.anyio
async def test_list_products_limit(client, catalog):
    resp = await client.get("/api/products", params={"limit": 1})
    assert [p["slug"] for p in resp.json()] == ["cotton-tee"]


@pytest.mark.anyio
async def test_product_fields_are_camel_case(client, catalog):
    resp = await client.get("/api/products/slim-jeans")

    assert resp.status_code == 200
    body = resp.json()
    assert body["categoryId"] == catalog["jeans"].category_id
    assert body["reviewCount"] == 40
    assert body["price"] == 1299


@pytest.mark.anyio
async def test_missing_product_is_404(client, catalog):
    resp = await client.get("/api/products/nope")

    assert resp.status_code == 404
    assert resp.json()["details"] == {"entity": "product", "key": "nope"}


@pytest.mark.anyio
async def test_create_product(client, catalog):
    resp = await client.post(
        "/api/products",
        json={"name": "Linen Kurta", "slug": "linen-kurta", "price": 1799, "categoryId": catalog["tee"].category_id},
    )

    assert resp.status_code == 201
    assert resp.json()["description"] == ""

    resp = await client.get("/api/products/linen-kurta")
    assert resp.status_code == 200


@pytest.mark.anyio
async def test_create_product_rejects_bad_input(client, catalog):
    resp = await client.post(
        "/api/products",
        json={"name": "Bad", "slug": "Not A Slug", "price": -1, "categoryId": 1},
    )

    assert resp.status_code == 400
    fields = resp.json()["details"]["fields"]
    assert "slug" in fields
    assert "price" in fields


@pytest.mark.anyio
@pytest.mark.parametrize("params", [{"limit": 0}, {"limit": "abc"}, {"limit": -2}])
async def test_non_positive_or_garbage_limit_is_ignored(client, catalog, params):
    resp = await client.get("/api/products", params=params)

    assert resp.status_code == 200
    assert len(resp.json()) == 3


@pytest.mark.anyio
@pytest.mark.parametrize("value", ["yes", "1", "maybe", "True"])
async def test_only_literal_true_enables_flag_filters(client, catalog, value):
    featured = await client.get("/api/products", params={"featured": value})
    trending = await client.get("/api/products", params={"trending": value})

    assert featured.status_code == 200
    assert len(featured.json()) == 3
    assert trending.status_code == 200
    assert len(trending.json()) == 3

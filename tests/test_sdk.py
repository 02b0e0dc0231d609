# tests/test_sdk.py
import asyncio
import httpx
import pytest
from fastapi.testclient import TestClient
from catalog.main import create_app
from catalog.store import MemoryStore
from sdk.catalogclient import CatalogClient, CatalogAPIError

def make_sdk(products=None):
    app = create_app(MemoryStore(products))
    return CatalogClient(
        base_url="http://testserver",
        session=TestClient(app),
        async_transport=httpx.ASGITransport(app=app),
    )

def test_crud_through_client():
    c = make_sdk()
    created = c.create_product("Pen", 2.5, "Blue ink", "office")
    assert created["id"] == 1
    assert created["inStock"] is True
    assert c.list_products() == [created]
    assert c.get_product(1) == created

    updated = c.update_product(1, inStock=False)
    assert updated["inStock"] is False

    deleted = c.delete_product(1)
    assert deleted["deletedProduct"] == updated
    assert c.list_products() == []

def test_create_out_of_stock():
    c = make_sdk()
    assert c.create_product("Pen", 2.5, "Blue ink", "office", in_stock=False)["inStock"] is False

def test_errors_carry_server_message():
    c = make_sdk()
    with pytest.raises(CatalogAPIError) as exc:
        c.get_product(9999)
    assert exc.value.status_code == 404
    assert exc.value.message == "Product with ID 9999 not found"

    with pytest.raises(CatalogAPIError) as exc:
        c.create_product("", 1.0, "d", "c")
    assert exc.value.status_code == 400

def test_create_async():
    c = make_sdk([{"id": 10, "name": "Old"}])
    product = asyncio.run(c.create_product_async("Pen", 2.5, "Blue ink", "office"))
    assert product["id"] == 11

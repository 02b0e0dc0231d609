# tests/test_servers.py
import json
from fastapi.testclient import TestClient
from catalog import home, readonly
from catalog.store import JsonFileStore, MemoryStore

def test_home_page_is_html():
    client = TestClient(home.app)
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "<h1>Our Group Members</h1>" in r.text

def test_home_has_no_products_route():
    client = TestClient(home.app)
    assert client.get("/products").status_code == 404

def test_readonly_lists_products():
    products = [{"id": 1, "name": "Pen"}]
    client = TestClient(readonly.create_app(MemoryStore(products)))
    r = client.get("/products")
    assert r.status_code == 200
    assert r.json() == products

def test_readonly_rejects_writes():
    client = TestClient(readonly.create_app(MemoryStore()))
    assert client.post("/products", json={"name": "x"}).status_code == 405
    assert client.get("/products/1").status_code == 404

def test_readonly_storage_failure(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"not": "a list"}), encoding="utf-8")
    client = TestClient(readonly.create_app(JsonFileStore(path)))
    r = client.get("/products")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to retrieve products data"}

# tests/test_concurrency.py
import asyncio
import json
import httpx
from catalog.main import create_app
from catalog.store import JsonFileStore

async def _create_task(client, n):
    return await client.post("/products", json={
        "name": f"item {n}", "price": 1.0, "description": "d", "category": "x"
    })

async def _create_many(app, count):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await asyncio.gather(*(_create_task(ac, n) for n in range(count)))

def test_concurrent_creates_get_unique_ids(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("[]", encoding="utf-8")
    app = create_app(JsonFileStore(path))

    results = asyncio.run(_create_many(app, 20))

    assert all(r.status_code == 201 for r in results)
    ids = sorted(r.json()["id"] for r in results)
    assert ids == list(range(1, 21))
    assert len(json.loads(path.read_text(encoding="utf-8"))) == 20

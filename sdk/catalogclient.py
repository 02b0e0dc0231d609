# sdk/catalogclient.py
import requests
import httpx
from typing import Any, Dict, Optional


class CatalogAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _check(r):
    # works for both requests and httpx responses
    if r.status_code < 400:
        return r.json()
    try:
        message = r.json().get("error", r.text)
    except ValueError:
        message = r.text
    raise CatalogAPIError(r.status_code, message)


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:3000", session=None, timeout: int = 10,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.async_transport = async_transport

    def list_products(self):
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        return _check(r)

    def get_product(self, product_id: int):
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        return _check(r)

    def create_product(self, name: str, price: float, description: str, category: str,
                       in_stock: Optional[bool] = None):
        payload: Dict[str, Any] = {
            "name": name, "price": price, "description": description, "category": category
        }
        # leave inStock out so the server applies its default
        if in_stock is not None:
            payload["inStock"] = in_stock
        r = self.session.post(f"{self.base_url}/products", json=payload, timeout=self.timeout)
        return _check(r)

    def update_product(self, product_id: int, **fields):
        r = self.session.put(f"{self.base_url}/products/{product_id}", json=fields, timeout=self.timeout)
        return _check(r)

    def delete_product(self, product_id: int):
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        return _check(r)

    # Async create (used by the concurrency demo)
    async def create_product_async(self, name: str, price: float, description: str, category: str):
        payload = {"name": name, "price": price, "description": description, "category": category}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.async_transport) as client:
            r = await client.post(f"{self.base_url}/products", json=payload)
            return _check(r)

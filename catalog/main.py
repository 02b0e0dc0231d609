# catalog/main.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException

from .config import DATA_FILE
from .errors import NotFoundError, ValidationError
from .models import ProductCreate
from .service import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, parse_product_id, update_product_logic
)
from .store import CatalogStore, JsonFileStore
from .serving import serve
from .web import build_app, get_store

logger = logging.getLogger(__name__)

router = APIRouter()

ENDPOINTS = (
    "GET    /products       - Get all products",
    "GET    /products/:id   - Get a specific product",
    "POST   /products       - Create a new product",
    "PUT    /products/:id   - Update a product",
    "DELETE /products/:id   - Delete a product",
)

# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/products")
def list_products(store: CatalogStore = Depends(get_store)):
    try:
        return list_products_logic(store)
    except Exception:
        logger.exception("Error retrieving products")
        raise HTTPException(status_code=500, detail="Failed to retrieve products")

@router.get("/products/{product_id}")
def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
    pid = parse_product_id(product_id)
    try:
        return get_product_logic(store, pid)
    except (NotFoundError, ValidationError):
        raise
    except Exception:
        logger.exception("Error retrieving product %d", pid)
        raise HTTPException(status_code=500, detail="Failed to retrieve product")

@router.post("/products", status_code=201)
def create_product(payload: Optional[ProductCreate] = None, store: CatalogStore = Depends(get_store)):
    try:
        return create_product_logic(store, payload or ProductCreate())
    except (NotFoundError, ValidationError):
        raise
    except Exception:
        logger.exception("Error creating product")
        raise HTTPException(status_code=500, detail="Failed to create product")

@router.put("/products/{product_id}")
def update_product(
    product_id: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    store: CatalogStore = Depends(get_store),
):
    pid = parse_product_id(product_id)
    try:
        return update_product_logic(store, pid, payload or {})
    except (NotFoundError, ValidationError):
        raise
    except Exception:
        logger.exception("Error updating product %d", pid)
        raise HTTPException(status_code=500, detail="Failed to update product")

@router.delete("/products/{product_id}")
def delete_product(product_id: str, store: CatalogStore = Depends(get_store)):
    pid = parse_product_id(product_id)
    try:
        return delete_product_logic(store, pid)
    except (NotFoundError, ValidationError):
        raise
    except Exception:
        logger.exception("Error deleting product %d", pid)
        raise HTTPException(status_code=500, detail="Failed to delete product")


def create_app(store: CatalogStore) -> FastAPI:
    app = build_app("catalog-servers (flat-file product catalog)", store)
    app.include_router(router)
    return app

app = create_app(JsonFileStore(DATA_FILE))

def main():
    serve(app, "Catalog server", ENDPOINTS)

if __name__ == "__main__":
    main()

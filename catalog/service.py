import logging
import math
import re
from typing import Any, Dict, List

from .errors import NotFoundError, ValidationError
from .models import Product, ProductCreate
from .store import CatalogStore

# This file contains the core logic behind the product endpoints.
# Each function takes the store explicitly; none of them touch HTTP.

logger = logging.getLogger(__name__)


def parse_product_id(raw: str) -> int:
    # plain optionally signed digits only, no spaces or underscores
    if not re.fullmatch(r"[+-]?[0-9]+", raw):
        raise NotFoundError(f"Product with ID {raw} not found")
    return int(raw)


def next_product_id(products: List[Dict[str, Any]]) -> int:
    ids = [p.get("id") for p in products]
    numeric = [
        i for i in ids
        if isinstance(i, (int, float)) and not isinstance(i, bool) and math.isfinite(i)
    ]
    return int(max(numeric, default=0)) + 1


def _coerce_price(value: Any) -> float:
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Product price must be a number")
    if not math.isfinite(price):
        raise ValidationError("Product price must be a number")
    return price


def _find_index(products: List[Dict[str, Any]], product_id: int) -> int:
    for i, p in enumerate(products):
        if p.get("id") == product_id:
            return i
    raise NotFoundError(f"Product with ID {product_id} not found")


# Read endpoints
def list_products_logic(store: CatalogStore) -> List[Dict[str, Any]]:
    return store.read_all()

def get_product_logic(store: CatalogStore, product_id: int) -> Dict[str, Any]:
    products = store.read_all()
    return products[_find_index(products, product_id)]


# Write endpoints
def create_product_logic(store: CatalogStore, payload: ProductCreate) -> Dict[str, Any]:
    if not (payload.name and payload.price and payload.description and payload.category):
        raise ValidationError("Missing required product fields")
    price = _coerce_price(payload.price)
    # inStock defaults to true only when the body leaves it out
    in_stock = payload.in_stock if "in_stock" in payload.model_fields_set else True

    with store.lock:
        products = store.read_all()
        product = Product(
            id=next_product_id(products),
            name=payload.name,
            price=price,
            description=payload.description,
            category=payload.category,
            in_stock=in_stock,
        ).model_dump(by_alias=True)
        products.append(product)
        store.write_all(products)

    logger.info("Created product %d (%s)", product["id"], product["name"])
    return product

def update_product_logic(store: CatalogStore, product_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
    with store.lock:
        products = store.read_all()
        index = _find_index(products, product_id)
        updated = {**products[index], **changes, "id": product_id}
        products[index] = updated
        store.write_all(products)

    logger.info("Updated product %d", product_id)
    return updated

def delete_product_logic(store: CatalogStore, product_id: int) -> Dict[str, Any]:
    with store.lock:
        products = store.read_all()
        deleted = products.pop(_find_index(products, product_id))
        store.write_all(products)

    logger.info("Deleted product %d", product_id)
    return {
        "message": f"Product with ID {product_id} successfully deleted",
        "deletedProduct": deleted,
    }

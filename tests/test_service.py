# tests/test_service.py
import pytest
from catalog.errors import NotFoundError, ValidationError
from catalog.models import ProductCreate
from catalog.service import (
    create_product_logic, delete_product_logic, get_product_logic,
    next_product_id, parse_product_id, update_product_logic
)
from catalog.store import MemoryStore

def full(**overrides):
    data = {"name": "Pen", "price": 2, "description": "Blue ink", "category": "office"}
    data.update(overrides)
    return ProductCreate(**data)

def test_next_product_id():
    assert next_product_id([]) == 1
    assert next_product_id([{"id": 3}, {"id": 7}, {"id": 2}]) == 8
    assert next_product_id([{"name": "no id"}, {"id": "x"}]) == 1
    assert next_product_id([{"id": 3.0}, {"id": 2}]) == 4
    assert next_product_id([{"id": True}, {"id": 2.5}]) == 3

def test_parse_product_id():
    assert parse_product_id("42") == 42
    assert parse_product_id("-3") == -3
    for raw in ("4x2", "1_0", " 7 ", "", "\u00b2"):
        with pytest.raises(NotFoundError):
            parse_product_id(raw)

def test_create_on_memory_store():
    store = MemoryStore()
    product = create_product_logic(store, full())
    assert product == {"id": 1, "name": "Pen", "price": 2.0, "description": "Blue ink",
                       "category": "office", "inStock": True}
    assert store.read_all() == [product]

def test_create_keeps_explicit_null_in_stock():
    product = create_product_logic(MemoryStore(), ProductCreate.model_validate(
        {"name": "Pen", "price": 2, "description": "d", "category": "c", "inStock": None}
    ))
    assert product["inStock"] is None

def test_create_rejects_non_finite_price():
    with pytest.raises(ValidationError):
        create_product_logic(MemoryStore(), full(price="inf"))

def test_create_requires_fields():
    store = MemoryStore()
    with pytest.raises(ValidationError):
        create_product_logic(store, full(category=None))
    assert store.read_all() == []

def test_update_and_delete():
    store = MemoryStore([{"id": 1, "name": "Pen", "price": 2.0}])
    updated = update_product_logic(store, 1, {"id": 5, "price": 3.0})
    assert updated == {"id": 1, "name": "Pen", "price": 3.0}
    assert get_product_logic(store, 1) == updated

    result = delete_product_logic(store, 1)
    assert result["deletedProduct"] == updated
    assert store.read_all() == []
    with pytest.raises(NotFoundError):
        get_product_logic(store, 1)

# catalog/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any

class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: Any
    price: float
    description: Any
    category: Any
    in_stock: Any = Field(True, alias="inStock")

class ProductCreate(BaseModel):
    # presence is the only check, so values are taken as sent
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Any = None
    price: Any = None
    description: Any = None
    category: Any = None
    in_stock: Any = Field(None, alias="inStock")

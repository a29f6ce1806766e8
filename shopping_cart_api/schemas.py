from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Numeric(10, 2): at most eight digits before the point
MAX_PRICE = Decimal("100000000")

# Decimal in Python, plain number in JSON
Money = Annotated[
    Decimal,
    Field(gt=-MAX_PRICE, lt=MAX_PRICE),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# Product
class ProductCreate(CamelModel):
    name: str
    price: Money


class ProductOut(ProductCreate):
    id: int


# Cart item
class CartItemCreate(CamelModel):
    product_id: int
    quantity: int


class CartItemOut(CamelModel):
    id: int
    product_id: int
    quantity: int
    product: Optional[ProductOut] = None

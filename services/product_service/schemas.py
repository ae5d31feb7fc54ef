from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel


class ProductSummary(BaseModel):
    id: int
    name: str
    price: Decimal

    class Config:
        from_attributes = True


class ProductResponse(ProductSummary):
    description: Optional[str] = ""

    class Config:
        from_attributes = True


class IndexPage(BaseModel):
    username: str = ""
    products: List[ProductSummary] = []


class ProductPage(BaseModel):
    username: str = ""
    product: ProductResponse
    in_cart: int = 0

from decimal import Decimal
from typing import List

from pydantic import BaseModel


class CartItemResponse(BaseModel):
    product_id: int
    name: str
    price: Decimal


class CartPage(BaseModel):
    username: str
    items: List[CartItemResponse] = []

    @property
    def total(self) -> Decimal:
        return sum((i.price for i in self.items), Decimal("0.00"))

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product
from .repository import ProductRepository

SEED_PRODUCTS = (
    {"id": 1, "name": "Go T-Shirt", "price": Decimal("19.99"), "description": "A comfy Go-branded T-shirt"},
    {"id": 2, "name": "Go Mug", "price": Decimal("9.99"), "description": "A stylish mug for Go lovers"},
)


async def seed_products(db: AsyncSession) -> int:
    """Insert the starter catalog. Existing ids are left as they are; returns rows added."""
    added = 0
    for row in SEED_PRODUCTS:
        if await ProductRepository.insert_if_absent(db, Product(**row)):
            added += 1
    await db.commit()
    return added

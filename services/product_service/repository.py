from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Product


class ProductRepository:

    @staticmethod
    async def get_all_products(db: AsyncSession) -> Sequence[Product]:
        result = await db.execute(select(Product).order_by(Product.id))
        return result.scalars().all()

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
        return await db.get(Product, product_id)

    @staticmethod
    async def insert_if_absent(db: AsyncSession, product: Product) -> bool:
        """Stage ``product`` unless a row with its id exists. Caller commits."""
        if await db.get(Product, product.id) is not None:
            return False
        db.add(product)
        return True

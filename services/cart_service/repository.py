from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from services.product_service.models import Product

from .models import CartEntry


class CartRepository:

    @staticmethod
    async def add_item(db: AsyncSession, entry: CartEntry) -> CartEntry:
        db.add(entry)
        await db.commit()
        await db.refresh(entry)
        return entry

    @staticmethod
    async def list_items(db: AsyncSession, user_id: int):
        """Rows of (product id, name, price), one per cart entry, oldest first."""
        result = await db.execute(
            select(Product.id, Product.name, Product.price)
            .join(CartEntry, CartEntry.product_id == Product.id)
            .where(CartEntry.user_id == user_id)
            .order_by(CartEntry.id)
        )
        return result.all()

    @staticmethod
    async def count_items(db: AsyncSession, user_id: int, product_id: Optional[int] = None) -> int:
        stmt = select(func.count(CartEntry.id)).where(CartEntry.user_id == user_id)
        if product_id is not None:
            stmt = stmt.where(CartEntry.product_id == product_id)
        result = await db.execute(stmt)
        return result.scalar_one()

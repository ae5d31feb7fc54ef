from typing import List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import StoreError
from shared.observability import shop_cart_additions_total

from .models import CartEntry
from .repository import CartRepository
from .schemas import CartItemResponse

logger = structlog.get_logger(__name__)


class CartService:

    @staticmethod
    async def add_item(db: AsyncSession, user_id: int, product_id: int) -> None:
        """Append one cart row. The product id is not checked against the catalog here."""
        try:
            await CartRepository.add_item(db, CartEntry(user_id=user_id, product_id=product_id))
        except SQLAlchemyError as e:
            await db.rollback()
            raise StoreError("insert") from e
        shop_cart_additions_total.inc()
        logger.info("cart_item_added", user_id=user_id, product_id=product_id)

    @staticmethod
    async def list_items(db: AsyncSession, user_id: int) -> List[CartItemResponse]:
        rows = await CartRepository.list_items(db, user_id)
        return [
            CartItemResponse(product_id=pid, name=name, price=price)
            for pid, name, price in rows
        ]

    @staticmethod
    async def count_items(db: AsyncSession, user_id: int, product_id: Optional[int] = None) -> int:
        return await CartRepository.count_items(db, user_id, product_id)

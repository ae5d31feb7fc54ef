from typing import Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import ProductNotFound

from .models import Product
from .repository import ProductRepository
from .seed import seed_products

logger = structlog.get_logger(__name__)


class ProductService:

    @staticmethod
    async def list_products(db: AsyncSession) -> Sequence[Product]:
        return await ProductRepository.get_all_products(db)

    @staticmethod
    async def get_product(db: AsyncSession, product_id: int) -> Product:
        product = await ProductRepository.get_product_by_id(db, product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    @staticmethod
    async def seed(db: AsyncSession) -> int:
        added = await seed_products(db)
        logger.info("catalog_seeded", added=added)
        return added

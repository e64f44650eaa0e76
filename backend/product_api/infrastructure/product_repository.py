"""SQL Product Repository — ProductRepository implemented over an AsyncSession.

Invariants:
    - One commit per mutating call; the row is refreshed before it is returned
    - list_all() orders by id ascending (insertion order for an autoincrement key)
    - get() answers None for ids no integer column can hold, instead of letting
      the driver reject the bind parameter
"""

from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.models.product import Product

_MAX_ID = 2**31 - 1


class SqlProductRepository:
    """Product persistence backed by the request's database session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> Sequence[Product]:
        result = await self._db.execute(select(Product).order_by(Product.id))
        return result.scalars().all()

    async def get(self, product_id: int) -> Product | None:
        if not 0 < product_id <= _MAX_ID:
            return None
        return await self._db.get(Product, product_id)

    async def create(self, fields: dict[str, Any]) -> Product:
        product = Product(**fields)
        self._db.add(product)
        await self._db.commit()
        await self._db.refresh(product)
        return product

    async def update(self, product: Product, fields: dict[str, Any]) -> Product:
        for column, value in fields.items():
            setattr(product, column, value)
        await self._db.commit()
        await self._db.refresh(product)
        return product

    async def toggle_availability(self, product: Product) -> Product:
        product.availability = not product.availability
        await self._db.commit()
        await self._db.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        await self._db.delete(product)
        await self._db.commit()

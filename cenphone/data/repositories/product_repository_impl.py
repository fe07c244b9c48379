"""SQLAlchemy implementation of ProductRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cenphone.domain.entities import Product
from cenphone.domain.exceptions import NotFoundError
from cenphone.domain.repositories import ProductRepository
from cenphone.domain.value_objects import ProductId

from ..mappers import ProductMapper
from ..models import ProductModel


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, product: Product) -> None:
        self._session.add(ProductMapper.to_persistence(product))
        await self._session.flush()

    async def get(self, product_id: ProductId) -> Optional[Product]:
        model = await self._session.get(ProductModel, str(product_id))
        return ProductMapper.to_domain(model) if model else None

    async def list_all(self) -> List[Product]:
        result = await self._session.execute(select(ProductModel))
        return [ProductMapper.to_domain(model) for model in result.scalars().all()]

    async def update(self, product: Product) -> None:
        model = await self._session.get(ProductModel, str(product.product_id))
        if model is None:
            raise NotFoundError("Product", product.product_id)
        ProductMapper.update_persistence(product, model)
        await self._session.flush()

    async def delete(self, product_id: ProductId) -> bool:
        model = await self._session.get(ProductModel, str(product_id))
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

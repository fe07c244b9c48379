"""Repository interface for Product records."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product import Product
from ..value_objects import ProductId


class ProductRepository(ABC):
    """Abstract repository for Product persistence."""

    @abstractmethod
    async def add(self, product: Product) -> None:
        pass

    @abstractmethod
    async def get(self, product_id: ProductId) -> Optional[Product]:
        """Retrieve product by identifier.

        Returns:
            Product if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Product]:
        pass

    @abstractmethod
    async def update(self, product: Product) -> None:
        pass

    @abstractmethod
    async def delete(self, product_id: ProductId) -> bool:
        """Delete product.

        Returns:
            True if a row was removed, False if it did not exist
        """
        pass

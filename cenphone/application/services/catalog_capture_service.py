"""Application service that turns a chosen phone configuration into a Product record."""

import logging
from typing import List, Optional

from cenphone.data.uow import UnitOfWorkFactory
from cenphone.domain.catalog import PhoneCatalog
from cenphone.domain.entities import Product
from cenphone.domain.exceptions import NotFoundError, ValidationError
from cenphone.domain.value_objects import CustomerId, ProductId, parse_price
from cenphone.domain.value_objects.price import PriceInput

logger = logging.getLogger(__name__)


class CatalogCaptureService:
    """
    Persist product selections and maintain captured products.

    Every capture creates a new row, even for an identical configuration,
    so each checkout gets its own product id.
    """

    def __init__(self, uow_factory: UnitOfWorkFactory, catalog: Optional[PhoneCatalog] = None) -> None:
        self._uow_factory = uow_factory
        self._catalog = catalog or PhoneCatalog()

    @property
    def catalog(self) -> PhoneCatalog:
        return self._catalog

    async def capture_selection(
        self,
        make: str,
        model: str,
        color: str,
        storage: str,
        price: PriceInput,
        owner_id: Optional[CustomerId] = None,
    ) -> Product:
        """Persist one configuration with a fresh product id.

        Args:
            make: Phone make ("iPhone")
            model: Phone model ("iPhone 15")
            color: Selected colour
            storage: Selected storage tier ("128 GB")
            price: Decimal, number or display string ("$1,799.00")
            owner_id: Shopper the selection belongs to, if known

        Raises:
            InvalidPriceError: If the price is unparsable or negative
            PersistenceError: If the commit fails
        """
        product = Product(
            product_id=ProductId.generate(),
            phone_make=make,
            phone_model=model,
            phone_color=color,
            storage_capacity=storage,
            price=parse_price(price),
            owner_id=owner_id,
        )

        async with self._uow_factory() as uow:
            await uow.products.add(product)
            await uow.commit()

        logger.info(
            f"✅ Captured product {product.product_id}: {product.display_name} "
            f"{product.storage_capacity} {product.phone_color} {product.display_price}"
        )
        return product

    async def capture_from_catalog(
        self,
        model_name: str,
        color: Optional[str] = None,
        storage: Optional[str] = None,
        owner_id: Optional[CustomerId] = None,
    ) -> Product:
        """Capture a catalog model, pricing it from the storage tier list.

        Raises:
            NotFoundError: If the model is not in the catalog
            ValidationError: If the colour or storage is not offered for the model
        """
        phone = self._catalog.find_model(model_name)
        if phone is None:
            raise NotFoundError("Phone model", model_name)

        color = color or phone.default_color
        storage = storage or phone.default_storage

        errors = {}
        if color not in phone.colors:
            errors["color"] = f"{color} is not available for {phone.name}"
        if storage not in phone.storage_options:
            errors["storage"] = f"{storage} is not available for {phone.name}"
        if errors:
            raise ValidationError(errors)

        return await self.capture_selection(
            make=phone.make,
            model=phone.name,
            color=color,
            storage=storage,
            price=self._catalog.price_for(phone, storage),
            owner_id=owner_id,
        )

    async def get_product(self, product_id: ProductId) -> Product:
        async with self._uow_factory() as uow:
            product = await uow.products.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    async def list_products(self) -> List[Product]:
        async with self._uow_factory() as uow:
            return await uow.products.list_all()

    async def update_product(
        self,
        product_id: ProductId,
        make: Optional[str] = None,
        model: Optional[str] = None,
        color: Optional[str] = None,
        storage: Optional[str] = None,
        price: Optional[PriceInput] = None,
    ) -> Product:
        """Overwrite the given fields; ``None`` keeps the stored value."""
        new_price = parse_price(price) if price is not None else None

        async with self._uow_factory() as uow:
            product = await uow.products.get(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)

            if make is not None:
                product.phone_make = make
            if model is not None:
                product.phone_model = model
            if color is not None:
                product.phone_color = color
            if storage is not None:
                product.storage_capacity = storage
            if new_price is not None:
                product.price = new_price

            await uow.products.update(product)
            await uow.commit()

        logger.info(f"Product {product_id} updated")
        return product

    async def delete_product(self, product_id: ProductId) -> None:
        """
        Raises:
            NotFoundError: If the product does not exist
            PersistenceError: If an order still references the product
        """
        async with self._uow_factory() as uow:
            if not await uow.products.delete(product_id):
                raise NotFoundError("Product", product_id)
            await uow.commit()

        logger.info(f"Product {product_id} deleted")

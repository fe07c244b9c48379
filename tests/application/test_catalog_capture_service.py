"""Tests for CatalogCaptureService."""
from decimal import Decimal

import pytest

from cenphone.domain.exceptions import (
    InvalidPriceError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from cenphone.domain.value_objects import ProductId


class TestCaptureSelection:
    @pytest.mark.asyncio
    async def test_round_trip_preserves_fields(self, catalog_service, product, customer_id):
        stored = await catalog_service.get_product(product.product_id)

        assert stored == product
        assert stored.phone_make == "iPhone"
        assert stored.phone_model == "iPhone 15"
        assert stored.phone_color == "Red"
        assert stored.storage_capacity == "128 GB"
        assert stored.price == Decimal("899.00")
        assert stored.owner_id == customer_id

    @pytest.mark.asyncio
    async def test_identical_configuration_gets_new_id(self, catalog_service):
        first = await catalog_service.capture_selection("Samsung", "Galaxy S23", "Black", "128 GB", "$699")
        second = await catalog_service.capture_selection("Samsung", "Galaxy S23", "Black", "128 GB", "$699")

        assert first.product_id != second.product_id
        assert len(await catalog_service.list_products()) == 2

    @pytest.mark.asyncio
    async def test_thousands_separator(self, catalog_service):
        product = await catalog_service.capture_selection(
            "Samsung", "Galaxy Z Fold 5", "Cream", "256 GB", "$1,799.00"
        )
        assert product.price == Decimal("1799.00")
        assert product.owner_id is None

    @pytest.mark.asyncio
    async def test_invalid_price_is_not_stored(self, catalog_service):
        with pytest.raises(InvalidPriceError):
            await catalog_service.capture_selection("iPhone", "iPhone 15", "Red", "128 GB", "free")
        assert await catalog_service.list_products() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["1e30", "$99999999999999999999999999999", 1e40])
    async def test_oversized_price_is_a_price_error(self, catalog_service, price):
        with pytest.raises(InvalidPriceError):
            await catalog_service.capture_selection("iPhone", "iPhone 15", "Red", "128 GB", price)
        assert await catalog_service.list_products() == []


class TestCaptureFromCatalog:
    @pytest.mark.asyncio
    async def test_priced_by_storage_tier(self, catalog_service):
        product = await catalog_service.capture_from_catalog("iPhone 15 Pro", "Blue", "512 GB")

        assert product.phone_make == "iPhone"
        assert product.phone_model == "iPhone 15 Pro"
        assert product.price == Decimal("999.00")

    @pytest.mark.asyncio
    async def test_defaults_to_first_colour_and_storage(self, catalog_service):
        product = await catalog_service.capture_from_catalog("Google Pixel 8")

        assert product.phone_make == "Google"
        assert product.phone_color == "Mint"
        assert product.storage_capacity == "128 GB"
        assert product.price == Decimal("799.00")

    @pytest.mark.asyncio
    async def test_unknown_model(self, catalog_service):
        with pytest.raises(NotFoundError):
            await catalog_service.capture_from_catalog("Nokia 3310")

    @pytest.mark.asyncio
    async def test_unavailable_options(self, catalog_service):
        with pytest.raises(ValidationError) as exc_info:
            await catalog_service.capture_from_catalog("iPhone 15", "Purple", "1 TB")
        assert set(exc_info.value.errors) == {"color", "storage"}


class TestProductMaintenance:
    @pytest.mark.asyncio
    async def test_update_product(self, catalog_service, product):
        updated = await catalog_service.update_product(product.product_id, color="Gold", price="$950")

        stored = await catalog_service.get_product(product.product_id)
        assert stored == updated
        assert stored.phone_color == "Gold"
        assert stored.price == Decimal("950.00")
        assert stored.phone_model == "iPhone 15"

    @pytest.mark.asyncio
    async def test_update_missing_product(self, catalog_service):
        with pytest.raises(NotFoundError):
            await catalog_service.update_product(ProductId.generate(), color="Gold")

    @pytest.mark.asyncio
    async def test_delete_product(self, catalog_service, product):
        await catalog_service.delete_product(product.product_id)

        with pytest.raises(NotFoundError):
            await catalog_service.get_product(product.product_id)
        with pytest.raises(NotFoundError):
            await catalog_service.delete_product(product.product_id)

    @pytest.mark.asyncio
    async def test_delete_ordered_product_fails_and_rolls_back(
        self, catalog_service, ledger, product, customer_id
    ):
        await ledger.create_order(customer_id, product.product_id, product.price)

        with pytest.raises(PersistenceError):
            await catalog_service.delete_product(product.product_id)

        assert await catalog_service.get_product(product.product_id) == product

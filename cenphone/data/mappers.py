"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from cenphone.domain.entities import Order, Product, User
from cenphone.domain.enums import OrderStatus
from cenphone.domain.value_objects import CustomerId, OrderId, ProductId

from .models import OrderModel, ProductModel, UserModel


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; stored datetimes are always UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_storage_datetime(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    return _to_utc(value).replace(tzinfo=None)


class UserMapper:
    """Static mapper for User ↔ UserModel transformation."""

    @staticmethod
    def to_domain(model: UserModel) -> User:
        """Convert ORM model to domain entity.

        Args:
            model: UserModel instance

        Returns:
            User domain entity
        """
        return User(
            customer_id=CustomerId.parse(model.customer_id),
            full_name=model.full_name,
            address=model.address,
            city=model.city,
            province=model.province,
            country=model.country,
            telephone=model.telephone,
            email=model.email,
            username=model.username,
            password_hash=model.password_hash,
        )

    @staticmethod
    def to_persistence(entity: User) -> UserModel:
        """Convert domain entity to ORM model.

        Args:
            entity: User domain entity

        Returns:
            UserModel instance
        """
        return UserModel(
            customer_id=str(entity.customer_id),
            full_name=entity.full_name,
            address=entity.address,
            city=entity.city,
            province=entity.province,
            country=entity.country,
            telephone=entity.telephone,
            email=entity.email,
            username=entity.username,
            password_hash=entity.password_hash,
        )

    @staticmethod
    def update_persistence(entity: User, model: UserModel) -> UserModel:
        """Copy mutable fields onto an existing row. Identity fields never change."""
        model.address = entity.address
        model.city = entity.city
        model.province = entity.province
        model.country = entity.country
        model.telephone = entity.telephone
        model.password_hash = entity.password_hash
        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            product_id=ProductId.parse(model.product_id),
            phone_make=model.phone_make,
            phone_model=model.phone_model,
            phone_color=model.phone_color,
            storage_capacity=model.storage_capacity,
            price=Decimal(str(model.price)),
            owner_id=CustomerId.parse(model.owner_id) if model.owner_id else None,
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(
            product_id=str(entity.product_id),
            phone_make=entity.phone_make,
            phone_model=entity.phone_model,
            phone_color=entity.phone_color,
            storage_capacity=entity.storage_capacity,
            price=entity.price,
            owner_id=str(entity.owner_id) if entity.owner_id else None,
        )

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        model.phone_make = entity.phone_make
        model.phone_model = entity.phone_model
        model.phone_color = entity.phone_color
        model.storage_capacity = entity.storage_capacity
        model.price = entity.price
        model.owner_id = str(entity.owner_id) if entity.owner_id else None
        return model


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with the product snapshot."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with product snapshot).

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        product = ProductMapper.to_domain(model.product) if model.product is not None else None

        return Order(
            order_id=OrderId.parse(model.order_id),
            customer_id=CustomerId.parse(model.customer_id),
            product_id=ProductId.parse(model.product_id),
            total_amount=Decimal(str(model.total_amount)),
            status=OrderStatus.parse(model.status),
            order_date=_to_utc(model.order_date),
            product=product,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        return OrderModel(
            order_id=str(entity.order_id),
            order_date=_to_storage_datetime(entity.order_date),
            total_amount=entity.total_amount,
            status=entity.status.value,
            customer_id=str(entity.customer_id),
            product_id=str(entity.product_id),
        )

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity (total and status only).

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.total_amount = entity.total_amount
        model.status = entity.status.value
        return model

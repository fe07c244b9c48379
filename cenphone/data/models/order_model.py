"""SQLAlchemy ORM model for orders."""

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    order_id = Column(String(36), primary_key=True)
    # Nullable so rows written before order dates existed can still be read
    order_date = Column(DateTime, nullable=True)
    total_amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String(50), nullable=False, default="Confirmed")
    customer_id = Column(String(36), ForeignKey("users.customer_id"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.product_id"), nullable=False)

    user = relationship("UserModel", back_populates="orders")
    # Eager so the async session never lazy-loads during mapping
    product = relationship("ProductModel", back_populates="orders", lazy="joined")

    __table_args__ = (
        UniqueConstraint("customer_id", "product_id", name="uq_orders_customer_product"),
    )

"""SQLAlchemy ORM model for captured products."""

from sqlalchemy import Column, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    product_id = Column(String(36), primary_key=True)
    phone_make = Column(String(100), nullable=False)
    phone_model = Column(String(255), nullable=False)
    phone_color = Column(String(100), nullable=False)
    storage_capacity = Column(String(50), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    owner_id = Column(
        String(36),
        ForeignKey("users.customer_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    owner = relationship("UserModel", back_populates="products")
    orders = relationship("OrderModel", back_populates="product")

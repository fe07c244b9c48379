"""Data layer - SQLAlchemy models, mappers, repositories and the Unit of Work."""

from .uow import UnitOfWork, UnitOfWorkFactory, create_uow, uow_factory

__all__ = ["UnitOfWork", "UnitOfWorkFactory", "create_uow", "uow_factory"]

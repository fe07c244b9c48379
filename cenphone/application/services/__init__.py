"""Application services."""

from .account_directory import AccountDirectory
from .catalog_capture_service import CatalogCaptureService
from .order_ledger import OrderLedger

__all__ = ["AccountDirectory", "CatalogCaptureService", "OrderLedger"]

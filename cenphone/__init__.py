"""CenPhone store - accounts, catalog capture, orders and checkout."""

__version__ = "1.0.0"

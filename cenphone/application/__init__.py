"""Application layer - services and the checkout use case."""

"""Application use cases."""

from .checkout_workflow import CheckoutStep, CheckoutWorkflow

__all__ = ["CheckoutStep", "CheckoutWorkflow"]

"""
Checkout Workflow Use Case.

Flow:
1. Select a product (captured as its own Product row)
2. Confirm delivery address and accept the terms
3. Submit payment details (validated locally, never transmitted)
4. Confirm: create the order and build the confirmation screen data

Each step requires the previous one. Confirming twice on the same
workflow returns the same confirmation.
"""
import logging
from enum import IntEnum
from typing import Optional

from cenphone.application.dtos.checkout_dto import ConfirmationDTO, DeliveryInfo, PaymentRequest
from cenphone.application.services.account_directory import AccountDirectory
from cenphone.application.services.catalog_capture_service import CatalogCaptureService
from cenphone.application.services.order_ledger import Clock, OrderLedger
from cenphone.application.session import Session
from cenphone.domain.entities import Order, Product, User, utc_now
from cenphone.domain.enums import PaymentMethod
from cenphone.domain.exceptions import CheckoutStateError, DuplicateOrderError, ValidationError
from cenphone.domain.value_objects import CustomerId, DeliveryAddress, ProductId, format_price
from cenphone.domain.value_objects.price import PriceInput

logger = logging.getLogger(__name__)


class CheckoutStep(IntEnum):
    """Progress through checkout, in order."""

    STARTED = 0
    PRODUCT_SELECTED = 1
    DELIVERY_CONFIRMED = 2
    PAYMENT_SUBMITTED = 3
    CONFIRMED = 4


class CheckoutWorkflow:
    """
    Use case for one shopper's checkout.

    This orchestrates the three services in sequence:
    1. CatalogCaptureService for the selected configuration
    2. AccountDirectory for the shopper (and optional address save)
    3. OrderLedger for the order itself
    """

    def __init__(
        self,
        accounts: AccountDirectory,
        catalog: CatalogCaptureService,
        orders: OrderLedger,
        session: Session,
        clock: Optional[Clock] = None,
        currency: str = "CAD",
    ):
        """
        Initialize use case with dependencies.

        Args:
            accounts: Account directory
            catalog: Catalog capture service
            orders: Order ledger
            session: Logged-in session of the shopper
            clock: Returns the current aware UTC time
            currency: Currency shown on the confirmation
        """
        self._accounts = accounts
        self._catalog = catalog
        self._orders = orders
        self._session = session
        self._clock = clock or utc_now
        self._currency = currency

        self._step = CheckoutStep.STARTED
        self._product: Optional[Product] = None
        self._delivery: Optional[DeliveryAddress] = None
        self._payment_method: Optional[PaymentMethod] = None
        self._confirmation: Optional[ConfirmationDTO] = None

    @property
    def step(self) -> CheckoutStep:
        return self._step

    @property
    def product(self) -> Optional[Product]:
        return self._product

    @property
    def delivery_address(self) -> Optional[DeliveryAddress]:
        return self._delivery

    def _require_step(self, step_name: str, required: CheckoutStep, required_name: str) -> None:
        if self._step < required:
            raise CheckoutStateError(step_name, required_name)

    def _restart_with(self, product: Product) -> Product:
        self._product = product
        self._delivery = None
        self._payment_method = None
        self._confirmation = None
        self._step = CheckoutStep.PRODUCT_SELECTED
        return product

    # ------------------------------------------------------------------
    # Step 1: product
    # ------------------------------------------------------------------

    async def select_product(
        self,
        make: str,
        model: str,
        color: str,
        storage: str,
        price: PriceInput,
    ) -> Product:
        """Capture an explicit configuration. Restarts any checkout in progress."""
        customer_id = self._session.require_customer()
        product = await self._catalog.capture_selection(
            make=make,
            model=model,
            color=color,
            storage=storage,
            price=price,
            owner_id=customer_id,
        )
        return self._restart_with(product)

    async def select_catalog_model(
        self,
        model_name: str,
        color: Optional[str] = None,
        storage: Optional[str] = None,
    ) -> Product:
        """Capture a catalog model priced by storage tier."""
        customer_id = self._session.require_customer()
        product = await self._catalog.capture_from_catalog(
            model_name, color=color, storage=storage, owner_id=customer_id
        )
        return self._restart_with(product)

    async def select_captured_product(self, product_id: ProductId) -> Product:
        """Resume checkout for a product captured earlier (no new row)."""
        self._session.require_customer()
        product = await self._catalog.get_product(product_id)
        return self._restart_with(product)

    # ------------------------------------------------------------------
    # Step 2: delivery
    # ------------------------------------------------------------------

    async def confirm_delivery(
        self,
        delivery_info: DeliveryInfo,
        terms_accepted: bool,
        save_to_profile: bool = False,
    ) -> DeliveryAddress:
        """
        Raises:
            NotAuthenticatedError: Anonymous session
            CheckoutStateError: No product selected
            ValidationError: Empty address field or terms not accepted
        """
        customer_id = self._session.require_customer()
        self._require_step("confirm_delivery", CheckoutStep.PRODUCT_SELECTED, "select_product")

        address = delivery_info.to_address()
        errors = {}
        try:
            address.validate()
        except ValidationError as e:
            errors.update(e.errors)
        if not terms_accepted:
            errors["terms_accepted"] = "You must accept the terms and conditions"
        if errors:
            raise ValidationError(errors)

        if save_to_profile:
            await self._accounts.update_address(customer_id, address)

        self._delivery = address
        self._payment_method = None
        self._step = CheckoutStep.DELIVERY_CONFIRMED
        return address

    # ------------------------------------------------------------------
    # Step 3: payment
    # ------------------------------------------------------------------

    def submit_payment(self, payment: PaymentRequest) -> PaymentMethod:
        """
        Validate payment details. Card methods check every card field and
        report all failures together; wallet methods need nothing else.

        Raises:
            NotAuthenticatedError: Anonymous session
            CheckoutStateError: Delivery not confirmed
            ValidationError: Card fields invalid
        """
        self._session.require_customer()
        self._require_step("submit_payment", CheckoutStep.DELIVERY_CONFIRMED, "confirm_delivery")

        if payment.method.requires_card:
            card = payment.to_card()
            card.validate(self._clock().date())
            logger.info(f"Card payment accepted ({payment.method.value} {card.masked_number})")
        else:
            logger.info(f"Payment method accepted ({payment.method.value})")

        self._payment_method = payment.method
        self._step = CheckoutStep.PAYMENT_SUBMITTED
        return payment.method

    # ------------------------------------------------------------------
    # Step 4: confirmation
    # ------------------------------------------------------------------

    async def confirm(self) -> ConfirmationDTO:
        """Create the order (once) and return the confirmation.

        Raises:
            NotAuthenticatedError: Anonymous session
            CheckoutStateError: Payment not submitted
            NotFoundError: User or product vanished
            PersistenceError: If the commit fails
        """
        customer_id = self._session.require_customer()
        if self._confirmation is not None:
            return self._confirmation
        self._require_step("confirm", CheckoutStep.PAYMENT_SUBMITTED, "submit_payment")

        user = await self._accounts.get_user(customer_id)
        product = await self._catalog.get_product(self._product.product_id)
        order = await self._place_order(customer_id, product)

        self._confirmation = self._to_confirmation(user, product, order)
        self._step = CheckoutStep.CONFIRMED
        return self._confirmation

    async def _place_order(self, customer_id: CustomerId, product: Product) -> Order:
        try:
            return await self._orders.create_order(customer_id, product.product_id, product.price)
        except DuplicateOrderError:
            # Re-entry from a fresh workflow: reuse the order already placed
            existing = await self._orders.find_order(customer_id, product.product_id)
            if existing is None:
                raise
            logger.info(f"Reusing existing order {existing.order_id}")
            return existing

    def _to_confirmation(self, user: User, product: Product, order: Order) -> ConfirmationDTO:
        return ConfirmationDTO(
            order_id=str(order.order_id),
            order_number=order.order_id.short,
            customer_name=user.first_name,
            product_name=product.display_name,
            phone_color=product.phone_color,
            storage_capacity=product.storage_capacity,
            total_amount=order.total_amount,
            display_total=format_price(order.total_amount),
            currency=self._currency,
            status=order.status.value,
            order_date=order.order_date,
            delivery_address=str(self._delivery),
            payment_method=self._payment_method.value,
        )

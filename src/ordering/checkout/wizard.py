"""Checkout wizard — turns the signed-in customer's cart into an order.

The wizard walks the customer through three screens::

    Summary → Address → Payment → (PlacingOrder) → Confirmed

It holds no persistent state of its own. The cart, the address book, the
discount ledger and the signed-in user are injected, so the same wizard runs
behind the HTTP API and in tests with in-memory fixtures.

Placing an order is two writes: the order itself, then clearing the cart.
They are not atomic. If the order write fails nothing changes and the wizard
goes back to Payment. If the cart clear fails the order stays placed and the
failure is reported to the caller.
"""

import json
from enum import Enum

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from ordering.cart.pricing import cart_subtotal
from ordering.cart.service import CartService
from ordering.customer.port import AddressBookService, AuthService
from ordering.discount.discount import calculate_discount
from ordering.discount.ledger import DiscountLedger
from ordering.order.creation import PlaceOrder
from shared.errors import RemoteWriteFailed, ValidationFailed

logger = structlog.get_logger(__name__)


class CheckoutStep(Enum):
    SUMMARY = "Summary"
    ADDRESS = "Address"
    PAYMENT = "Payment"
    PLACING_ORDER = "PlacingOrder"
    CONFIRMED = "Confirmed"


class CheckoutWizard:
    def __init__(
        self,
        auth: AuthService,
        cart: CartService,
        address_book: AddressBookService,
        discounts: DiscountLedger | None = None,
        payment_method: str = "cod",
    ):
        self._auth = auth
        self._cart = cart
        self._address_book = address_book
        self._discounts = discounts or DiscountLedger()

        self.step = CheckoutStep.SUMMARY
        self.selected_address_id = None
        self.discount = None
        self.payment_method = payment_method
        self.order_id = None

    # -------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------
    def next(self):
        if self.step == CheckoutStep.SUMMARY:
            self.step = CheckoutStep.ADDRESS
            self._preselect_address()
        elif self.step == CheckoutStep.ADDRESS:
            if not self.selected_address_id:
                raise ValidationFailed({"address": ["Please select a shipping address"]})
            self.step = CheckoutStep.PAYMENT
        elif self.step == CheckoutStep.PAYMENT:
            self.place_order()
        return self.step

    def back(self):
        if self.step == CheckoutStep.ADDRESS:
            self.step = CheckoutStep.SUMMARY
        elif self.step == CheckoutStep.PAYMENT:
            self.step = CheckoutStep.ADDRESS
        return self.step

    def _preselect_address(self):
        if self.selected_address_id:
            return
        user = self._auth.current_user()
        if user is None:
            return
        address = self._address_book.default_for(user.user_id)
        if address is not None:
            self.selected_address_id = address.address_id

    # -------------------------------------------------------------------
    # Selections
    # -------------------------------------------------------------------
    def select_address(self, address_id):
        user = self._auth.require_user()
        if self._address_book.find(user.user_id, address_id) is None:
            raise ValidationFailed({"address": [f"Address {address_id} is not in your address book"]})
        self.selected_address_id = str(address_id)

    def apply_discount(self, discount_id):
        """Apply a discount by id, replacing any previous one. ``None`` removes it."""
        if discount_id is None:
            self.discount = None
            return None
        self.discount = self._usable(self._discounts.get(discount_id))
        return self.discount

    def apply_discount_code(self, code):
        discount = self._discounts.find_by_code(code)
        if discount is None:
            raise ValidationFailed({"discount_code": [f"Discount code {code} is not valid"]})
        self.discount = self._usable(discount)
        return self.discount

    def _usable(self, discount):
        if not discount.is_active():
            raise ValidationFailed({"discount_code": [f"Discount code {discount.code} is {discount.status}"]})
        return discount

    def select_payment_method(self, method):
        if not method or not str(method).strip():
            raise ValidationFailed({"payment_method": ["Payment method is required"]})
        self.payment_method = str(method).strip()

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def subtotal(self):
        return self._cart.subtotal()

    def discount_amount(self):
        return calculate_discount(self.discount, self.subtotal())

    def total(self):
        subtotal = self.subtotal()
        return subtotal - calculate_discount(self.discount, subtotal)

    # -------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------
    def place_order(self):
        """Write the order, clear the cart and return the new order id."""
        user = self._auth.require_user()

        if self.step != CheckoutStep.PAYMENT:
            raise ValidationFailed({"step": [f"Orders can only be placed from the Payment step, not {self.step.value}"]})

        if not self.selected_address_id:
            raise ValidationFailed({"address": ["Please select a shipping address"]})
        address = self._address_book.find(user.user_id, self.selected_address_id)
        if address is None:
            raise ValidationFailed({"address": [f"Address {self.selected_address_id} is not in your address book"]})

        items = self._cart.items()
        if not items:
            raise ValidationFailed({"cart": ["Your cart is empty"]})

        subtotal = cart_subtotal(items)
        discount_amount = calculate_discount(self.discount, subtotal)

        command = PlaceOrder(
            user_id=user.user_id,
            customer=json.dumps(user.snapshot()),
            items=json.dumps(items),
            subtotal=subtotal,
            discount=discount_amount,
            discount_id=str(self.discount.id) if self.discount else None,
            total=subtotal - discount_amount,
            address=address.one_line(),
            payment_method=self.payment_method or "cod",
        )

        self.step = CheckoutStep.PLACING_ORDER
        try:
            order_id = current_domain.process(command, asynchronous=False)
        except ValidationError:
            self.step = CheckoutStep.PAYMENT
            raise
        except Exception as exc:
            self.step = CheckoutStep.PAYMENT
            logger.error("Order write rejected", user_id=user.user_id, error=str(exc))
            raise RemoteWriteFailed("place order", str(exc)) from exc

        self.order_id = order_id
        self.step = CheckoutStep.CONFIRMED
        logger.info(
            "Checkout completed",
            order_id=order_id,
            user_id=user.user_id,
            subtotal=subtotal,
            discount=discount_amount,
            payment_method=command.payment_method,
        )

        try:
            self._cart.clear()
        except RemoteWriteFailed as exc:
            logger.error("Cart not cleared after checkout", order_id=order_id, user_id=user.user_id)
            raise RemoteWriteFailed(f"clear cart after placing order {order_id}", exc.reason) from exc

        return order_id

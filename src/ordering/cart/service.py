"""Cart service — the signed-in customer's cart as an injectable collaborator.

Writes go through the cart commands; after each successful write a fresh
snapshot is published on ``cart_feed`` so open subscriptions stay current.
"""

from datetime import UTC, datetime

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from ordering.cart.management import ClearCart
from ordering.cart.pricing import cart_subtotal
from ordering.customer.port import AuthService
from shared.errors import RemoteWriteFailed
from shared.feeds import ChangeFeed
from shared.timestamps import decode_timestamp

logger = structlog.get_logger(__name__)

_EPOCH = datetime.min.replace(tzinfo=UTC)


def load_cart_items(customer_id) -> list[dict]:
    """Cart lines for ``customer_id`` in the order they were added."""
    try:
        cart = current_domain.repository_for(ShoppingCart).get(str(customer_id))
    except ObjectNotFoundError:
        return []
    items = sorted(cart.items, key=lambda i: decode_timestamp(i.added_at) or _EPOCH)
    return [item.to_dict() for item in items]


def load_cart_snapshot(customer_id) -> dict:
    items = load_cart_items(customer_id)
    return {
        "customer_id": str(customer_id),
        "items": items,
        "item_count": sum(i["quantity"] for i in items),
        "subtotal": cart_subtotal(items),
    }


cart_feed = ChangeFeed("cart", load_cart_snapshot)


class CartService:
    def __init__(self, auth: AuthService, feed: ChangeFeed | None = None):
        self._auth = auth
        self._feed = feed or cart_feed

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def items(self) -> list[dict]:
        """Lines of the signed-in customer's cart; anonymous visitors see none."""
        user = self._auth.current_user()
        if user is None:
            return []
        return load_cart_items(user.user_id)

    def subtotal(self) -> float:
        return cart_subtotal(self.items())

    def subscribe(self, listener):
        """Deliver the current cart snapshot now and again after every change."""
        user = self._auth.require_user()
        return self._feed.subscribe(user.user_id, listener)

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    def add_item(self, product: dict, quantity: int = 1) -> str:
        user = self._auth.require_user()
        command = AddToCart(
            customer_id=user.user_id,
            product_id=str(product["id"]),
            name=product["name"],
            price=str(product["price"]),
            image=product.get("image"),
            hint=product.get("hint"),
            category=product.get("category"),
            quantity=quantity,
        )
        return self._write("add item to cart", user.user_id, command)

    def remove_item(self, item_id) -> None:
        user = self._auth.require_user()
        self._write(
            "remove item from cart",
            user.user_id,
            RemoveFromCart(customer_id=user.user_id, item_id=str(item_id)),
        )

    def update_quantity(self, item_id, new_quantity: int) -> None:
        user = self._auth.require_user()
        self._write(
            "update cart quantity",
            user.user_id,
            UpdateCartQuantity(
                customer_id=user.user_id,
                item_id=str(item_id),
                new_quantity=new_quantity,
            ),
        )

    def clear(self) -> int:
        user = self._auth.require_user()
        removed = self._write("clear cart", user.user_id, ClearCart(customer_id=user.user_id))
        logger.info("Cart cleared", customer_id=user.user_id, items_removed=removed)
        return removed

    def _write(self, operation, customer_id, command):
        try:
            result = current_domain.process(command, asynchronous=False)
        except (ValidationError, ObjectNotFoundError):
            raise
        except Exception as exc:
            logger.error("Cart write rejected", operation=operation, customer_id=customer_id, error=str(exc))
            raise RemoteWriteFailed(operation, str(exc)) from exc

        self._feed.publish(customer_id)
        return result

"""Order placement — command and handler."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.utils.logging import order_logger


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    customer = Text()  # JSON: name, email, phone, photo_url
    items = Text(required=True)  # JSON: list of cart line dicts
    subtotal = Float(required=True)
    discount = Float(default=0.0)
    discount_id = Identifier()
    total = Float(required=True)
    address = String(required=True, max_length=500)
    payment_method = String(max_length=50, default="cod")


def _decode(value, default):
    if value is None:
        return default
    return json.loads(value) if isinstance(value, str) else value


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(
            user_id=command.user_id,
            customer=_decode(command.customer, {}),
            items=_decode(command.items, []),
            subtotal=command.subtotal,
            discount=command.discount or 0.0,
            discount_id=command.discount_id,
            total=command.total,
            address=command.address,
            payment_method=command.payment_method or "cod",
        )
        current_domain.repository_for(Order).add(order)
        order_logger(order.id).info("Order placed", user_id=str(command.user_id), total=order.total)
        return str(order.id)

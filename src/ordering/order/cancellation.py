"""Customer cancellation — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.history import OrderHistory
from ordering.order.order import Order
from ordering.utils.logging import order_logger
from shared.errors import NotFound


@ordering.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    user_id = Identifier()  # When given, the order must belong to this customer
    reason = String(max_length=500)


@ordering.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        order = OrderHistory().get(command.order_id)
        if command.user_id and str(order.user_id) != str(command.user_id):
            raise NotFound({"_entity": f"Order with id {command.order_id} does not exist"})

        order.cancel(reason=command.reason)
        current_domain.repository_for(Order).add(order)
        order_logger(order.id).info("Order cancelled", user_id=str(order.user_id), reason=command.reason)

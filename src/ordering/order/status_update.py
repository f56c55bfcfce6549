"""Administrative status changes — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.history import OrderHistory
from ordering.order.order import Order, OrderStatus
from ordering.utils.logging import order_logger


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    """Set any status on an order. Tracking follows the new status."""

    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        order = OrderHistory().get(command.order_id)
        previous = order.status
        order.update_status(command.status)
        current_domain.repository_for(Order).add(order)
        order_logger(order.id).info("Order status updated", previous_status=previous, new_status=order.status)

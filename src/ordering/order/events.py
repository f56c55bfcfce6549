"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A customer completed checkout and the order was recorded."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    discount = Float(default=0.0)
    discount_id = Identifier()
    total = Float(required=True)
    payment_method = String(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusUpdated:
    """The order moved to a new status and its tracking was recomputed."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    updated_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """The customer cancelled the order before it shipped."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    reason = String()
    cancelled_at = DateTime(required=True)

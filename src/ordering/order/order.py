"""Order aggregate — the record of a completed checkout.

Everything except ``status``, ``tracking`` and the cancellation reason is a
snapshot taken at checkout and never changes afterwards. Orders are never
deleted.

Status changes are unrestricted for administrators (any status can be set
from any status). Customers may only cancel orders that have not shipped.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from ordering.cart.pricing import line_total
from ordering.domain import ordering
from ordering.order.events import OrderCancelled, OrderPlaced, OrderStatusUpdated
from ordering.order.tracking import initial_tracking, recompute_tracking


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


_NOT_CANCELLABLE = {
    OrderStatus.SHIPPED.value,
    OrderStatus.DELIVERED.value,
    OrderStatus.CANCELLED.value,
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class CustomerSnapshot:
    """Who placed the order, as known at checkout time."""

    name = String(max_length=255, default="N/A")
    email = String(max_length=255, default="N/A")
    phone = String(max_length=50, default="N/A")
    photo_url = String(max_length=1024)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """Copy of a cart line. The price keeps the cart's currency string."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = String(required=True, max_length=50)
    image = String(max_length=1024)
    hint = String(max_length=255)
    category = String(max_length=100)
    quantity = Integer(required=True, min_value=1)

    def line_total(self):
        return line_total(self.price, self.quantity)


@ordering.entity(part_of="Order")
class TrackingStep:
    position = Integer(required=True, min_value=0)
    status = String(required=True, max_length=50)
    date = String(max_length=10)  # yyyy-mm-dd, empty until reached
    completed = Boolean(default=False)

    def to_dict(self):
        return {
            "status": self.status,
            "date": self.date or "",
            "completed": bool(self.completed),
        }


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    customer = ValueObject(CustomerSnapshot)
    items = HasMany(OrderItem)
    subtotal = Float(required=True)
    discount = Float(default=0.0)
    discount_id = Identifier()
    total = Float(required=True)
    address = String(required=True, max_length=500)
    payment_method = String(max_length=50, default="cod")
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    tracking = HasMany(TrackingStep)
    cancellation_reason = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        user_id,
        customer,
        items,
        subtotal,
        total,
        address,
        discount=0.0,
        discount_id=None,
        payment_method="cod",
        today=None,
    ):
        """Record a new Pending order from checkout data.

        Args:
            user_id: The customer placing the order.
            customer: Dict with name, email, phone, photo_url.
            items: List of cart line dicts (product_id, name, price, quantity, ...).
            subtotal, total, discount: Amounts computed at checkout.
            address: Shipping address flattened to a single line.
        """
        if not items:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            user_id=str(user_id),
            customer=CustomerSnapshot(**{k: v for k, v in (customer or {}).items() if v is not None}),
            subtotal=subtotal,
            discount=discount or 0.0,
            discount_id=discount_id,
            total=total,
            address=address,
            payment_method=payment_method or "cod",
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        for item in items:
            order.add_items(
                OrderItem(
                    product_id=str(item["product_id"]),
                    name=item["name"],
                    price=str(item["price"]),
                    image=item.get("image"),
                    hint=item.get("hint"),
                    category=item.get("category"),
                    quantity=item["quantity"],
                )
            )

        for position, step in enumerate(initial_tracking(today or now)):
            order.add_tracking(
                TrackingStep(
                    position=position,
                    status=step["status"],
                    date=step["date"] or None,
                    completed=step["completed"],
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                item_count=sum(item["quantity"] for item in items),
                subtotal=subtotal,
                discount=discount or 0.0,
                discount_id=discount_id,
                total=total,
                payment_method=order.payment_method,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def ordered_tracking(self):
        return sorted(self.tracking, key=lambda step: step.position)

    def tracking_steps(self):
        return [step.to_dict() for step in self.ordered_tracking()]

    def can_be_cancelled(self):
        return self.status not in _NOT_CANCELLABLE

    # -------------------------------------------------------------------
    # Status changes
    # -------------------------------------------------------------------
    def update_status(self, new_status, today=None):
        """Set ``new_status`` and bring the tracking steps in line with it."""
        if new_status not in {s.value for s in OrderStatus}:
            raise ValidationError({"status": [f"Unknown order status {new_status!r}"]})

        now = datetime.now(UTC)
        recomputed = recompute_tracking(self.tracking_steps(), new_status, today or now)
        for step, data in zip(self.ordered_tracking(), recomputed, strict=True):
            step.completed = data["completed"]
            step.date = data["date"] or None

        previous = self.status
        self.status = new_status
        self.updated_at = now

        self.raise_(
            OrderStatusUpdated(
                order_id=str(self.id),
                previous_status=previous,
                new_status=new_status,
                updated_at=now,
            )
        )

    def cancel(self, reason=None, today=None):
        """Customer cancellation, allowed until the order ships."""
        if not self.can_be_cancelled():
            raise ValidationError({"status": [f"Order cannot be cancelled once it is {self.status}"]})

        self.cancellation_reason = reason
        self.update_status(OrderStatus.CANCELLED.value, today=today)

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                user_id=str(self.user_id),
                reason=reason,
                cancelled_at=self.updated_at,
            )
        )

"""Discount aggregate — codes an administrator hands out and checkout applies.

A discount is either a percentage of the cart subtotal or a fixed amount.
Fixed amounts are not capped at the subtotal, so an order total may end up
negative. Only Active discounts can be applied at checkout.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from ordering.discount.events import DiscountCreated, DiscountStatusChanged
from ordering.domain import ordering


class DiscountType(Enum):
    PERCENTAGE = "Percentage"
    FIXED_AMOUNT = "Fixed Amount"


class DiscountStatus(Enum):
    ACTIVE = "Active"
    EXPIRED = "Expired"
    SCHEDULED = "Scheduled"


def calculate_discount(discount, subtotal):
    """Amount taken off ``subtotal`` by ``discount`` (0 when there is none)."""
    if discount is None:
        return 0.0
    if discount.discount_type == DiscountType.PERCENTAGE.value:
        return subtotal * discount.value / 100
    return float(discount.value)


@ordering.aggregate
class Discount:
    code = String(required=True, max_length=50)
    discount_type = String(required=True, choices=DiscountType)
    value = Float(required=True, min_value=0.0)
    status = String(choices=DiscountStatus, default=DiscountStatus.ACTIVE.value)
    usage = Integer(default=0, min_value=0)
    created_at = DateTime()

    @classmethod
    def create(cls, code, discount_type, value, status=DiscountStatus.ACTIVE.value):
        code = (code or "").strip()
        if not code:
            raise ValidationError({"code": ["Discount code is required"]})

        now = datetime.now(UTC)
        discount = cls(
            code=code,
            discount_type=discount_type,
            value=value,
            status=status,
            usage=0,
            created_at=now,
        )
        discount.raise_(
            DiscountCreated(
                discount_id=str(discount.id),
                code=discount.code,
                discount_type=discount.discount_type,
                value=discount.value,
                status=discount.status,
                created_at=now,
            )
        )
        return discount

    def is_active(self):
        return self.status == DiscountStatus.ACTIVE.value

    def amount_for(self, subtotal):
        return calculate_discount(self, subtotal)

    def change_status(self, new_status):
        if new_status not in {s.value for s in DiscountStatus}:
            raise ValidationError({"status": [f"Unknown discount status {new_status!r}"]})
        if new_status == self.status:
            return

        previous = self.status
        self.status = new_status
        self.raise_(
            DiscountStatusChanged(
                discount_id=str(self.id),
                code=self.code,
                previous_status=previous,
                new_status=new_status,
            )
        )

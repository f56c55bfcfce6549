"""Domain events for the Discount aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from ordering.domain import ordering


@ordering.event(part_of="Discount")
class DiscountCreated:
    """An administrator created a new discount code."""

    __version__ = 1

    discount_id = Identifier(required=True)
    code = String(required=True)
    discount_type = String(required=True)
    value = Float(required=True)
    status = String(required=True)
    created_at = DateTime(required=True)


@ordering.event(part_of="Discount")
class DiscountStatusChanged:
    __version__ = 1

    discount_id = Identifier(required=True)
    code = String(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)

"""Discount administration — create, change status, delete."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from ordering.discount.discount import Discount, DiscountStatus, DiscountType
from ordering.discount.ledger import DiscountLedger
from ordering.domain import ordering
from shared.errors import ValidationFailed

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Discount")
class CreateDiscount:
    code = String(required=True, max_length=50)
    discount_type = String(required=True, choices=DiscountType)
    value = Float(required=True, min_value=0.0)
    status = String(choices=DiscountStatus, default=DiscountStatus.ACTIVE.value)


@ordering.command(part_of="Discount")
class ChangeDiscountStatus:
    discount_id = Identifier(required=True)
    status = String(required=True, choices=DiscountStatus)


@ordering.command(part_of="Discount")
class DeleteDiscount:
    discount_id = Identifier(required=True)


@ordering.command_handler(part_of=Discount)
class ManageDiscountsHandler:
    @handle(CreateDiscount)
    def create_discount(self, command):
        if DiscountLedger().find_by_code(command.code) is not None:
            raise ValidationFailed({"code": [f"Discount code {command.code} already exists"]})

        discount = Discount.create(
            code=command.code,
            discount_type=command.discount_type,
            value=command.value,
            status=command.status or DiscountStatus.ACTIVE.value,
        )
        current_domain.repository_for(Discount).add(discount)
        logger.info("Discount created", discount_id=str(discount.id), code=discount.code)
        return str(discount.id)

    @handle(ChangeDiscountStatus)
    def change_status(self, command):
        discount = DiscountLedger().get(command.discount_id)
        discount.change_status(command.status)
        current_domain.repository_for(Discount).add(discount)

    @handle(DeleteDiscount)
    def delete_discount(self, command):
        discount = DiscountLedger().get(command.discount_id)
        current_domain.repository_for(Discount)._dao.delete(discount)
        logger.info("Discount deleted", discount_id=str(command.discount_id), code=discount.code)

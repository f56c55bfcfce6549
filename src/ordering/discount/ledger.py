"""Read access to discounts for checkout and administration."""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.discount.discount import Discount, DiscountStatus
from shared.errors import NotFound
from shared.timestamps import decode_timestamp

_EPOCH = datetime.min.replace(tzinfo=UTC)


def _created(discount):
    return decode_timestamp(discount.created_at) or _EPOCH


class DiscountLedger:
    def _repo(self):
        return current_domain.repository_for(Discount)

    def get(self, discount_id) -> Discount:
        try:
            return self._repo().get(str(discount_id))
        except ObjectNotFoundError:
            raise NotFound({"_entity": f"Discount with id {discount_id} does not exist"}) from None

    def find_by_code(self, code) -> Discount | None:
        """Case-insensitive lookup; surrounding whitespace is ignored."""
        wanted = (code or "").strip()
        if not wanted:
            return None
        matches = self._repo()._dao.query.filter(code__iexact=wanted).limit(None).all().items
        return min(matches, key=_created) if matches else None

    def all(self, status=None) -> list[Discount]:
        # The default query page is 100 rows
        query = self._repo()._dao.query.limit(None)
        if status:
            query = query.filter(status=status)
        return sorted(query.all().items, key=_created)

    def active(self) -> list[Discount]:
        return self.all(status=DiscountStatus.ACTIVE.value)

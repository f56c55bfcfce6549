"""Order lookups for customers and administrators."""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order
from shared.errors import NotFound
from shared.timestamps import decode_timestamp

_EPOCH = datetime.min.replace(tzinfo=UTC)


def _newest_first(query):
    orders = query.order_by("-created_at").limit(None).all().items
    return sorted(orders, key=lambda o: decode_timestamp(o.created_at) or _EPOCH, reverse=True)


class OrderHistory:
    def _repo(self):
        return current_domain.repository_for(Order)

    def get(self, order_id) -> Order:
        try:
            return self._repo().get(str(order_id))
        except ObjectNotFoundError:
            raise NotFound({"_entity": f"Order with id {order_id} does not exist"}) from None

    def for_customer(self, user_id) -> list[Order]:
        return _newest_first(self._repo()._dao.query.filter(user_id=str(user_id)))

    def all(self, status=None) -> list[Order]:
        query = self._repo()._dao.query
        if status:
            query = query.filter(status=status)
        return _newest_first(query)

"""Cart management — clearing a cart after checkout."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class ClearCart:
    """Remove every line from a customer's cart in one write."""

    customer_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        try:
            cart = repo.get(command.customer_id)
        except ObjectNotFoundError:
            return 0
        removed = cart.clear()
        repo.add(cart)
        return removed

"""Cart item management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = String(required=True, max_length=50)
    image = String(max_length=1024)
    hint = String(max_length=255)
    category = String(max_length=100)
    quantity = Integer(default=1, min_value=1)


@ordering.command(part_of="ShoppingCart")
class UpdateCartQuantity:
    """Set a line's quantity; zero or a negative number removes the line."""

    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    new_quantity = Integer(required=True)


@ordering.command(part_of="ShoppingCart")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


def load_or_create_cart(customer_id):
    repo = current_domain.repository_for(ShoppingCart)
    try:
        return repo.get(str(customer_id))
    except ObjectNotFoundError:
        return ShoppingCart.create(customer_id=str(customer_id))


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        cart = load_or_create_cart(command.customer_id)
        item_id = cart.add_item(
            product_id=command.product_id,
            name=command.name,
            price=command.price,
            quantity=command.quantity or 1,
            image=command.image,
            hint=command.hint,
            category=command.category,
        )
        current_domain.repository_for(ShoppingCart).add(cart)
        return item_id

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.customer_id)
        cart.update_item_quantity(
            item_id=command.item_id,
            new_quantity=command.new_quantity,
        )
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.customer_id)
        cart.remove_item(item_id=command.item_id)
        repo.add(cart)

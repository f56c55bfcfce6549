"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the cart (new line or merged into an existing one)."""

    __version__ = 1

    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@ordering.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    """The quantity of a cart line was changed."""

    __version__ = 1

    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A line was removed from the cart."""

    __version__ = 1

    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)


@ordering.event(part_of="ShoppingCart")
class CartCleared:
    """Every line was removed from the cart, typically after an order was placed."""

    __version__ = 1

    customer_id = Identifier(required=True)
    items_removed = Integer(required=True)

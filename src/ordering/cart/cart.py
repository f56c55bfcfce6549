"""Shopping Cart aggregate — one cart per customer, lines keyed by product.

The cart is a standard CQRS aggregate (not event sourced) identified by the
customer id. Adding a product that is already in the cart increases the
quantity of the existing line instead of adding a second one.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from ordering.cart.pricing import cart_subtotal
from ordering.domain import ordering


@ordering.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = String(required=True, max_length=50)  # Formatted currency, e.g. "₹1,050.50"
    image = String(max_length=1024)
    hint = String(max_length=255)
    category = String(max_length=100)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    def to_dict(self):
        return {
            "item_id": str(self.id),
            "product_id": str(self.product_id),
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "hint": self.hint,
            "category": self.category,
            "quantity": self.quantity,
        }


@ordering.aggregate
class ShoppingCart:
    customer_id = Identifier(identifier=True, required=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def find_product(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def subtotal(self):
        return cart_subtotal(self.items)

    def item_count(self):
        return sum(item.quantity for item in self.items)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, name, price, quantity=1, image=None, hint=None, category=None):
        """Add a product to the cart, or increase the quantity of its existing line."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        existing = self.find_product(product_id)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
            new_quantity = existing.quantity
        else:
            item = CartItem(
                product_id=product_id,
                name=name,
                price=str(price),
                image=image,
                hint=hint,
                category=category,
                quantity=quantity,
                added_at=now,
            )
            self.add_items(item)
            item_id = str(item.id)
            new_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                customer_id=str(self.customer_id),
                item_id=item_id,
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=new_quantity,
            )
        )
        return item_id

    def update_item_quantity(self, item_id, new_quantity):
        """Overwrite a line's quantity. Zero or less removes the line."""
        if new_quantity <= 0:
            self.remove_item(item_id)
            return

        item = self.find_item(item_id)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})

        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                customer_id=str(self.customer_id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, item_id):
        item = self.find_item(item_id)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                customer_id=str(self.customer_id),
                item_id=str(item_id),
                product_id=str(item.product_id),
            )
        )

    def clear(self):
        """Remove every line. Persisted as a single aggregate write."""
        removed = list(self.items)
        for item in removed:
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                customer_id=str(self.customer_id),
                items_removed=len(removed),
            )
        )
        return len(removed)

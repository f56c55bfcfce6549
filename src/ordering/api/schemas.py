"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    name: str = Field(..., max_length=255)
    price: str | float
    image: str | None = None
    hint: str | None = None
    category: str | None = None
    quantity: int = Field(1, ge=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-kurta-01",
                    "name": "Cotton Kurta",
                    "price": "₹1,050.50",
                    "image": "https://images.example.com/kurta.jpg",
                    "hint": "blue kurta",
                    "category": "Apparel",
                    "quantity": 1,
                }
            ]
        }
    }


class UpdateCartQuantityRequest(BaseModel):
    """Zero or a negative quantity removes the line."""

    quantity: int


class CartItemResponse(BaseModel):
    item_id: str
    product_id: str
    name: str
    price: str
    image: str | None = None
    hint: str | None = None
    category: str | None = None
    quantity: int


class CartResponse(BaseModel):
    items: list[CartItemResponse]
    item_count: int
    subtotal: float


class ItemIdResponse(BaseModel):
    item_id: str


class ClearCartResponse(BaseModel):
    items_removed: int


# ---------------------------------------------------------------------------
# Discounts
# ---------------------------------------------------------------------------
class CreateDiscountRequest(BaseModel):
    code: str = Field(..., max_length=50)
    discount_type: str = Field(..., description="Percentage or Fixed Amount")
    value: float = Field(..., ge=0)
    status: str = "Active"


class ChangeDiscountStatusRequest(BaseModel):
    status: str


class DiscountIdResponse(BaseModel):
    discount_id: str


class DiscountResponse(BaseModel):
    discount_id: str
    code: str
    discount_type: str
    value: float
    status: str
    usage: int = 0
    created_at: str | None = None


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
class QuoteResponse(BaseModel):
    subtotal: float
    discount: float
    total: float
    discount_code: str | None = None


class CheckoutRequest(BaseModel):
    """Everything is optional: the default address and cash on delivery are used."""

    address_id: str | None = None
    discount_code: str | None = None
    payment_method: str = "cod"


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class UpdateOrderStatusRequest(BaseModel):
    status: str


class CancelOrderRequest(BaseModel):
    reason: str | None = Field(None, max_length=500)


class OrderIdResponse(BaseModel):
    order_id: str


class CustomerSnapshotSchema(BaseModel):
    name: str = "N/A"
    email: str = "N/A"
    phone: str = "N/A"
    photo_url: str | None = None


class OrderItemSchema(BaseModel):
    product_id: str
    name: str
    price: str
    image: str | None = None
    hint: str | None = None
    category: str | None = None
    quantity: int


class TrackingStepSchema(BaseModel):
    status: str
    date: str
    completed: bool


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    customer: CustomerSnapshotSchema
    items: list[OrderItemSchema]
    subtotal: float
    discount: float
    discount_id: str | None = None
    total: float
    address: str
    payment_method: str
    status: str
    tracking: list[TrackingStepSchema]
    cancellation_reason: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class StatusResponse(BaseModel):
    status: str = "ok"

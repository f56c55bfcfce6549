"""FastAPI routes for the Ordering domain — cart, discounts, checkout and orders."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from ordering.api.dependencies import get_address_book, get_auth, get_cart
from ordering.api.schemas import (
    AddToCartRequest,
    CancelOrderRequest,
    CartResponse,
    ChangeDiscountStatusRequest,
    CheckoutRequest,
    ClearCartResponse,
    CreateDiscountRequest,
    DiscountIdResponse,
    DiscountResponse,
    ItemIdResponse,
    OrderIdResponse,
    OrderResponse,
    QuoteResponse,
    StatusResponse,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
)
from ordering.cart.pricing import cart_subtotal
from ordering.cart.service import CartService
from ordering.checkout.wizard import CheckoutWizard
from ordering.customer.port import AddressBookService, AuthService
from ordering.discount.ledger import DiscountLedger
from ordering.discount.management import ChangeDiscountStatus, CreateDiscount, DeleteDiscount
from ordering.order.cancellation import CancelOrder
from ordering.order.history import OrderHistory
from ordering.order.status_update import UpdateOrderStatus
from shared.errors import NotFound
from shared.timestamps import encode_timestamp


def _discount_response(discount) -> DiscountResponse:
    return DiscountResponse(
        discount_id=str(discount.id),
        code=discount.code,
        discount_type=discount.discount_type,
        value=discount.value,
        status=discount.status,
        usage=discount.usage or 0,
        created_at=encode_timestamp(discount.created_at),
    )


def _order_response(order) -> OrderResponse:
    customer = order.customer
    return OrderResponse(
        order_id=str(order.id),
        user_id=str(order.user_id),
        customer={
            "name": customer.name if customer else "N/A",
            "email": customer.email if customer else "N/A",
            "phone": customer.phone if customer else "N/A",
            "photo_url": customer.photo_url if customer else None,
        },
        items=[
            {
                "product_id": str(item.product_id),
                "name": item.name,
                "price": item.price,
                "image": item.image,
                "hint": item.hint,
                "category": item.category,
                "quantity": item.quantity,
            }
            for item in order.items
        ],
        subtotal=order.subtotal,
        discount=order.discount or 0.0,
        discount_id=str(order.discount_id) if order.discount_id else None,
        total=order.total,
        address=order.address,
        payment_method=order.payment_method,
        status=order.status,
        tracking=order.tracking_steps(),
        cancellation_reason=order.cancellation_reason,
        created_at=encode_timestamp(order.created_at),
        updated_at=encode_timestamp(order.updated_at),
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart_contents(cart: CartService = Depends(get_cart)) -> CartResponse:
    items = cart.items()
    return CartResponse(
        items=items,
        item_count=sum(item["quantity"] for item in items),
        subtotal=cart_subtotal(items),
    )


@cart_router.post("/items", status_code=201, response_model=ItemIdResponse)
async def add_cart_item(body: AddToCartRequest, cart: CartService = Depends(get_cart)) -> ItemIdResponse:
    product = {
        "id": body.product_id,
        "name": body.name,
        "price": body.price,
        "image": body.image,
        "hint": body.hint,
        "category": body.category,
    }
    item_id = cart.add_item(product, quantity=body.quantity)
    return ItemIdResponse(item_id=item_id)


@cart_router.put("/items/{item_id}", response_model=StatusResponse)
async def update_cart_item(
    item_id: str,
    body: UpdateCartQuantityRequest,
    cart: CartService = Depends(get_cart),
) -> StatusResponse:
    cart.update_quantity(item_id, body.quantity)
    return StatusResponse()


@cart_router.delete("/items/{item_id}", response_model=StatusResponse)
async def remove_cart_item(item_id: str, cart: CartService = Depends(get_cart)) -> StatusResponse:
    cart.remove_item(item_id)
    return StatusResponse()


@cart_router.delete("", response_model=ClearCartResponse)
async def clear_cart(cart: CartService = Depends(get_cart)) -> ClearCartResponse:
    return ClearCartResponse(items_removed=cart.clear())


# ---------------------------------------------------------------------------
# Discount Router
# ---------------------------------------------------------------------------
discount_router = APIRouter(prefix="/discounts", tags=["discounts"])


@discount_router.post("", status_code=201, response_model=DiscountIdResponse)
async def create_discount(body: CreateDiscountRequest) -> DiscountIdResponse:
    command = CreateDiscount(
        code=body.code,
        discount_type=body.discount_type,
        value=body.value,
        status=body.status,
    )
    result = current_domain.process(command, asynchronous=False)
    return DiscountIdResponse(discount_id=result)


@discount_router.get("", response_model=list[DiscountResponse])
async def list_discounts(status: str | None = None) -> list[DiscountResponse]:
    return [_discount_response(d) for d in DiscountLedger().all(status=status)]


@discount_router.get("/code/{code}", response_model=DiscountResponse)
async def find_discount(code: str) -> DiscountResponse:
    discount = DiscountLedger().find_by_code(code)
    if discount is None:
        raise NotFound({"_entity": f"Discount code {code} does not exist"})
    return _discount_response(discount)


@discount_router.put("/{discount_id}/status", response_model=StatusResponse)
async def change_discount_status(discount_id: str, body: ChangeDiscountStatusRequest) -> StatusResponse:
    command = ChangeDiscountStatus(discount_id=discount_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@discount_router.delete("/{discount_id}", response_model=StatusResponse)
async def delete_discount(discount_id: str) -> StatusResponse:
    current_domain.process(DeleteDiscount(discount_id=discount_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.get("/quote", response_model=QuoteResponse)
async def quote(
    discount_code: str | None = None,
    auth: AuthService = Depends(get_auth),
    cart: CartService = Depends(get_cart),
    address_book: AddressBookService = Depends(get_address_book),
) -> QuoteResponse:
    wizard = CheckoutWizard(auth, cart, address_book)
    if discount_code:
        wizard.apply_discount_code(discount_code)
    return QuoteResponse(
        subtotal=wizard.subtotal(),
        discount=wizard.discount_amount(),
        total=wizard.total(),
        discount_code=wizard.discount.code if wizard.discount else None,
    )


@checkout_router.post("", status_code=201, response_model=OrderIdResponse)
async def checkout(
    body: CheckoutRequest,
    auth: AuthService = Depends(get_auth),
    cart: CartService = Depends(get_cart),
    address_book: AddressBookService = Depends(get_address_book),
) -> OrderIdResponse:
    """Run the checkout wizard end to end for the signed-in customer."""
    auth.require_user()
    wizard = CheckoutWizard(auth, cart, address_book)

    wizard.next()  # Summary → Address
    if body.address_id:
        wizard.select_address(body.address_id)
    if body.discount_code:
        wizard.apply_discount_code(body.discount_code)
    wizard.select_payment_method(body.payment_method)
    wizard.next()  # Address → Payment
    wizard.next()  # Payment → Confirmed

    return OrderIdResponse(order_id=wizard.order_id)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(status: str | None = None) -> list[OrderResponse]:
    return [_order_response(order) for order in OrderHistory().all(status=status)]


@order_router.get("/mine", response_model=list[OrderResponse])
async def my_orders(auth: AuthService = Depends(get_auth)) -> list[OrderResponse]:
    user = auth.require_user()
    return [_order_response(order) for order in OrderHistory().for_customer(user.user_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return _order_response(OrderHistory().get(order_id))


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/cancel", response_model=StatusResponse)
async def cancel_order(
    order_id: str,
    body: CancelOrderRequest,
    auth: AuthService = Depends(get_auth),
) -> StatusResponse:
    user = auth.require_user()
    command = CancelOrder(order_id=order_id, user_id=user.user_id, reason=body.reason)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()

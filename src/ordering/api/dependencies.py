"""Request-scoped collaborators for the Ordering API.

Callers identify themselves with the ``X-Customer-Id`` header, which is
resolved against the identity context. Tests can swap any of these through
``app.dependency_overrides``.
"""

from fastapi import Depends, Header

from ordering.cart.service import CartService
from ordering.customer.identity_adapter import IdentityAddressBook, IdentityAuthService
from ordering.customer.port import AddressBookService, AuthService


def get_auth(x_customer_id: str = Header(default="")) -> AuthService:
    return IdentityAuthService(x_customer_id or None)


def get_address_book() -> AddressBookService:
    return IdentityAddressBook()


def get_cart(auth: AuthService = Depends(get_auth)) -> CartService:
    return CartService(auth)

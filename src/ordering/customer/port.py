"""Customer ports (abstract interfaces) used by the ordering context.

Ordering never reads the identity context directly. It asks an
``AuthService`` who is signed in and an ``AddressBookService`` where they ship
to. Adapters exist for the identity context (production) and for in-memory
fixtures (dev/test).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shared.errors import AuthRequired


@dataclass(frozen=True)
class CustomerIdentity:
    """The signed-in customer as reported by the authentication provider."""

    user_id: str
    display_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    photo_url: str | None = None

    def snapshot(self) -> dict:
        """Customer details copied onto an order at checkout."""
        return {
            "name": self.display_name or "N/A",
            "email": self.email or "N/A",
            "phone": self.phone_number or "N/A",
            "photo_url": self.photo_url or None,
        }


@dataclass(frozen=True)
class AddressSnapshot:
    """Read-only copy of an address-book entry."""

    address_id: str
    name: str
    address_line: str
    city: str
    zip_code: str
    country: str
    label: str = "Home"
    is_default: bool = False

    def one_line(self) -> str:
        return f"{self.address_line}, {self.city}, {self.zip_code}, {self.country}"


class AuthService(ABC):
    """Who is signed in."""

    @abstractmethod
    def current_user(self) -> CustomerIdentity | None:
        """Return the signed-in customer, or None for anonymous visitors."""
        ...

    def require_user(self) -> CustomerIdentity:
        user = self.current_user()
        if user is None:
            raise AuthRequired()
        return user


class AddressBookService(ABC):
    """Read access to a customer's saved addresses."""

    @abstractmethod
    def addresses_for(self, customer_id: str) -> list[AddressSnapshot]:
        ...

    def find(self, customer_id: str, address_id: str) -> AddressSnapshot | None:
        return next(
            (a for a in self.addresses_for(customer_id) if str(a.address_id) == str(address_id)),
            None,
        )

    def default_for(self, customer_id: str) -> AddressSnapshot | None:
        """The default address, else the first one, else None."""
        addresses = self.addresses_for(customer_id)
        if not addresses:
            return None
        return next((a for a in addresses if a.is_default), addresses[0])

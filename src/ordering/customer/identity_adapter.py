"""Adapters that answer the customer ports from the identity context."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import identity
from ordering.customer.port import AddressBookService, AddressSnapshot, AuthService, CustomerIdentity


def _load_customer(customer_id):
    try:
        return current_domain.repository_for(Customer).get(str(customer_id))
    except ObjectNotFoundError:
        return None


class IdentityAuthService(AuthService):
    """Treat ``customer_id`` (e.g. taken from a request header) as the signed-in user."""

    def __init__(self, customer_id: str | None):
        self._customer_id = customer_id

    def current_user(self) -> CustomerIdentity | None:
        if not self._customer_id:
            return None

        with identity.domain_context():
            customer = _load_customer(self._customer_id)
            if customer is None:
                return None
            return CustomerIdentity(
                user_id=str(customer.id),
                display_name=customer.display_name,
                email=customer.email,
                phone_number=customer.phone_number,
                photo_url=customer.photo_url,
            )


class IdentityAddressBook(AddressBookService):
    def addresses_for(self, customer_id: str) -> list[AddressSnapshot]:
        with identity.domain_context():
            customer = _load_customer(customer_id)
            if customer is None:
                return []
            return [
                AddressSnapshot(
                    address_id=str(address.id),
                    label=address.label,
                    name=address.name,
                    address_line=address.address_line,
                    city=address.city,
                    zip_code=address.zip_code,
                    country=address.country,
                    is_default=bool(address.is_default),
                )
                for address in customer.addresses
            ]

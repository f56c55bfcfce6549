"""Customer aggregate root with its Address entities (the address book)."""

from datetime import datetime
from enum import Enum

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, String

from identity.domain import identity

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()

_ADDRESS_FIELDS = ("label", "name", "address_line", "city", "zip_code", "country")


class AddressLabel(Enum):
    """Enumeration of address types."""

    HOME = "Home"
    OFFICE = "Office"


@identity.entity(part_of="Customer")
class Address:
    """A shipping address in a customer's address book.

    One address is flagged as the default and is pre-selected at checkout.
    The flag is maintained by the Customer's behaviour methods: the first
    address added becomes the default, and choosing a new default clears it
    on the others.
    """

    label: String(choices=AddressLabel, default=AddressLabel.HOME.value)
    name: String(required=True, max_length=150)
    address_line: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    zip_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    is_default: Boolean(default=False)

    def one_line(self):
        return f"{self.address_line}, {self.city}, {self.zip_code}, {self.country}"


@identity.aggregate
class Customer:
    """A signed-in shopper, as known to the authentication provider.

    ``external_id`` is the provider's user id. Display name, email, phone and
    photo are what checkout snapshots onto an order.
    """

    external_id: String(required=True, max_length=255, unique=True)
    display_name: String(max_length=150)
    email: String(required=True, max_length=254)
    phone_number: String(max_length=20)
    photo_url: String(max_length=1024)
    addresses: HasMany(Address)
    registered_at: DateTime(default=datetime.now)

    @classmethod
    def register(cls, external_id, email, display_name=None, phone_number=None, photo_url=None):
        from identity.customer.events import CustomerRegistered

        if "@" not in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        now = datetime.now()
        customer = cls(
            external_id=external_id,
            email=email,
            display_name=display_name,
            phone_number=phone_number,
            photo_url=photo_url,
            registered_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                external_id=external_id,
                email=email,
                display_name=display_name,
                registered_at=now,
            )
        )
        return customer

    def update_profile(self, display_name=_UNSET, phone_number=_UNSET, photo_url=_UNSET):
        from identity.customer.events import ProfileUpdated

        if display_name is not _UNSET:
            self.display_name = display_name
        if phone_number is not _UNSET:
            self.phone_number = phone_number
        if photo_url is not _UNSET:
            self.photo_url = photo_url

        self.raise_(
            ProfileUpdated(
                customer_id=self.id,
                display_name=self.display_name,
                phone_number=self.phone_number,
                photo_url=self.photo_url,
            )
        )

    # -------------------------------------------------------------------
    # Address book
    # -------------------------------------------------------------------
    def find_address(self, address_id):
        return next((a for a in self.addresses if str(a.id) == str(address_id)), None)

    def default_address(self):
        """The default address, else the first one, else None."""
        if not self.addresses:
            return None
        return next((a for a in self.addresses if a.is_default), self.addresses[0])

    def add_address(
        self,
        name,
        address_line,
        city,
        zip_code,
        country,
        label=AddressLabel.HOME.value,
        is_default=False,
    ):
        from identity.customer.events import AddressAdded

        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    if addr.is_default:
                        addr.is_default = False

            address = Address(
                label=label,
                name=name,
                address_line=address_line,
                city=city,
                zip_code=zip_code,
                country=country,
                is_default=is_default,
            )
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                customer_id=self.id,
                address_id=address.id,
                label=label,
                name=name,
                address_line=address_line,
                city=city,
                zip_code=zip_code,
                country=country,
                is_default=is_default,
            )
        )
        return address

    def update_address(self, address_id, **kwargs):
        from identity.customer.events import AddressUpdated

        address = self.find_address(address_id)
        if address is None:
            raise ValidationError({"addresses": [f"Address {address_id} not found"]})

        unknown = set(kwargs) - set(_ADDRESS_FIELDS)
        if unknown:
            raise ValidationError({"addresses": [f"Cannot update fields: {', '.join(sorted(unknown))}"]})

        for field, value in kwargs.items():
            setattr(address, field, value)

        self.raise_(
            AddressUpdated(
                customer_id=self.id,
                address_id=str(address.id),
                **kwargs,
            )
        )

    def remove_address(self, address_id):
        from identity.customer.events import AddressRemoved

        address = self.find_address(address_id)
        if address is None:
            raise ValidationError({"addresses": [f"Address {address_id} not found"]})

        was_default = address.is_default

        with atomic_change(self):
            self.remove_addresses(address)

            # Hand the default flag to the first remaining address
            if was_default and self.addresses:
                self.addresses[0].is_default = True

        self.raise_(
            AddressRemoved(
                customer_id=self.id,
                address_id=str(address_id),
            )
        )

    def set_default_address(self, address_id):
        from identity.customer.events import DefaultAddressChanged

        address = self.find_address(address_id)
        if address is None:
            raise ValidationError({"addresses": [f"Address {address_id} not found"]})

        previous_default = next((a for a in self.addresses if a.is_default), None)
        previous_default_id = str(previous_default.id) if previous_default else None

        with atomic_change(self):
            for addr in self.addresses:
                if addr.is_default:
                    addr.is_default = False
            address.is_default = True

        self.raise_(
            DefaultAddressChanged(
                customer_id=self.id,
                address_id=str(address_id),
                previous_default_address_id=previous_default_id,
            )
        )

"""Domain events for the Customer aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="Customer")
class CustomerRegistered:
    """A shopper signed up and now has a customer account."""

    __version__ = 1

    customer_id: Identifier(required=True)
    external_id: String(required=True)
    email: String(required=True)
    display_name: String()
    registered_at: DateTime(required=True)


@identity.event(part_of="Customer")
class ProfileUpdated:
    """A customer's display name, phone or photo changed."""

    __version__ = 1

    customer_id: Identifier(required=True)
    display_name: String()
    phone_number: String()
    photo_url: String()


@identity.event(part_of="Customer")
class AddressAdded:
    """A new address was added to a customer's address book."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    label: String(required=True)
    name: String(required=True)
    address_line: String(required=True)
    city: String(required=True)
    zip_code: String(required=True)
    country: String(required=True)
    is_default: Boolean(default=False)


@identity.event(part_of="Customer")
class AddressUpdated:
    """An existing address in a customer's address book was modified."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    label: String()
    name: String()
    address_line: String()
    city: String()
    zip_code: String()
    country: String()


@identity.event(part_of="Customer")
class AddressRemoved:
    """An address was removed from a customer's address book."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@identity.event(part_of="Customer")
class DefaultAddressChanged:
    """A different address became the one pre-selected at checkout."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    previous_default_address_id: Identifier()

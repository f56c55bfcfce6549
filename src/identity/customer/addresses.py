"""Customer address book — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import identity


@identity.command(part_of="Customer")
class AddAddress:
    """Add a new address to a customer's address book."""

    customer_id: Identifier(required=True)
    label: String(max_length=20)
    name: String(required=True, max_length=150)
    address_line: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    zip_code: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    is_default: Boolean(default=False)


@identity.command(part_of="Customer")
class UpdateAddress:
    """Modify fields of an existing address."""

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    label: String(max_length=20)
    name: String(max_length=150)
    address_line: String(max_length=255)
    city: String(max_length=100)
    zip_code: String(max_length=20)
    country: String(max_length=100)


@identity.command(part_of="Customer")
class RemoveAddress:
    """Remove an address from a customer's address book."""

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@identity.command(part_of="Customer")
class SetDefaultAddress:
    """Designate an existing address as the customer's default."""

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)


@identity.command_handler(part_of=Customer)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        kwargs = {
            "name": command.name,
            "address_line": command.address_line,
            "city": command.city,
            "zip_code": command.zip_code,
            "country": command.country,
            "is_default": bool(command.is_default),
        }
        if command.label:
            kwargs["label"] = command.label

        address = customer.add_address(**kwargs)
        repo.add(customer)
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        updates = {}
        for field in ("label", "name", "address_line", "city", "zip_code", "country"):
            value = getattr(command, field, None)
            if value is not None:
                updates[field] = value

        customer.update_address(command.address_id, **updates)
        repo.add(customer)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.remove_address(command.address_id)
        repo.add(customer)

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.set_default_address(command.address_id)
        repo.add(customer)

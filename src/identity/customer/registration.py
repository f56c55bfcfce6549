"""Customer registration — command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import identity


@identity.command(part_of="Customer")
class RegisterCustomer:
    """Create a customer account for a user of the authentication provider."""

    external_id: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    display_name: String(max_length=150)
    phone_number: String(max_length=20)
    photo_url: String(max_length=1024)


@identity.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(
            external_id=command.external_id,
            email=command.email,
            display_name=command.display_name,
            phone_number=command.phone_number,
            photo_url=command.photo_url,
        )
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

"""Customer profile management — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import identity


@identity.command(part_of="Customer")
class UpdateProfile:
    customer_id: Identifier(required=True)
    display_name: String(max_length=150)
    phone_number: String(max_length=20)
    photo_url: String(max_length=1024)


@identity.command_handler(part_of=Customer)
class ManageProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        updates = {}
        for field in ("display_name", "phone_number", "photo_url"):
            value = getattr(command, field, None)
            if value is not None:
                updates[field] = value

        customer.update_profile(**updates)
        repo.add(customer)

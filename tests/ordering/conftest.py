from uuid import uuid4

import pytest
from protean.utils.globals import current_domain


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def registered_customer(identity_bed):
    """A customer with one (default) address, stored in the identity context.

    Identity data is not reset between ordering tests, so every customer gets
    a fresh external id.
    """
    from identity.customer.addresses import AddAddress
    from identity.customer.registration import RegisterCustomer
    from identity.domain import identity

    with identity.domain_context():
        customer_id = current_domain.process(
            RegisterCustomer(
                external_id=f"auth|{uuid4().hex}",
                email="asha.rao@example.com",
                display_name="Asha Rao",
                phone_number="+91-98450-12345",
            ),
            asynchronous=False,
        )
        address_id = current_domain.process(
            AddAddress(
                customer_id=customer_id,
                label="Home",
                name="Asha Rao",
                address_line="12 MG Road",
                city="Bengaluru",
                zip_code="560001",
                country="India",
            ),
            asynchronous=False,
        )
    return {"customer_id": customer_id, "address_id": address_id}

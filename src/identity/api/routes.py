"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from identity.api.schemas import (
    AddAddressRequest,
    AddressIdResponse,
    AddressResponse,
    CustomerIdResponse,
    RegisterCustomerRequest,
    StatusResponse,
    UpdateAddressRequest,
    UpdateProfileRequest,
)
from identity.customer.addresses import (
    AddAddress,
    RemoveAddress,
    SetDefaultAddress,
    UpdateAddress,
)
from identity.customer.customer import Customer
from identity.customer.profile import UpdateProfile
from identity.customer.registration import RegisterCustomer

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        external_id=body.external_id,
        email=body.email,
        display_name=body.display_name,
        phone_number=body.phone_number,
        photo_url=body.photo_url,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@router.put("/{customer_id}/profile", response_model=StatusResponse)
async def update_profile(customer_id: str, body: UpdateProfileRequest) -> StatusResponse:
    command = UpdateProfile(
        customer_id=customer_id,
        display_name=body.display_name,
        phone_number=body.phone_number,
        photo_url=body.photo_url,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.get("/{customer_id}/addresses", response_model=list[AddressResponse])
async def list_addresses(customer_id: str) -> list[AddressResponse]:
    customer = current_domain.repository_for(Customer).get(customer_id)
    return [
        AddressResponse(
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


@router.post("/{customer_id}/addresses", status_code=201, response_model=AddressIdResponse)
async def add_address(customer_id: str, body: AddAddressRequest) -> AddressIdResponse:
    command = AddAddress(
        customer_id=customer_id,
        label=body.label,
        name=body.name,
        address_line=body.address_line,
        city=body.city,
        zip_code=body.zip_code,
        country=body.country,
        is_default=body.is_default,
    )
    result = current_domain.process(command, asynchronous=False)
    return AddressIdResponse(address_id=result)


@router.put("/{customer_id}/addresses/{address_id}", response_model=StatusResponse)
async def update_address(customer_id: str, address_id: str, body: UpdateAddressRequest) -> StatusResponse:
    command = UpdateAddress(
        customer_id=customer_id,
        address_id=address_id,
        label=body.label,
        name=body.name,
        address_line=body.address_line,
        city=body.city,
        zip_code=body.zip_code,
        country=body.country,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{customer_id}/addresses/{address_id}", response_model=StatusResponse)
async def remove_address(customer_id: str, address_id: str) -> StatusResponse:
    command = RemoveAddress(
        customer_id=customer_id,
        address_id=address_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.put("/{customer_id}/addresses/{address_id}/default", response_model=StatusResponse)
async def set_default_address(customer_id: str, address_id: str) -> StatusResponse:
    command = SetDefaultAddress(
        customer_id=customer_id,
        address_id=address_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()

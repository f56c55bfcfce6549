"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "external_id": "auth0|64f1c2",
                    "email": "asha.rao@example.com",
                    "display_name": "Asha Rao",
                    "phone_number": "+91-98450-12345",
                    "photo_url": None,
                }
            ]
        }
    }

    external_id: str = Field(..., max_length=255)
    email: str = Field(..., max_length=254)
    display_name: str | None = Field(None, max_length=150)
    phone_number: str | None = Field(None, max_length=20)
    photo_url: str | None = Field(None, max_length=1024)


class UpdateProfileRequest(BaseModel):
    display_name: str | None = Field(None, max_length=150)
    phone_number: str | None = Field(None, max_length=20)
    photo_url: str | None = Field(None, max_length=1024)


class AddAddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "label": "Home",
                    "name": "Asha Rao",
                    "address_line": "12 MG Road",
                    "city": "Bengaluru",
                    "zip_code": "560001",
                    "country": "India",
                    "is_default": False,
                }
            ]
        }
    }

    label: str | None = Field(None, max_length=20)
    name: str = Field(..., max_length=150)
    address_line: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    zip_code: str = Field(..., max_length=20)
    country: str = Field(..., max_length=100)
    is_default: bool = False


class UpdateAddressRequest(BaseModel):
    label: str | None = Field(None, max_length=20)
    name: str | None = Field(None, max_length=150)
    address_line: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)


# --- Response Schemas ---


class CustomerIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"customer_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    customer_id: str


class AddressIdResponse(BaseModel):
    address_id: str


class AddressResponse(BaseModel):
    address_id: str
    label: str
    name: str
    address_line: str
    city: str
    zip_code: str
    country: str
    is_default: bool


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"

"""Tests for the Customer address book behaviour methods."""

import pytest
from identity.customer.customer import AddressLabel, Customer
from identity.customer.events import (
    AddressAdded,
    AddressRemoved,
    AddressUpdated,
    DefaultAddressChanged,
)
from protean.exceptions import ValidationError


def _make_customer():
    return Customer.register(
        external_id="auth|asha",
        email="asha.rao@example.com",
        display_name="Asha Rao",
    )


def _add(customer, address_line="12 MG Road", **overrides):
    defaults = {
        "name": "Asha Rao",
        "address_line": address_line,
        "city": "Bengaluru",
        "zip_code": "560001",
        "country": "India",
    }
    defaults.update(overrides)
    return customer.add_address(**defaults)


class TestAddAddress:
    def test_first_address_becomes_default(self):
        customer = _make_customer()
        address = _add(customer)
        assert address.is_default is True
        assert customer.default_address() == address

    def test_second_address_is_not_default(self):
        customer = _make_customer()
        _add(customer)
        second = _add(customer, address_line="4 Residency Road")
        assert second.is_default is False
        assert len(customer.addresses) == 2

    def test_new_default_clears_previous_default(self):
        customer = _make_customer()
        first = _add(customer)
        second = _add(customer, address_line="4 Residency Road", is_default=True)
        assert second.is_default is True
        assert first.is_default is False

    def test_label_defaults_to_home(self):
        customer = _make_customer()
        address = _add(customer)
        assert address.label == AddressLabel.HOME.value

    def test_office_label(self):
        customer = _make_customer()
        address = _add(customer, label=AddressLabel.OFFICE.value)
        assert address.label == "Office"

    def test_add_address_raises_event(self):
        customer = _make_customer()
        customer._events.clear()
        address = _add(customer)
        events = [e for e in customer._events if isinstance(e, AddressAdded)]
        assert len(events) == 1
        assert events[0].address_id == address.id
        assert events[0].is_default is True

    def test_one_line(self):
        customer = _make_customer()
        address = _add(customer)
        assert address.one_line() == "12 MG Road, Bengaluru, 560001, India"


class TestUpdateAddress:
    def test_update_city(self):
        customer = _make_customer()
        address = _add(customer)
        customer.update_address(address.id, city="Mysuru")
        assert customer.find_address(address.id).city == "Mysuru"

    def test_update_raises_event(self):
        customer = _make_customer()
        address = _add(customer)
        customer._events.clear()
        customer.update_address(address.id, zip_code="570001")
        events = [e for e in customer._events if isinstance(e, AddressUpdated)]
        assert len(events) == 1
        assert events[0].zip_code == "570001"

    def test_update_unknown_address_fails(self):
        customer = _make_customer()
        _add(customer)
        with pytest.raises(ValidationError):
            customer.update_address("missing", city="Mysuru")

    def test_update_unknown_field_fails(self):
        customer = _make_customer()
        address = _add(customer)
        with pytest.raises(ValidationError):
            customer.update_address(address.id, is_default=True)


class TestRemoveAddress:
    def test_remove_address(self):
        customer = _make_customer()
        _add(customer)
        second = _add(customer, address_line="4 Residency Road")
        customer.remove_address(second.id)
        assert len(customer.addresses) == 1

    def test_removing_default_hands_flag_to_remaining_address(self):
        customer = _make_customer()
        first = _add(customer)
        second = _add(customer, address_line="4 Residency Road")
        customer.remove_address(first.id)
        assert customer.find_address(second.id).is_default is True

    def test_last_address_can_be_removed(self):
        customer = _make_customer()
        address = _add(customer)
        customer.remove_address(address.id)
        assert len(customer.addresses) == 0
        assert customer.default_address() is None

    def test_remove_raises_event(self):
        customer = _make_customer()
        address = _add(customer)
        customer._events.clear()
        customer.remove_address(address.id)
        events = [e for e in customer._events if isinstance(e, AddressRemoved)]
        assert len(events) == 1
        assert events[0].address_id == str(address.id)

    def test_remove_unknown_address_fails(self):
        customer = _make_customer()
        with pytest.raises(ValidationError):
            customer.remove_address("missing")


class TestDefaultAddress:
    def test_set_default(self):
        customer = _make_customer()
        first = _add(customer)
        second = _add(customer, address_line="4 Residency Road")
        customer.set_default_address(second.id)
        assert second.is_default is True
        assert first.is_default is False
        assert customer.default_address() == second

    def test_set_default_raises_event_with_previous_default(self):
        customer = _make_customer()
        first = _add(customer)
        second = _add(customer, address_line="4 Residency Road")
        customer._events.clear()
        customer.set_default_address(second.id)
        events = [e for e in customer._events if isinstance(e, DefaultAddressChanged)]
        assert len(events) == 1
        assert events[0].previous_default_address_id == str(first.id)

    def test_set_default_unknown_address_fails(self):
        customer = _make_customer()
        with pytest.raises(ValidationError):
            customer.set_default_address("missing")

    def test_default_address_empty_book(self):
        assert _make_customer().default_address() is None

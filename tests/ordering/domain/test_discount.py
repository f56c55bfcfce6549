"""Tests for the Discount aggregate and discount arithmetic."""

import pytest
from ordering.discount.discount import Discount, DiscountStatus, DiscountType, calculate_discount
from ordering.discount.events import DiscountCreated, DiscountStatusChanged
from protean.exceptions import ValidationError


def _percentage(value=20.0, **kwargs):
    return Discount.create(code="SAVE20", discount_type=DiscountType.PERCENTAGE.value, value=value, **kwargs)


def _fixed(value=100.0):
    return Discount.create(code="FLAT100", discount_type=DiscountType.FIXED_AMOUNT.value, value=value)


class TestCalculateDiscount:
    def test_percentage(self):
        discount = _percentage(20.0)
        assert calculate_discount(discount, 1000.0) == 200.0
        assert 1000.0 - discount.amount_for(1000.0) == 800.0

    def test_fixed_amount(self):
        discount = _fixed(100.0)
        assert calculate_discount(discount, 500.0) == 100.0
        assert 500.0 - discount.amount_for(500.0) == 400.0

    def test_fixed_amount_is_not_capped(self):
        discount = _fixed(100.0)
        assert 50.0 - discount.amount_for(50.0) == -50.0

    def test_no_discount(self):
        assert calculate_discount(None, 750.0) == 0.0


class TestDiscountLifecycle:
    def test_create_defaults(self):
        discount = _percentage()
        assert discount.status == DiscountStatus.ACTIVE.value
        assert discount.usage == 0
        assert discount.is_active()
        events = [e for e in discount._events if isinstance(e, DiscountCreated)]
        assert events[0].code == "SAVE20"

    def test_code_is_trimmed(self):
        discount = Discount.create(code="  DIWALI ", discount_type="Percentage", value=10)
        assert discount.code == "DIWALI"

    def test_blank_code_rejected(self):
        with pytest.raises(ValidationError):
            Discount.create(code="  ", discount_type="Percentage", value=10)

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            Discount.create(code="BAD", discount_type="Percentage", value=-1)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Discount.create(code="BAD", discount_type="Bogus", value=1)

    def test_change_status(self):
        discount = _percentage()
        discount.change_status(DiscountStatus.EXPIRED.value)
        assert not discount.is_active()
        events = [e for e in discount._events if isinstance(e, DiscountStatusChanged)]
        assert events[0].previous_status == "Active"
        assert events[0].new_status == "Expired"

    def test_change_to_same_status_is_silent(self):
        discount = _percentage()
        discount.change_status(DiscountStatus.ACTIVE.value)
        assert not [e for e in discount._events if isinstance(e, DiscountStatusChanged)]

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            _percentage().change_status("Paused")

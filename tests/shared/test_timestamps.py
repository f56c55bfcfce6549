"""Tests for timestamp decoding at the store boundary."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from shared.timestamps import decode_timestamp, encode_timestamp

EXPECTED = datetime(2024, 5, 1, 10, 30, tzinfo=UTC)


class TestDecodeTimestamp:
    @pytest.mark.parametrize(
        "value",
        [
            EXPECTED,
            datetime(2024, 5, 1, 10, 30),
            "2024-05-01T10:30:00Z",
            "2024-05-01T10:30:00+00:00",
            "2024-05-01T10:30:00",
            EXPECTED.timestamp(),
            int(EXPECTED.timestamp()),
            {"seconds": int(EXPECTED.timestamp()), "nanoseconds": 0},
        ],
    )
    def test_shapes(self, value):
        assert decode_timestamp(value) == EXPECTED

    def test_nanoseconds(self):
        decoded = decode_timestamp({"seconds": int(EXPECTED.timestamp()), "nanoseconds": 500_000_000})
        assert decoded == EXPECTED + timedelta(milliseconds=500)

    def test_date(self):
        assert decode_timestamp(date(2024, 5, 1)) == datetime(2024, 5, 1, tzinfo=UTC)

    def test_keeps_other_timezones(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        decoded = decode_timestamp("2024-05-01T16:00:00+05:30")
        assert decoded.tzinfo == ist
        assert decoded == EXPECTED

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent(self, value):
        assert decode_timestamp(value) is None

    @pytest.mark.parametrize("value", [True, {"nanoseconds": 1}, ["2024"], "yesterday"])
    def test_rejects_unknown_shapes(self, value):
        with pytest.raises(ValueError):
            decode_timestamp(value)


class TestEncodeTimestamp:
    def test_iso(self):
        assert encode_timestamp(EXPECTED) == "2024-05-01T10:30:00+00:00"

    def test_none(self):
        assert encode_timestamp(None) is None

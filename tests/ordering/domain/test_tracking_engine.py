"""Tests for the order tracking engine."""

from datetime import date

import pytest
from ordering.order.tracking import (
    ORDER_PLACED,
    TRACKING_STEPS,
    initial_tracking,
    recompute_tracking,
    status_index,
    tracking_date,
)

PLACED_ON = date(2024, 5, 1)
TODAY = date(2024, 5, 3)


class TestStatusIndex:
    @pytest.mark.parametrize(
        "status, expected",
        [
            ("Processing", 0),
            ("Shipped", 1),
            ("Delivered", 2),
            ("Pending", -1),
            ("Cancelled", -1),
            (ORDER_PLACED, -1),
        ],
    )
    def test_index(self, status, expected):
        assert status_index(status) == expected


class TestInitialTracking:
    def test_four_steps_only_first_completed(self):
        tracking = initial_tracking(PLACED_ON)
        assert [s["status"] for s in tracking] == list(TRACKING_STEPS)
        assert [s["completed"] for s in tracking] == [True, False, False, False]
        assert tracking[0]["date"] == "2024-05-01"
        assert all(s["date"] == "" for s in tracking[1:])

    def test_tracking_date_formats(self):
        assert tracking_date(date(2024, 1, 9)) == "2024-01-09"
        assert len(tracking_date()) == 10


class TestRecomputeTracking:
    def test_shipped_completes_up_to_shipped(self):
        tracking = recompute_tracking(initial_tracking(PLACED_ON), "Shipped", TODAY)
        by_status = {s["status"]: s for s in tracking}

        assert by_status["Processing"]["completed"] is True
        assert by_status["Shipped"]["completed"] is True
        assert by_status["Delivered"]["completed"] is False
        assert by_status["Processing"]["date"] == "2024-05-03"
        assert by_status["Shipped"]["date"] == "2024-05-03"
        assert by_status["Delivered"]["date"] == ""

    def test_existing_dates_are_kept(self):
        processing = recompute_tracking(initial_tracking(PLACED_ON), "Processing", date(2024, 5, 2))
        shipped = recompute_tracking(processing, "Shipped", TODAY)
        assert shipped[1]["date"] == "2024-05-02"
        assert shipped[2]["date"] == "2024-05-03"

    def test_moving_back_marks_later_steps_incomplete_but_keeps_dates(self):
        delivered = recompute_tracking(initial_tracking(PLACED_ON), "Delivered", TODAY)
        processing = recompute_tracking(delivered, "Processing", date(2024, 5, 4))
        assert [s["completed"] for s in processing] == [True, True, False, False]
        assert processing[3]["date"] == "2024-05-03"

    def test_order_placed_step_is_never_modified(self):
        tracking = initial_tracking(PLACED_ON)
        for status in ("Processing", "Shipped", "Delivered", "Pending", "Cancelled"):
            assert recompute_tracking(tracking, status, TODAY)[0] == tracking[0]

    @pytest.mark.parametrize("status", ["Processing", "Shipped", "Delivered"])
    def test_forward_update_leaves_order_placed_completed_and_dated(self, status):
        updated = recompute_tracking(initial_tracking(PLACED_ON), status, TODAY)
        assert updated[0] == {"status": ORDER_PLACED, "date": PLACED_ON.isoformat(), "completed": True}

    @pytest.mark.parametrize("status", ["Pending", "Cancelled"])
    def test_statuses_outside_sequence_leave_tracking_unchanged(self, status):
        shipped = recompute_tracking(initial_tracking(PLACED_ON), "Shipped", TODAY)
        assert recompute_tracking(shipped, status, date(2024, 6, 1)) == shipped

    def test_input_is_not_modified(self):
        tracking = initial_tracking(PLACED_ON)
        recompute_tracking(tracking, "Delivered", TODAY)
        assert [s["completed"] for s in tracking] == [True, False, False, False]

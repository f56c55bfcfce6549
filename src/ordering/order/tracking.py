"""Order tracking engine.

Every order carries four tracking steps: ``Order Placed`` followed by the
canonical fulfilment sequence ``Processing → Shipped → Delivered``. When an
order moves to a status in that sequence, every step up to and including it
is completed (and dated, if it wasn't already) and every later step is reset
to incomplete. ``Pending`` and ``Cancelled`` have no position in the sequence
and leave the tracking untouched. The ``Order Placed`` step is fixed at
creation time.

These are plain functions over step dicts so that they can be used on stored
orders and on API payloads alike.
"""

from datetime import UTC, date, datetime

ORDER_PLACED = "Order Placed"
TRACKING_SEQUENCE = ("Processing", "Shipped", "Delivered")
TRACKING_STEPS = (ORDER_PLACED, *TRACKING_SEQUENCE)


def status_index(status) -> int:
    """Position of ``status`` in the fulfilment sequence, or -1."""
    try:
        return TRACKING_SEQUENCE.index(status)
    except ValueError:
        return -1


def tracking_date(day=None) -> str:
    """``yyyy-mm-dd`` for ``day`` (today in UTC when omitted)."""
    if day is None:
        day = datetime.now(UTC).date()
    if isinstance(day, datetime):
        day = day.date()
    if isinstance(day, date):
        return day.isoformat()
    return str(day)


def initial_tracking(today=None) -> list[dict]:
    """Tracking of a freshly placed order: only ``Order Placed`` is done."""
    placed_on = tracking_date(today)
    return [
        {
            "status": status,
            "date": placed_on if status == ORDER_PLACED else "",
            "completed": status == ORDER_PLACED,
        }
        for status in TRACKING_STEPS
    ]


def recompute_tracking(tracking, new_status, today=None) -> list[dict]:
    """Return the tracking steps as they should read once the order is ``new_status``.

    The input is not modified.
    """
    target = status_index(new_status)
    steps = [dict(step) for step in tracking]
    if target == -1:
        return steps

    stamp = tracking_date(today)
    for step in steps:
        index = status_index(step.get("status"))
        if index == -1:
            continue
        if index <= target:
            step["completed"] = True
            step["date"] = step.get("date") or stamp
        else:
            step["completed"] = False
    return steps

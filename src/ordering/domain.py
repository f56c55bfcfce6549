"""Ordering bounded context — shopping cart, discounts, checkout and orders.

Handles the per-customer cart, the discount ledger, the checkout wizard that
turns a cart into an order, and the order status/tracking lifecycle.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)

"""Logging helpers for the Ordering domain."""

import logging

import structlog

# Suppress noisy library loggers
logging.getLogger("protean").setLevel(logging.WARNING)


def order_logger(order_id, **context):
    """A logger pre-bound with the order id (and any extra context)."""
    return structlog.get_logger("ordering.order").bind(order_id=str(order_id), **context)

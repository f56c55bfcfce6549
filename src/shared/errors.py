"""Error taxonomy shared by the storefront contexts.

Every failure here is raised at the call site of a customer or admin action
and leaves prior state intact. None of them is retried automatically.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class AuthRequired(Exception):
    """The action needs a signed-in customer."""

    def __init__(self, message="Please login to continue."):
        super().__init__(message)
        self.message = message


class ValidationFailed(ValidationError):
    """Input needed by the action is missing or invalid (no address, empty cart, ...)."""


class NotFound(ObjectNotFoundError):
    """An order, address or discount id does not exist."""


class RemoteWriteFailed(Exception):
    """The store rejected a write issued on behalf of the user."""

    def __init__(self, operation, reason=None):
        self.operation = operation
        self.reason = str(reason) if reason is not None else None
        message = f"Could not {operation}"
        if self.reason:
            message = f"{message}: {self.reason}"
        super().__init__(message)

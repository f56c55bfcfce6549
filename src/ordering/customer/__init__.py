"""Customer ports and adapters for the ordering context."""

from ordering.customer.port import AddressBookService, AddressSnapshot, AuthService, CustomerIdentity

__all__ = ["AddressBookService", "AddressSnapshot", "AuthService", "CustomerIdentity"]

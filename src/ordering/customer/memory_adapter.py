"""In-memory customer adapters for development and testing."""

from ordering.customer.port import AddressBookService, AddressSnapshot, AuthService, CustomerIdentity


class StaticAuthService(AuthService):
    """A fixed signed-in user that can be swapped with sign_in/sign_out."""

    def __init__(self, user: CustomerIdentity | None = None):
        self._user = user

    def current_user(self) -> CustomerIdentity | None:
        return self._user

    def sign_in(self, user: CustomerIdentity) -> None:
        self._user = user

    def sign_out(self) -> None:
        self._user = None


class InMemoryAddressBook(AddressBookService):
    def __init__(self, addresses: dict[str, list[AddressSnapshot]] | None = None):
        self._addresses = {str(k): list(v) for k, v in (addresses or {}).items()}

    def addresses_for(self, customer_id: str) -> list[AddressSnapshot]:
        return list(self._addresses.get(str(customer_id), []))

    def add(self, customer_id: str, address: AddressSnapshot) -> None:
        self._addresses.setdefault(str(customer_id), []).append(address)

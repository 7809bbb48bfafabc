from typing import Iterable, Iterator, List, Optional, Tuple

from crm_email.domain.email_address import EmailAddress
from crm_email.domain.errors import ValidationError


class EmailAddressGroup:
    """Value object for a contact's email addresses with one primary address.

    - the first element is the primary one; a non-empty group always has it
    - addresses are unique by their exact (case-sensitive) string
    - never modified after construction; `with_*` methods return a new group

    Elements are matched by address string everywhere, never by identity.
    """

    __slots__ = ("_list",)

    def __init__(self, elements: Iterable[EmailAddress] = ()):
        self._list: Tuple[EmailAddress, ...] = tuple(elements)
        self._validate()

    @classmethod
    def from_list(cls, elements: Iterable[EmailAddress]) -> "EmailAddressGroup":
        return cls(elements)

    @classmethod
    def from_nothing(cls) -> "EmailAddressGroup":
        return cls()

    def is_empty(self) -> bool:
        return len(self._list) == 0

    def get_primary(self) -> Optional[EmailAddress]:
        """Return the primary address, or None for an empty group."""
        if self.is_empty():
            return None
        return self._list[0]

    def get_list(self) -> List[EmailAddress]:
        return list(self._list)

    def get_secondary_list(self) -> List[EmailAddress]:
        return list(self._list[1:])

    def get_address_list(self) -> List[str]:
        return [item.get_address() for item in self._list]

    def has_address(self, address: str) -> bool:
        return address in self.get_address_list()

    def with_primary(self, email_address: EmailAddress) -> "EmailAddressGroup":
        """Return a copy with `email_address` as primary.

        An element with the same address is replaced rather than duplicated.
        """
        rest = [item for item in self._list if item.get_address() != email_address.get_address()]
        return self.__class__([email_address] + rest)

    def with_added(self, email_address: EmailAddress) -> "EmailAddressGroup":
        """Return a copy with `email_address` appended; the primary stays as is."""
        return self.__class__(self._list + (email_address,))

    def _validate(self) -> None:
        seen: List[str] = []
        for item in self._list:
            address = item.get_address()
            if address in seen:
                raise ValidationError(
                    f"Address list contains a duplicate: {address}",
                    reason="duplicate",
                    address=address,
                )
            seen.append(address)

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[EmailAddress]:
        return iter(self._list)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, EmailAddress):
            return self.has_address(item.get_address())
        return isinstance(item, str) and self.has_address(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAddressGroup):
            return NotImplemented
        return self._list == other._list

    def __hash__(self) -> int:
        return hash(self._list)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"EmailAddressGroup({self.get_address_list()!r})"

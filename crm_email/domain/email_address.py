from dataclasses import dataclass, replace

from crm_email.domain.errors import ValidationError


@dataclass(frozen=True)
class EmailAddress:
    """Value object for a single email address with its delivery flags.

    - the address is stored trimmed and must not be empty
    - `invalid` and `opted_out` are opaque flags carried along unchanged
    - flag changes return a new instance
    """

    address: str
    opted_out: bool = False
    invalid: bool = False

    def __post_init__(self):
        if not self.address or not self.address.strip():
            raise ValidationError("Email address must not be empty", reason="empty")

    @classmethod
    def from_address(cls, address: str) -> "EmailAddress":
        return cls(address.strip())

    def get_address(self) -> str:
        return self.address

    def is_invalid(self) -> bool:
        return self.invalid

    def is_opted_out(self) -> bool:
        return self.opted_out

    def as_invalid(self) -> "EmailAddress":
        return replace(self, invalid=True)

    def as_valid(self) -> "EmailAddress":
        return replace(self, invalid=False)

    def as_opted_out(self) -> "EmailAddress":
        return replace(self, opted_out=True)

    def as_not_opted_out(self) -> "EmailAddress":
        return replace(self, opted_out=False)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.address

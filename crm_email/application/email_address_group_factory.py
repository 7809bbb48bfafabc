import logging
from typing import Any, List, Mapping, Optional, Sequence

from crm_email.domain.email_address import EmailAddress
from crm_email.domain.email_address_group import EmailAddressGroup
from crm_email.domain.errors import ValidationError


class EmailAddressGroupFactory:
    """Build an EmailAddressGroup from entity-style `emailAddressData` rows.

    Each row is a mapping with an `emailAddress` string and optional boolean
    `primary`, `optOut` and `invalid` keys. Domain errors are not caught here.
    """

    @staticmethod
    def _to_email_address(row: Mapping[str, Any]) -> EmailAddress:
        address = row.get("emailAddress")
        if not isinstance(address, str):
            raise ValidationError(
                "Email address row has no 'emailAddress' string", reason="malformed"
            )
        return EmailAddress(
            address.strip(),
            opted_out=bool(row.get("optOut", False)),
            invalid=bool(row.get("invalid", False)),
        )

    def create_from_data(
        self,
        data: Optional[Sequence[Mapping[str, Any]]],
        primary_address: Optional[str] = None,
    ) -> EmailAddressGroup:
        rows = list(data or [])

        if not rows:
            if primary_address and primary_address.strip():
                logging.debug(f"emailAddressData is empty, using primary address {primary_address}")
                return EmailAddressGroup.from_list([EmailAddress.from_address(primary_address)])
            return EmailAddressGroup.from_nothing()

        primary: Optional[EmailAddress] = None
        secondary: List[EmailAddress] = []

        for row in rows:
            item = self._to_email_address(row)
            if row.get("primary") and primary is None:
                primary = item
                continue
            if row.get("primary"):
                logging.warning(
                    f"Several primary email addresses in data, keeping {primary.get_address()}"
                )
            secondary.append(item)

        if primary is None:
            logging.debug("No primary email address in data, using the first one")
            return EmailAddressGroup.from_list(secondary)

        return EmailAddressGroup.from_list([primary] + secondary)

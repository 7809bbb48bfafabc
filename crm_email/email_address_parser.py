import re
from typing import List

from crm_email.domain.email_address import EmailAddress
from crm_email.domain.email_address_group import EmailAddressGroup


def parse_email_addresses(text: str) -> EmailAddressGroup:
    """Turn a comma or newline separated form value into an EmailAddressGroup.

    Each entry is trimmed and lowercased. Blank entries are skipped and a
    repeated address keeps its first position. The first address found is
    the primary one; input without any address gives an empty group.
    """
    addresses: List[str] = []
    for entry in re.split(r"[,\n]", text or ""):
        address = entry.strip().lower()
        if address and address not in addresses:
            addresses.append(address)
    return EmailAddressGroup.from_list(EmailAddress.from_address(a) for a in addresses)

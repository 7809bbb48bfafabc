from typing import Any, Dict, List

from crm_email.domain.email_address_group import EmailAddressGroup


class EmailAddressGroupExtractor:
    """Flatten an EmailAddressGroup into entity attributes.

    The returned `emailAddressData` rows are accepted back by
    EmailAddressGroupFactory.create_from_data.
    """

    def extract(self, group: EmailAddressGroup) -> Dict[str, Any]:
        primary = group.get_primary()

        data: List[Dict[str, Any]] = []
        for i, item in enumerate(group):
            data.append(
                {
                    "emailAddress": item.get_address(),
                    "lower": item.get_address().lower(),
                    "primary": i == 0,
                    "optOut": item.is_opted_out(),
                    "invalid": item.is_invalid(),
                }
            )

        return {
            "emailAddress": primary.get_address() if primary else None,
            "emailAddressIsOptedOut": primary.is_opted_out() if primary else None,
            "emailAddressIsInvalid": primary.is_invalid() if primary else None,
            "emailAddressData": data,
        }

from crm_email.domain.errors import ValidationError

_MESSAGES = {
    "duplicate": "The email address {address} is already in the list.",
    "empty": "Email address must not be empty.",
    "malformed": "Email address data is malformed.",
}


def get_error_message(exc: Exception) -> str:
    """Map exception to a user-facing message.

    Policy:
    - ValidationError: message by its reason, naming the address when known
    - others: generic message with the exception text
    """

    if isinstance(exc, ValidationError) and exc.reason in _MESSAGES:
        return _MESSAGES[exc.reason].format(address=exc.address or "")

    return f"Failed to update email addresses: {str(exc)}"

from typing import Optional


class ValidationError(ValueError):
    """Raised when an email address or a group of them violates an invariant.

    `reason` is one of "duplicate", "empty" or "malformed".
    """

    def __init__(self, message: str, reason: str, address: Optional[str] = None):
        super().__init__(message)
        self.reason = reason
        self.address = address

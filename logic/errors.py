"""
Claim error taxonomy.

Every client-facing failure carries the HTTP status and the exact message
returned to the user. The FastAPI app turns these into ``{"error": ...}``
responses.

Author: Agent Grid contributors
Date: 2026-10-19
"""


class ClaimError(Exception):
    """Base class for errors surfaced verbatim to the claimant.

    Attributes:
        status_code: HTTP status used when the error reaches the API.
        message: User-facing error text.
    """

    status_code = 400
    message = "Failed to claim"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFields(ClaimError):
    message = "Missing required fields"


class OutOfBounds(ClaimError):
    message = "Invalid cell position"


class NameTooLong(ClaimError):
    message = "Name too long (max 30)"


class AlreadyClaimed(ClaimError):
    status_code = 409
    message = "Cell already claimed"


class StorageUnreadable(ClaimError):
    """Raised when the claims file exists but cannot be parsed on write."""

    status_code = 503
    message = "Storage unavailable"


class MalformedId(ValueError):
    """Raised when a cell id is not two non-negative integers joined by '-'."""

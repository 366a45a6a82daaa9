"""Failure taxonomy for the notify endpoint.

Every error reaches the caller as ``400 {"error": message}``; the subclass is
only used to tell the failures apart in logs.
"""

from typing import Optional


class NotifyError(Exception):
    kind = "notify_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(NotifyError):
    """Missing or malformed input (no site id, unknown notification type)."""

    kind = "validation_error"


class NotFoundError(NotifyError):
    """No active integration exists for the site."""

    kind = "not_found"


class UpstreamError(NotifyError):
    """The integration store could not be read."""

    kind = "upstream_error"


class DeliveryError(NotifyError):
    """The webhook could not be reached or answered with a non-2xx status."""

    kind = "delivery_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

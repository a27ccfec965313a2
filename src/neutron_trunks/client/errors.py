"""Custom exceptions for the neutron-trunks client."""

from __future__ import annotations


class TrunkError(Exception):
    """Base exception for all neutron-trunks errors."""


class TrunkValidationError(TrunkError, ValueError):
    """Raised when request options are missing a required field.

    Always raised before any request reaches the network.

    Attributes:
        field: Dotted name of the offending option field
            (e.g. ``"port_id"`` or ``"sub_ports[2].segmentation_type"``).
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Missing input for argument [{field}]")


class TrunkRequestError(TrunkError):
    """Raised when a network-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url!r} failed: {cause}")


class TrunkResponseError(TrunkError):
    """Raised when the service answers with a status code the operation does not expect."""

    def __init__(self, status_code: int, url: str, body: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.body = body
        msg = f"HTTP {status_code} for {url!r}"
        if body:
            msg += f": {body[:200]}"
        super().__init__(msg)


class TrunkParseError(TrunkError):
    """Raised when a response body is not JSON or lacks the expected fields."""

"""Dashboard error types."""

from __future__ import annotations

from enum import Enum


class DashboardErrorCode(Enum):
    """Error classification codes."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    BAD_STATUS = "bad_status"
    MALFORMED_PAYLOAD = "malformed_payload"
    SHAPE_MISMATCH = "shape_mismatch"


class DashboardError(Exception):
    """Dashboard exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        retryable: Whether the next scheduled tick may succeed.
    """

    def __init__(
        self,
        message: str,
        code: DashboardErrorCode = DashboardErrorCode.NETWORK,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable


class FetchError(DashboardError):
    """Transport failure, non-success status, or undecodable body."""


class ParseError(DashboardError):
    """Payload decoded but does not have the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=DashboardErrorCode.SHAPE_MISMATCH, retryable=False)

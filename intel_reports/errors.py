"""Exception hierarchy for the report lifecycle engine."""

from typing import Optional


class IntelReportsError(Exception):
    """Base class for all errors raised by this package."""


class ConfigValidationError(IntelReportsError):
    """Raised when the user's configuration input is missing or insufficient.

    The message is user-displayable and is shown inline on the configuration
    screen. The request never reaches the network.
    """

    def __init__(self, message: str, field_id: Optional[str] = None):
        self.message = message
        self.field_id = field_id
        super().__init__(message)


class GenerationTransportError(IntelReportsError):
    """Raised when the generation request never completed (network, timeout)."""


class DirectoryServiceError(IntelReportsError):
    """Raised when the entity directory service returns a non-success response."""

    def __init__(self, status: int, detail: str = ""):
        self.status = status
        self.detail = detail
        super().__init__(f"Directory service error: {status} {detail}".strip())


class ClipboardError(IntelReportsError):
    """Raised by a host environment that cannot write to the clipboard."""

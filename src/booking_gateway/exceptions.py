"""
Custom exceptions for the booking gateway.

Provides a hierarchy of exceptions so callers can tell a missing
credential, an upstream rejection and an unreachable upstream apart.
"""

from typing import Any, Dict, List, Optional


class DuffelError(Exception):
    """Base exception for all Duffel client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuffelConfigurationError(DuffelError):
    """Raised before any network attempt when no API token is configured."""

    def __init__(self, message: str = "Duffel API token required for live data") -> None:
        super().__init__(message)


class DuffelAPIError(DuffelError):
    """Raised when the Duffel API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str = "",
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(f"Duffel API: {message or f'HTTP {status_code}'}")

    @property
    def code(self) -> Optional[str]:
        """Machine-readable code of the first upstream error, if any."""
        if self.errors and isinstance(self.errors[0], dict):
            return self.errors[0].get("code")
        return None


class DuffelNetworkError(DuffelError):
    """Raised when the Duffel API cannot be reached at all."""

    def __init__(self, message: str = "Network connectivity issue with Duffel API") -> None:
        super().__init__(message)

"""Exception hierarchy for the wallet profiling engine."""

from datetime import datetime, timezone
from typing import Any, Optional


class WalletProfilerError(Exception):
    """Base exception for all wallet profiler errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class InvalidInputError(WalletProfilerError):
    """Malformed transaction data or unsupported argument."""


class ConfigurationError(WalletProfilerError):
    """Invalid configuration or reference data."""

"""
Exception types raised by the council.

Per-call provider failures are absorbed inside a stage; only stage aborts
and configuration problems reach the caller.
"""


class CouncilError(Exception):
    """Base class for all council errors."""


class ConfigError(CouncilError):
    """Raised when a council configuration is invalid."""


class ProviderError(CouncilError):
    """Raised when a single chat request fails (transport, timeout or HTTP status)."""

    def __init__(self, message: str, model: str | None = None, status_code: int | None = None):
        self.model = model
        self.status_code = status_code
        super().__init__(message)


class StageError(CouncilError):
    """Raised when a stage cannot complete and the run must stop."""

    def __init__(self, stage: int, message: str):
        self.stage = stage
        super().__init__(message)

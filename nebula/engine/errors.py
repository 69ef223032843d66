"""Exceptions raised by rejected economy actions.

Every rejection is raised before any state is touched, so a caught error
means the game is exactly as it was before the call.
"""


class NebulaError(Exception):
    """Base exception for all Nebula errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"


class EconomyError(NebulaError):
    """A construct, demolish or synthesize request was rejected."""


class InsufficientResources(EconomyError):
    """The acting ledger cannot cover the cost."""


class PrerequisiteUnmet(EconomyError):
    """The star lacks the earth-like planets the building requires."""


class CapacityExceeded(EconomyError):
    """The building count would pass the per-type limit."""


class InvalidDemolishCount(EconomyError):
    """More units were demolished than are built."""

"""
Error Taxonomy

Architectural Intent:
- Input errors (configuration, call parameters) are raised immediately
- External process failures are raised by runners only and translated by
  the tracker into FAILURE results, so batch callers can continue
"""


class IncidentTrackerError(Exception):
    """Base class for incident tracker errors."""


class ConfigurationError(IncidentTrackerError):
    """Bad or missing constructor input."""


class MissingParameterError(IncidentTrackerError):
    """Bad tracking-call input."""


class InvocationError(IncidentTrackerError):
    """An external tool could not be started."""

    def __init__(self, command: str, reason: str = "") -> None:
        self.command = command
        self.reason = reason
        message = f"Failed to run {command}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

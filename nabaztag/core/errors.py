"""Exception hierarchy shared by the compiler, the batch and the transport."""

from __future__ import annotations


class NabaztagError(RuntimeError):
    """Base class for every failure raised by this package."""


class ConfigurationError(NabaztagError):
    """Raised when a command is built from an unknown name or invalid value."""


class TransportError(NabaztagError):
    """Raised when the HTTP exchange with the service fails."""


class ServiceError(NabaztagError):
    """Raised when the service answered but a queued command was not accepted."""

    def __init__(self, label: str, response: str) -> None:
        super().__init__(f"{label}: {response}")
        self.label = label
        self.response = response

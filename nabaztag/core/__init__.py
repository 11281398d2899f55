"""Core primitives for nabaztag."""

from .errors import ConfigurationError, NabaztagError, ServiceError, TransportError
from .models import (
    ActionKind,
    ActionRecord,
    DeviceIdentity,
    DispatchResult,
    EarPositions,
)
from .protocols import TextCodec, Transport, Verifier

__all__ = [
    "ActionKind",
    "ActionRecord",
    "ConfigurationError",
    "DeviceIdentity",
    "DispatchResult",
    "EarPositions",
    "NabaztagError",
    "ServiceError",
    "TextCodec",
    "Transport",
    "TransportError",
    "Verifier",
]

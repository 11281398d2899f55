"""Client for the Nabaztag rabbit HTTP API."""

from .choreography import ChoreographyCompiler, compile_choreography, parse_choreography
from .core import (
    ConfigurationError,
    DispatchResult,
    EarPositions,
    NabaztagError,
    ServiceError,
    TransportError,
)
from .device import Nabaztag
from .message import CommandBatch

__all__ = [
    "ChoreographyCompiler",
    "CommandBatch",
    "ConfigurationError",
    "DispatchResult",
    "EarPositions",
    "Nabaztag",
    "NabaztagError",
    "ServiceError",
    "TransportError",
    "compile_choreography",
    "parse_choreography",
]

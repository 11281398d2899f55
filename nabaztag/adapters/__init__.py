"""Adapters connecting the command batch to the remote service."""

from .encoding import ServiceCodec
from .http_transport import HttpTransport, build_request_url

__all__ = ["HttpTransport", "ServiceCodec", "build_request_url"]

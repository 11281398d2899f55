"""Protocol definitions for the service collaborators."""

from __future__ import annotations

from typing import Callable, Mapping, Protocol, Union


Verifier = Callable[[str], bool]


class Transport(Protocol):
    """Minimal contract for components that reach the remote service."""

    async def submit_request(
        self, base_uri: str, parameters: Mapping[str, str]
    ) -> bytes:
        """Issue one GET request and return the raw response body.

        Args:
            base_uri: Service endpoint, possibly ending in ``?``.
            parameters: Ordered, already percent-encoded parameter values.

        Raises:
            TransportError: If the request cannot be completed.
        """
        ...

    async def aclose(self) -> None:
        """Close any underlying resources."""
        ...


class TextCodec(Protocol):
    """Character-set conversion between the caller and the service."""

    def encode_outbound(self, text: Union[str, bytes]) -> bytes:
        ...

    def decode_inbound(self, payload: bytes) -> str:
        ...

    def escape(self, payload: bytes) -> str:
        ...

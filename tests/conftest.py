from typing import Mapping, Optional, Union

import pytest


class RecordingTransport:
    """In-memory transport returning a canned service response."""

    def __init__(
        self,
        response: Union[str, bytes] = "",
        *,
        error: Optional[Exception] = None,
    ) -> None:
        if isinstance(response, str):
            response = response.encode("iso-8859-1")
        self.response = response
        self.error = error
        self.requests: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    async def submit_request(
        self, base_uri: str, parameters: Mapping[str, str]
    ) -> bytes:
        self.requests.append((base_uri, dict(parameters)))
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def make_transport():
    """Build recording transports for batch and device tests."""

    return RecordingTransport

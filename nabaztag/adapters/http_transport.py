"""HTTP transport for the Nabaztag API."""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Optional

import aiohttp
from yarl import URL

from ..constants import DEFAULT_TIMEOUT_SECONDS
from ..core import TransportError

LOGGER = logging.getLogger(__name__)


class HttpTransport:
    """Issues single GET requests against the service."""

    def __init__(
        self,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    async def submit_request(
        self, base_uri: str, parameters: Mapping[str, str]
    ) -> bytes:
        """Send one request and return the raw response body.

        Parameter values must already be percent-encoded.

        Raises:
            TransportError: On connection failures, timeouts and HTTP errors.
        """

        url = build_request_url(base_uri, parameters)
        session = await self._ensure_session()

        try:
            async with asyncio.timeout(self.timeout):
                async with session.get(URL(url, encoded=True)) as response:
                    body = await response.read()
                    if response.status >= 400:
                        detail = body.decode("iso-8859-1", errors="replace").strip()
                        raise TransportError(
                            f"Service request failed with status {response.status}: {detail[:200]}"
                        )
                    return body
        except asyncio.TimeoutError as exc:
            LOGGER.warning("Service request timed out after %.1fs", self.timeout)
            raise TransportError(
                f"Service request timed out after {self.timeout:.1f}s"
            ) from exc
        except aiohttp.ClientError as exc:
            LOGGER.warning("Service request failed: %s", exc)
            raise TransportError(f"Service request failed: {exc}") from exc

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=None)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session


def build_request_url(base_uri: str, parameters: Mapping[str, str]) -> str:
    query = "&".join(f"{key}={value}" for key, value in parameters.items())
    base = base_uri.rstrip("?&")
    if not query:
        return base
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{query}"

"""Pending command batch sent to the service as one request."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .constants import API_URI
from .core import (
    ConfigurationError,
    DeviceIdentity,
    DispatchResult,
    EarPositions,
    ServiceError,
    TextCodec,
    Transport,
    Verifier,
)
from .responses import ResponseDecoder

LOGGER = logging.getLogger(__name__)

# Order in which fields appear in the outgoing request.
FIELDS = (
    "idmessage",
    "posright",
    "posleft",
    "idapp",
    "tts",
    "chor",
    "chortitle",
    "nabcast",
    "ears",
)

FieldValue = Union[str, bytes, int]


class CommandBatch:
    """Holds at most one pending value per request field plus its verifiers.

    Setting a field or verifier twice before dispatch keeps only the latest
    value. The batch never resets itself: the owner replaces it after a
    dispatch.
    """

    def __init__(self, identity: DeviceIdentity) -> None:
        self.identity = identity
        self._values: dict[str, FieldValue] = {}
        self._verifiers: dict[str, Verifier] = {}
        self.ear_positions = EarPositions()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_field(self, name: str, value: Optional[FieldValue]) -> None:
        if name not in FIELDS:
            raise ConfigurationError(f"Unknown message field: {name!r}")
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def get_field(self, name: str) -> Optional[FieldValue]:
        return self._values.get(name)

    def register_verifier(self, label: str, verifier: Verifier) -> None:
        self._verifiers[label] = verifier

    @property
    def verifiers(self) -> dict[str, Verifier]:
        return dict(self._verifiers)

    @property
    def ear_query(self) -> bool:
        return self._values.get("ears") is not None

    def is_empty(self) -> bool:
        return not self._values and not self._verifiers

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def build_parameters(self) -> dict[str, Union[str, bytes]]:
        """Return the request parameters; absent fields are omitted.

        Byte strings are kept as given so the codec can read them in the
        caller's charset.
        """

        parameters: dict[str, Union[str, bytes]] = {
            "sn": self.identity.mac,
            "token": self.identity.token,
        }
        if self.identity.voice:
            parameters["voice"] = self.identity.voice
        for name in FIELDS:
            value = self._values.get(name)
            if value is None or value in ("", b""):
                continue
            parameters[name] = value if isinstance(value, bytes) else str(value)
        return parameters

    async def dispatch(
        self, transport: Transport, codec: TextCodec, *, api_uri: str = API_URI
    ) -> DispatchResult:
        """Send the batch and check every verifier against the response.

        Raises:
            TransportError: If the request fails.
            ServiceError: If a verifier rejects the response. The first
                failing verifier in registration order is reported.
        """

        parameters = self.build_parameters()
        encoded = {
            key: codec.escape(codec.encode_outbound(value))
            for key, value in parameters.items()
        }
        LOGGER.info(
            "Dispatching message fields: %s",
            ", ".join(name for name in parameters if name not in ("sn", "token")),
        )

        raw = await transport.submit_request(api_uri, encoded)
        response = ResponseDecoder.normalize(codec.decode_inbound(raw))
        LOGGER.debug("Service response: %s", response)

        if self.ear_query:
            self.ear_positions = ResponseDecoder.extract_ear_positions(response)
            if not self.ear_positions.is_known:
                LOGGER.debug("Ear positions not found in response")

        for label, verifier in self._verifiers.items():
            if not verifier(response):
                LOGGER.warning("Command %r was not acknowledged by the service", label)
                raise ServiceError(label, response)

        return DispatchResult(response=response, ear_positions=self.ear_positions)

"""Public entry point for controlling a Nabaztag rabbit.

You need the MAC address of the rabbit (written on its base) and its API
token. Commands are queued until :meth:`Nabaztag.send` is awaited, so several
commands travel in one request::

    rabbit = Nabaztag(mac, token)
    rabbit.say("bonjour")      # nothing sent yet
    rabbit.move_ears(4, 4)     # still not sent
    await rabbit.send()        # one request carrying both commands

Issuing the same command twice before a send keeps only the latest one.

The service copes badly with many requests in quick succession and may
forward garbled commands to the rabbit. It also drops a choreography sent in
the same request as speech: only the speech reaches the device.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .adapters import HttpTransport, ServiceCodec
from .choreography import Program, compile_choreography
from .config import NabaztagConfig
from .constants import API_URI, EAR_POSITION_MAX, EAR_POSITION_MIN
from .core import (
    ConfigurationError,
    DeviceIdentity,
    DispatchResult,
    EarPositions,
    TextCodec,
    Transport,
)
from .message import CommandBatch
from .responses import CommandKind, ResponseVerifier

LOGGER = logging.getLogger(__name__)

BARK_TEXT = "ouah ouah"


class Nabaztag:
    """Queues commands for one rabbit and sends them as a batch.

    ``voice`` overrides the rabbit's default voice (claire22s for French,
    heather22k for English). The voice's language wins over the rabbit's, so a
    French rabbit speaks English with an English voice. Voice names are passed
    through unchecked; see ``device_tables.VOICES`` for the known ones.
    """

    def __init__(
        self,
        mac: str,
        token: str,
        *,
        voice: Optional[str] = None,
        transport: Optional[Transport] = None,
        codec: Optional[TextCodec] = None,
        api_uri: str = API_URI,
    ) -> None:
        self._identity = DeviceIdentity(mac=mac, token=token, voice=voice)
        self._transport: Transport = transport or HttpTransport()
        self._codec: TextCodec = codec or ServiceCodec()
        self._api_uri = api_uri
        self._message = self._new_message()

    @classmethod
    def from_config(
        cls, config: NabaztagConfig, *, transport: Optional[Transport] = None
    ) -> "Nabaztag":
        if not config.device.mac or not config.device.token:
            raise ConfigurationError(
                f"Both mac and token must be set in [nabaztag] of {config.path}"
            )
        return cls(
            config.device.mac,
            config.device.token,
            voice=config.device.voice,
            transport=transport
            or HttpTransport(timeout=config.service.timeout_seconds),
            codec=ServiceCodec(config.encoding.caller_charset),
            api_uri=config.service.api_uri,
        )

    async def __aenter__(self) -> "Nabaztag":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def identity(self) -> DeviceIdentity:
        return self._identity

    @property
    def mac(self) -> str:
        return self._identity.mac

    @property
    def token(self) -> str:
        return self._identity.token

    @property
    def voice(self) -> Optional[str]:
        return self._identity.voice

    @property
    def message(self) -> CommandBatch:
        """The batch collecting commands until the next send."""

        return self._message

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    async def send(self) -> DispatchResult:
        """Send all pending commands and start a fresh batch.

        If the dispatch fails the pending batch is kept, so it can be
        inspected or re-sent; call :meth:`discard` to drop it instead.
        """

        result = await self._message.dispatch(
            self._transport, self._codec, api_uri=self._api_uri
        )
        self._message = self._new_message()
        return result

    def discard(self) -> None:
        """Drop every pending command without sending it."""

        if not self._message.is_empty():
            LOGGER.info("Discarding pending commands for %s", self.mac)
        self._message = self._new_message()

    async def ear_positions(self) -> EarPositions:
        """Query the ear positions immediately, leaving the pending batch alone."""

        ear_message = self._new_message()
        ear_message.set_field("ears", "ok")
        await ear_message.dispatch(self._transport, self._codec, api_uri=self._api_uri)
        return ear_message.ear_positions

    async def aclose(self) -> None:
        await self._transport.aclose()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def say(self, text: Union[str, bytes]) -> None:
        """Queue text for the rabbit to speak."""

        self._message.set_field("tts", text)
        self._register(CommandKind.SAY)

    async def say_and_send(self, text: Union[str, bytes]) -> DispatchResult:
        self.say(text)
        return await self.send()

    def bark(self) -> None:
        """Queue a bark."""

        self.say(BARK_TEXT)

    async def bark_and_send(self) -> DispatchResult:
        self.bark()
        return await self.send()

    def move_ears(self, left: Optional[int] = None, right: Optional[int] = None) -> None:
        """Queue new ear positions between 0 and 16; ``None`` leaves an ear alone.

        Positions are not degrees and the direction of travel cannot be
        chosen. Use a choreography for finer control.
        """

        if left is not None:
            self._message.set_field("posleft", _ear_position(left, "left"))
            self._register(CommandKind.LEFT_EAR)
        if right is not None:
            self._message.set_field("posright", _ear_position(right, "right"))
            self._register(CommandKind.RIGHT_EAR)

    async def move_ears_and_send(
        self, left: Optional[int] = None, right: Optional[int] = None
    ) -> DispatchResult:
        self.move_ears(left, right)
        return await self.send()

    def choreography(self, program: Program, title: Optional[str] = None) -> None:
        """Queue a choreography built by ``program``.

        ``program`` receives a :class:`~nabaztag.choreography.ChoreographyCompiler`::

            def dance(chor):
                chor.group(lambda c: (c.set_led("middle", "green"), c.set_led("left", "red")))
                chor.set_led("right", "yellow")

            rabbit.choreography(dance, title="dance")
        """

        payload = compile_choreography(program)
        self._message.set_field("chortitle", title)
        self._message.set_field("chor", payload)
        self._register(CommandKind.CHOREOGRAPHY)

    async def choreography_and_send(
        self, program: Program, title: Optional[str] = None
    ) -> DispatchResult:
        self.choreography(program, title)
        return await self.send()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _new_message(self) -> CommandBatch:
        return CommandBatch(self._identity)

    def _register(self, kind: CommandKind) -> None:
        verifier = ResponseVerifier(kind)
        self._message.register_verifier(verifier.label, verifier)


def _ear_position(value: int, side: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"The {side} ear position must be an integer")
    if not EAR_POSITION_MIN <= value <= EAR_POSITION_MAX:
        raise ConfigurationError(
            f"The {side} ear position must be between {EAR_POSITION_MIN} "
            f"and {EAR_POSITION_MAX}, got {value}"
        )
    return value

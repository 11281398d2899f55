"""Character-set conversion between the caller and the service."""

from __future__ import annotations

import codecs
from typing import Union
from urllib.parse import quote_plus

from ..constants import DEFAULT_CALLER_CHARSET, SERVICE_ENCODING
from ..core import ConfigurationError


class ServiceCodec:
    """Converts outgoing text to the service charset and decodes replies.

    ``caller_charset`` is used to read byte strings supplied by the caller;
    ``str`` values are already decoded and go straight to the service charset.
    """

    def __init__(self, caller_charset: str = DEFAULT_CALLER_CHARSET) -> None:
        try:
            codecs.lookup(caller_charset)
        except LookupError as exc:
            raise ConfigurationError(
                f"Unknown caller charset: {caller_charset!r}"
            ) from exc
        self.caller_charset = caller_charset
        self.service_charset = SERVICE_ENCODING

    def encode_outbound(self, text: Union[str, bytes]) -> bytes:
        if isinstance(text, bytes):
            try:
                text = text.decode(self.caller_charset)
            except UnicodeDecodeError as exc:
                raise ConfigurationError(
                    f"Text is not valid {self.caller_charset}: {exc.reason}"
                ) from exc
        return text.encode(self.service_charset, errors="replace")

    def decode_inbound(self, payload: bytes) -> str:
        return payload.decode(self.service_charset, errors="replace")

    @staticmethod
    def escape(payload: bytes) -> str:
        return quote_plus(payload)

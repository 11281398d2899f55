"""Configuration loader for nabaztag."""

from __future__ import annotations

from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import constants


@dataclass(slots=True)
class DeviceConfig:
    mac: str = ""
    token: str = ""
    voice: Optional[str] = None


@dataclass(slots=True)
class ServiceConfig:
    api_uri: str = constants.API_URI
    timeout_seconds: float = constants.DEFAULT_TIMEOUT_SECONDS


@dataclass(slots=True)
class EncodingConfig:
    caller_charset: str = constants.DEFAULT_CALLER_CHARSET


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    path: Optional[Path] = None
    log_network: bool = False


@dataclass(slots=True)
class NabaztagConfig:
    device: DeviceConfig
    service: ServiceConfig
    encoding: EncodingConfig
    logging: LoggingConfig
    raw: ConfigParser
    path: Path


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_config(path: Optional[Path] = None) -> NabaztagConfig:
    """Load configuration from disk, applying defaults where necessary."""

    config_path = path or constants.DEFAULT_CONFIG_PATH
    parser = ConfigParser(interpolation=None)
    parser.read_dict(
        {
            "nabaztag": {
                "mac": "",
                "token": "",
            },
            "service": {
                "api_uri": constants.API_URI,
                "timeout_seconds": str(constants.DEFAULT_TIMEOUT_SECONDS),
            },
            "encoding": {
                "caller_charset": constants.DEFAULT_CALLER_CHARSET,
            },
            "logging": {
                "level": "INFO",
                "path": "",
                "log_network": "false",
            },
        }
    )

    if config_path.exists():
        parser.read(config_path, encoding="utf-8")

    device = DeviceConfig(
        mac=parser.get("nabaztag", "mac").strip(),
        token=parser.get("nabaztag", "token").strip(),
        voice=_optional(parser.get("nabaztag", "voice", fallback=None)),
    )

    try:
        timeout_value = parser.getfloat(
            "service", "timeout_seconds", fallback=constants.DEFAULT_TIMEOUT_SECONDS
        )
    except ValueError:
        timeout_value = constants.DEFAULT_TIMEOUT_SECONDS

    service = ServiceConfig(
        api_uri=parser.get("service", "api_uri"),
        timeout_seconds=max(0.1, timeout_value),
    )

    encoding = EncodingConfig(
        caller_charset=parser.get(
            "encoding", "caller_charset", fallback=constants.DEFAULT_CALLER_CHARSET
        ).strip()
        or constants.DEFAULT_CALLER_CHARSET,
    )

    log_path = _optional(parser.get("logging", "path", fallback=""))
    logging_config = LoggingConfig(
        level=parser.get("logging", "level", fallback="INFO"),
        path=Path(log_path).expanduser() if log_path else None,
        log_network=parser.getboolean("logging", "log_network", fallback=False),
    )

    return NabaztagConfig(
        device=device,
        service=service,
        encoding=encoding,
        logging=logging_config,
        raw=parser,
        path=config_path,
    )

"""Constants used across the nabaztag package."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "nabaztag"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.cfg"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / APP_NAME / DEFAULT_CONFIG_FILENAME

API_URI = "http://www.nabaztag.com/vl/FR/api.jsp?"
SERVICE_ENCODING = "iso-8859-1"
DEFAULT_CALLER_CHARSET = "utf-8"

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_TEMPO = 10

EAR_POSITION_MIN = 0
EAR_POSITION_MAX = 16

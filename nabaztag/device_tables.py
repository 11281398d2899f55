"""Symbolic names understood by the rabbit and their numeric codes.

LED indices, ear indices, ear directions and named colours are fixed by the
device. Voices are listed for reference only: the service may add voices at
any time, so voice names are forwarded without validation.
"""

from __future__ import annotations

from typing import Mapping

from .core import ConfigurationError

LED_COLORS: Mapping[str, tuple[int, int, int]] = {
    "red": (255, 0, 0),
    "orange": (255, 127, 0),
    "yellow": (255, 255, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "purple": (255, 0, 255),
    "dim_red": (127, 0, 0),
    "dim_orange": (127, 63, 0),
    "dim_yellow": (127, 127, 0),
    "dim_green": (0, 127, 0),
    "dim_blue": (0, 0, 127),
    "dim_purple": (127, 0, 127),
    "off": (0, 0, 0),
}

# The right ear is motor 0.
EARS: Mapping[str, tuple[int, ...]] = {
    "left": (1,),
    "right": (0,),
    "both": (0, 1),
}

LEDS: Mapping[str, int] = {
    "bottom": 0,
    "left": 1,
    "middle": 2,
    "right": 3,
    "top": 4,
}

EAR_DIRECTIONS: Mapping[str, int] = {
    "forward": 0,
    "backward": 1,
}

# The API only recognises lower-case voice names.
VOICES: Mapping[str, tuple[str, ...]] = {
    "fr": ("julie22k", "claire22s"),
    "en": ("graham22s", "lucy22s", "heather22k", "ryan22k", "aaron22s", "laura22s"),
}


def _lookup(table: Mapping[str, object], name: str, what: str):
    try:
        return table[name]
    except (KeyError, TypeError):
        known = ", ".join(sorted(table))
        raise ConfigurationError(
            f"Unknown {what} {name!r} (expected one of: {known})"
        ) from None


def color_rgb(name: str) -> tuple[int, int, int]:
    return _lookup(LED_COLORS, name, "LED colour")


def ear_indices(name: str) -> tuple[int, ...]:
    return _lookup(EARS, name, "ear")


def led_index(name: str) -> int:
    return _lookup(LEDS, name, "LED")


def ear_direction(name: str) -> int:
    return _lookup(EAR_DIRECTIONS, name, "ear direction")

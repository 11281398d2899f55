"""Choreography compiler turning ear and LED instructions into an API payload.

A choreography is a list of timed actions played by the rabbit at a given
tempo (events per second). Programs are plain callables that receive the
compiler and call its methods::

    def wave(chor: ChoreographyCompiler) -> None:
        chor.set_led("top", "red")
        chor.group(lambda c: (c.move_ear("both", 90), c.set_led("bottom", "off")))

    payload = compile_choreography(wave)

Every leaf call (``move_ear``, ``set_led``) is stamped with the current time
cursor and then advances it by one tick. Inside ``group`` or ``repeat_for``
the cursor stays put until the block finishes.
"""

from __future__ import annotations

import logging
from numbers import Integral, Real
from typing import Callable, Optional, Sequence

from . import device_tables
from .constants import DEFAULT_TEMPO
from .core import ActionKind, ActionRecord, ConfigurationError

LOGGER = logging.getLogger(__name__)

FIELDS_PER_ACTION = 6

Program = Callable[["ChoreographyCompiler"], object]


class ChoreographyCompiler:
    """Accumulates choreography actions for a single program."""

    def __init__(self) -> None:
        self._tempo: Optional[int] = None
        self._time_stamp = 0
        self._in_event = False
        self._actions: list[ActionRecord] = []

    @property
    def tempo(self) -> int:
        return self._tempo if self._tempo is not None else DEFAULT_TEMPO

    @property
    def time_stamp(self) -> int:
        return self._time_stamp

    @property
    def actions(self) -> list[ActionRecord]:
        return list(self._actions)

    # ------------------------------------------------------------------
    # Program instructions
    # ------------------------------------------------------------------
    def set_tempo(self, hz: int) -> None:
        """Set the tempo in events per second. The default is 10."""

        if not isinstance(hz, Integral) or isinstance(hz, bool) or hz < 1:
            raise ConfigurationError(f"Tempo must be a positive integer, got {hz!r}")
        self._tempo = int(hz)

    def move_ear(self, which: str, angle: float, direction: str = "forward") -> None:
        """Move the ``left``, ``right`` or ``both`` ears to ``angle`` degrees (0-180)."""

        ears = device_tables.ear_indices(which)
        direction_code = device_tables.ear_direction(direction)
        if not _is_number(angle):
            raise ConfigurationError(f"Ear angle must be a number, got {angle!r}")
        for ear in ears:
            self._append(ActionKind.MOTOR, ear, int(angle), 0, direction_code)
        self._skip(1)

    def set_led(self, which: str, *color) -> None:
        """Change the colour of an LED.

        The colour is either a name from ``LED_COLORS`` or an RGB triple given
        as three arguments or as one three-item sequence::

            chor.set_led("middle", "red")
            chor.set_led("top", 0, 0, 255)
            chor.set_led("bottom", (0, 0, 0))
        """

        led = device_tables.led_index(which)
        red, green, blue = _resolve_color(color)
        self._append(ActionKind.LED, led, red, green, blue)
        self._skip(1)

    def group(self, fn: Program) -> None:
        """Run ``fn`` as one simultaneous event lasting a single tick."""

        self.repeat_for(1, fn)

    def repeat_for(self, duration: int, fn: Program) -> None:
        """Run ``fn`` as one simultaneous event lasting ``duration`` ticks."""

        if (
            not isinstance(duration, Integral)
            or isinstance(duration, bool)
            or duration < 0
        ):
            raise ConfigurationError(
                f"Duration must be a non-negative integer, got {duration!r}"
            )
        previous = self._in_event
        self._in_event = True
        try:
            fn(self)
        finally:
            self._in_event = previous
        self._skip(int(duration))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def emit(self) -> str:
        """Return the ``tempo,ts,kind,p1,p2,p3,p4,...`` payload."""

        fields = [str(self.tempo)]
        for action in self._actions:
            fields.extend(str(value) for value in action.fields())
        return ",".join(fields)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _append(self, kind: ActionKind, p1: int, p2: int, p3: int, p4: int) -> None:
        self._actions.append(
            ActionRecord(
                timestamp=self._time_stamp, kind=kind, p1=p1, p2=p2, p3=p3, p4=p4
            )
        )

    def _skip(self, duration: int) -> None:
        if not self._in_event:
            self._time_stamp += duration


def _resolve_color(color: Sequence) -> tuple[int, int, int]:
    if len(color) == 1 and isinstance(color[0], (tuple, list)):
        color = tuple(color[0])
    if len(color) == 3 and all(_is_number(value) for value in color):
        red, green, blue = color
        return int(red), int(green), int(blue)
    if not color:
        raise ConfigurationError("LED colour is required")
    return device_tables.color_rgb(color[0])


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def compile_choreography(program: Program) -> str:
    """Run ``program`` against a fresh compiler and return its payload."""

    compiler = ChoreographyCompiler()
    program(compiler)
    payload = compiler.emit()
    LOGGER.debug(
        "Compiled choreography: %d actions over %d ticks",
        len(compiler.actions),
        compiler.time_stamp,
    )
    return payload


def parse_choreography(payload: str) -> tuple[int, list[ActionRecord]]:
    """Decode a payload produced by :func:`compile_choreography`."""

    parts = [part.strip() for part in payload.split(",")]
    try:
        values = [int(part) for part in parts]
    except ValueError as exc:
        raise ConfigurationError(f"Malformed choreography payload: {exc}") from exc

    tempo, body = values[0], values[1:]
    if len(body) % FIELDS_PER_ACTION:
        raise ConfigurationError(
            f"Choreography payload has {len(body)} action fields, "
            f"expected a multiple of {FIELDS_PER_ACTION}"
        )

    actions: list[ActionRecord] = []
    for offset in range(0, len(body), FIELDS_PER_ACTION):
        timestamp, kind_code, p1, p2, p3, p4 = body[offset : offset + FIELDS_PER_ACTION]
        try:
            kind = ActionKind(kind_code)
        except ValueError:
            raise ConfigurationError(f"Unknown action kind {kind_code}") from None
        actions.append(
            ActionRecord(timestamp=timestamp, kind=kind, p1=p1, p2=p2, p3=p3, p4=p4)
        )
    return tempo, actions

"""Domain models for device identity, choreography actions and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


@dataclass(frozen=True, slots=True)
class DeviceIdentity:
    mac: str
    token: str
    voice: Optional[str] = None


class ActionKind(IntEnum):
    MOTOR = 0
    LED = 1


@dataclass(frozen=True, slots=True)
class ActionRecord:
    """One timed choreography action.

    For ``MOTOR`` the parameters are (ear index, angle, 0, direction); for
    ``LED`` they are (led index, red, green, blue).
    """

    timestamp: int
    kind: ActionKind
    p1: int
    p2: int
    p3: int
    p4: int

    def fields(self) -> tuple[int, ...]:
        return (self.timestamp, int(self.kind), self.p1, self.p2, self.p3, self.p4)


@dataclass(frozen=True, slots=True)
class EarPositions:
    left: Optional[int] = None
    right: Optional[int] = None

    @property
    def is_known(self) -> bool:
        return self.left is not None and self.right is not None


@dataclass(slots=True)
class DispatchResult:
    response: str
    ear_positions: EarPositions = field(default_factory=EarPositions)

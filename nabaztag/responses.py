"""Response verification and decoding.

The service answers in French or English depending on how the rabbit is
configured, so every pattern accepts both wordings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Pattern

from .core import EarPositions


class CommandKind(str, Enum):
    SAY = "say"
    LEFT_EAR = "left_ear"
    RIGHT_EAR = "right_ear"
    CHOREOGRAPHY = "choreography"


SUCCESS_PATTERNS: Mapping[CommandKind, Pattern[str]] = {
    CommandKind.SAY: re.compile(
        r"Votre texte a bien été transmis|Your text was forwarded"
    ),
    CommandKind.LEFT_EAR: re.compile(
        r"Votre changement d'oreilles gauche a été transmis"
        r"|Your left change of ears was transmitted"
    ),
    CommandKind.RIGHT_EAR: re.compile(
        r"Votre changement d'oreilles droit a été transmis"
        r"|Your right change of ears was transmitted"
    ),
    CommandKind.CHOREOGRAPHY: re.compile(
        r"Votre chorégraphie a bien été transmis|Your choreography was forwarded"
    ),
}

# Labels reported in ServiceError messages.
COMMAND_LABELS: Mapping[CommandKind, str] = {
    CommandKind.SAY: "Speech",
    CommandKind.LEFT_EAR: "Left ear",
    CommandKind.RIGHT_EAR: "Right ear",
    CommandKind.CHOREOGRAPHY: "Choreography",
}

EAR_POSITION_PATTERNS: Mapping[str, Pattern[str]] = {
    "left": re.compile(r"(?:Position gauche|Left position) = (-?\d+)"),
    "right": re.compile(r"(?:Position droite|Right position) = (-?\d+)"),
}

_WIDE_GAP = re.compile(r"\s{2,}")


@dataclass(frozen=True, slots=True)
class ResponseVerifier:
    """Checks a response for the success message of one command kind."""

    kind: CommandKind

    @property
    def label(self) -> str:
        return COMMAND_LABELS[self.kind]

    def __call__(self, response: str) -> bool:
        return SUCCESS_PATTERNS[self.kind].search(response) is not None


class ResponseDecoder:
    """Splits service responses into lines and reads ear positions."""

    @staticmethod
    def normalize(text: str) -> str:
        """Collapse the wide padding between fields into line breaks."""

        return "\n".join(_WIDE_GAP.split(text))

    @classmethod
    def lines(cls, text: str) -> list[str]:
        return [line for line in cls.normalize(text).split("\n") if line]

    @staticmethod
    def extract_ear_positions(text: str) -> EarPositions:
        """Return both ear positions, or an empty result unless both are present."""

        left = _search_int(EAR_POSITION_PATTERNS["left"], text)
        right = _search_int(EAR_POSITION_PATTERNS["right"], text)
        if left is None or right is None:
            return EarPositions()
        return EarPositions(left=left, right=right)


def _search_int(pattern: Pattern[str], text: str) -> Optional[int]:
    match = pattern.search(text)
    if match is None:
        return None
    return int(match.group(1))

"""Tests for response verification and decoding."""

import pytest

from nabaztag.core import EarPositions
from nabaztag.responses import (
    CommandKind,
    ResponseDecoder,
    ResponseVerifier,
)


@pytest.mark.parametrize(
    "kind, response",
    [
        (CommandKind.SAY, "Votre texte a bien été transmis"),
        (CommandKind.SAY, "Your text was forwarded"),
        (CommandKind.LEFT_EAR, "Votre changement d'oreilles gauche a été transmis"),
        (CommandKind.LEFT_EAR, "Your left change of ears was transmitted"),
        (CommandKind.RIGHT_EAR, "Votre changement d'oreilles droit a été transmis"),
        (CommandKind.RIGHT_EAR, "Your right change of ears was transmitted"),
        (CommandKind.CHOREOGRAPHY, "Votre chorégraphie a bien été transmis"),
        (CommandKind.CHOREOGRAPHY, "Your choreography was forwarded"),
    ],
)
def test_verifier_accepts_both_languages(kind, response):
    verifier = ResponseVerifier(kind)

    assert verifier(f"Header\n{response}\nFooter")


def test_verifier_rejects_unrelated_response():
    verifier = ResponseVerifier(CommandKind.SAY)

    assert not verifier("Your left change of ears was transmitted")
    assert verifier.label == "Speech"


def test_verifiers_are_comparable_values():
    assert ResponseVerifier(CommandKind.SAY) == ResponseVerifier(CommandKind.SAY)
    assert ResponseVerifier(CommandKind.SAY) != ResponseVerifier(CommandKind.LEFT_EAR)


def test_normalize_turns_wide_gaps_into_line_breaks():
    raw = "Your text was forwarded     Left position = 7\t\t\nRight position = 2 end"

    assert ResponseDecoder.normalize(raw) == (
        "Your text was forwarded\nLeft position = 7\nRight position = 2 end"
    )
    assert ResponseDecoder.lines("  first    second  ") == ["first", "second"]


def test_extract_ear_positions_english():
    text = "Left position = 7\nRight position = -2"

    assert ResponseDecoder.extract_ear_positions(text) == EarPositions(7, -2)


def test_extract_ear_positions_french():
    text = "Position gauche = 12\nPosition droite = 0"

    positions = ResponseDecoder.extract_ear_positions(text)

    assert positions == EarPositions(left=12, right=0)
    assert positions.is_known


def test_extract_ear_positions_missing_side_is_empty():
    positions = ResponseDecoder.extract_ear_positions("Left position = 7")

    assert positions == EarPositions()
    assert not positions.is_known

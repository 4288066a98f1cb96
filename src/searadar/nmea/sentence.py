"""NMEA-0183 sentence framing and named-field decoding.

A sentence looks like ``$RATTM,23,13.88,...,X*42``. Everything between
offset 3 (after ``$`` and the 2-letter talker id) and the first ``*`` is
split on commas; field 0 is the 3-letter sentence type code.

:class:`TTMFields` and :class:`RSDFields` hold the only position-to-meaning
mapping in the package.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from searadar.core.types import SentenceType

_PAYLOAD_OFFSET = 3
_CHECKSUM_DELIMITER = "*"
_FIELD_SEPARATOR = ","

# ASCII digits only: no underscores, exponents, whitespace, nan or inf
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


class SentenceFormatError(ValueError):
    """Base class for structurally malformed sentences."""


class SentenceFramingError(SentenceFormatError):
    """Sentence is too short or lacks the ``*`` checksum delimiter."""


class SentenceFieldError(SentenceFormatError):
    """A required field is missing or cannot be parsed."""

    def __init__(self, sentence_type: str, field: str, index: int, raw: str | None) -> None:
        self.sentence_type = sentence_type
        self.field = field
        self.index = index
        self.raw = raw
        if raw is None:
            detail = "missing"
        else:
            detail = f"invalid value {raw!r}"
        super().__init__(f"{sentence_type} field {index} ({field}): {detail}")


def extract_fields(sentence: str) -> list[str]:
    """Split the payload of *sentence* into its comma-separated fields.

    Raises:
        SentenceFramingError: If the sentence is shorter than 3 characters,
            has no ``*`` or its first ``*`` lies before offset 3.
    """
    if len(sentence) < _PAYLOAD_OFFSET:
        raise SentenceFramingError(
            f"Sentence too short ({len(sentence)} chars): {sentence!r}"
        )
    end = sentence.find(_CHECKSUM_DELIMITER)
    if end < 0:
        raise SentenceFramingError(f"No '*' checksum delimiter in sentence: {sentence!r}")
    if end < _PAYLOAD_OFFSET:
        raise SentenceFramingError(
            f"'*' at offset {end} precedes the sentence type: {sentence!r}"
        )
    return sentence[_PAYLOAD_OFFSET:end].strip().split(_FIELD_SEPARATOR)


def peek_sentence_type(sentence: str) -> SentenceType | None:
    """Return the sentence type without decoding, or None if unsupported.

    Raises:
        SentenceFramingError: On malformed framing.
    """
    code = extract_fields(sentence)[0]
    try:
        return SentenceType(code)
    except ValueError:
        return None


# ------------------------------------------------------------------
# Field accessors
# ------------------------------------------------------------------


def _raw(fields: list[str], index: int, sentence_type: str, name: str) -> str:
    if index >= len(fields):
        raise SentenceFieldError(sentence_type, name, index, None)
    return fields[index]


def _int(fields: list[str], index: int, sentence_type: str, name: str) -> int:
    raw = _raw(fields, index, sentence_type, name)
    if _INT_PATTERN.fullmatch(raw) is None:
        raise SentenceFieldError(sentence_type, name, index, raw)
    return int(raw)


def _float(fields: list[str], index: int, sentence_type: str, name: str) -> float:
    raw = _raw(fields, index, sentence_type, name)
    if _DECIMAL_PATTERN.fullmatch(raw) is None:
        raise SentenceFieldError(sentence_type, name, index, raw)
    return float(raw)


# ------------------------------------------------------------------
# TTM — Tracked Target Message
# ------------------------------------------------------------------


@dataclass(frozen=True)
class TTMFields:
    """Named TTM fields.

    Field 4 (bearing reference), 7-10 and 13+ are not used.
    """

    target_number: int      # [1]
    distance: float          # [2] nautical miles
    bearing: float           # [3] degrees
    speed: float             # [5] knots
    course: float            # [6] degrees
    iff_code: str            # [11] b / p / d
    status_code: str         # [12] L / Q / T

    @classmethod
    def from_fields(cls, fields: list[str]) -> TTMFields:
        t = SentenceType.TTM.value
        return cls(
            target_number=_int(fields, 1, t, "target_number"),
            distance=_float(fields, 2, t, "distance"),
            bearing=_float(fields, 3, t, "bearing"),
            speed=_float(fields, 5, t, "speed"),
            course=_float(fields, 6, t, "course"),
            iff_code=_raw(fields, 11, t, "iff"),
            status_code=_raw(fields, 12, t, "status"),
        )


# ------------------------------------------------------------------
# RSD — Radar System Data
# ------------------------------------------------------------------


@dataclass(frozen=True)
class RSDFields:
    """Named RSD fields. Fields 5-8 (second marker) are not used."""

    initial_distance: float          # [1]
    initial_bearing: float           # [2]
    moving_circle_of_distance: float  # [3]
    bearing: float                   # [4]
    distance_from_ship: float        # [9]
    bearing2: float                  # [10]
    distance_scale: float            # [11]
    distance_unit: str               # [12]
    display_orientation: str         # [13]
    working_mode: str                # [14]

    @classmethod
    def from_fields(cls, fields: list[str]) -> RSDFields:
        t = SentenceType.RSD.value
        return cls(
            initial_distance=_float(fields, 1, t, "initial_distance"),
            initial_bearing=_float(fields, 2, t, "initial_bearing"),
            moving_circle_of_distance=_float(fields, 3, t, "moving_circle_of_distance"),
            bearing=_float(fields, 4, t, "bearing"),
            distance_from_ship=_float(fields, 9, t, "distance_from_ship"),
            bearing2=_float(fields, 10, t, "bearing2"),
            distance_scale=_float(fields, 11, t, "distance_scale"),
            distance_unit=_raw(fields, 12, t, "distance_unit"),
            display_orientation=_raw(fields, 13, t, "display_orientation"),
            working_mode=_raw(fields, 14, t, "working_mode"),
        )

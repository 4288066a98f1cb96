"""MR-231-3 field range validation for TTM and RSD messages."""

from __future__ import annotations

from typing import Any

from searadar.nmea.messages import (
    InvalidMessage,
    RadarSystemDataMessage,
    TrackedTargetMessage,
)


class MessageValidator:
    """Validates decoded messages against the MR-231-3 operating ranges.

    TTM checks run in a fixed order and stop at the first failure. The
    wording of each message is consumed downstream and must not change,
    including the target-number check that reports itself as "distance".
    """

    TARGET_NUMBER_MIN, TARGET_NUMBER_MAX = 1, 50
    DISTANCE_MIN, DISTANCE_MAX = 0.0, 32.0
    BEARING_MIN, BEARING_MAX = 0.0, 359.9
    SPEED_MIN, SPEED_MAX = 0.0, 90.0
    COURSE_MIN, COURSE_MAX = 0.0, 359.9

    DISTANCE_SCALES: tuple[float, ...] = (
        0.125, 0.25, 0.5, 1.5, 3.0, 6.0, 12.0, 24.0, 48.0, 96.0,
    )

    # ------------------------------------------------------------------

    @classmethod
    def validate_ttm(cls, msg: TrackedTargetMessage) -> InvalidMessage | None:
        checks = (
            (msg.target_number, cls.TARGET_NUMBER_MIN, cls.TARGET_NUMBER_MAX,
             "TTM message. Wrong distance (01-50): "),
            (msg.distance, cls.DISTANCE_MIN, cls.DISTANCE_MAX,
             "TTM message. Wrong distance (0.0-32.0): "),
            (msg.bearing, cls.BEARING_MIN, cls.BEARING_MAX,
             "TTM message. Wrong bearing (0.0-359.9): "),
            (msg.speed, cls.SPEED_MIN, cls.SPEED_MAX,
             "TTM message. Wrong speed (0.0-90.0): "),
            (msg.course, cls.COURSE_MIN, cls.COURSE_MAX,
             "TTM message. Wrong course (0.0-359.9): "),
        )
        for value, min_val, max_val, prefix in checks:
            if cls._out_of_range(value, min_val, max_val):
                return InvalidMessage(info_msg=f"{prefix}{value}")
        return None

    @classmethod
    def validate_rsd(cls, msg: RadarSystemDataMessage) -> InvalidMessage | None:
        if msg.distance_scale not in cls.DISTANCE_SCALES:
            return InvalidMessage(
                info_msg=f"RSD message. Wrong distance scale value: {msg.distance_scale}"
            )
        return None

    @classmethod
    def validate(cls, msg: Any) -> InvalidMessage | None:
        """Auto-dispatch validation based on message type."""
        if isinstance(msg, TrackedTargetMessage):
            return cls.validate_ttm(msg)
        if isinstance(msg, RadarSystemDataMessage):
            return cls.validate_rsd(msg)
        raise TypeError(f"Unknown message type: {type(msg)}")

    # ------------------------------------------------------------------

    @staticmethod
    def _out_of_range(value: int | float, min_val: int | float, max_val: int | float) -> bool:
        return not (min_val <= value <= max_val)

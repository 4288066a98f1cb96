"""Decoded MR-231-3 station messages.

Frozen dataclasses for the three record kinds the converter emits:
TrackedTargetMessage (TTM), RadarSystemDataMessage (RSD) and
InvalidMessage. Each carries a ``kind`` discriminator. Receipt timestamps
are excluded from equality, so decoding the same sentence twice yields
equal records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Union

from searadar.core.types import IFF, MessageKind, TargetStatus, TargetType


@dataclass(frozen=True)
class TrackedTargetMessage:
    """Tracked target report decoded from a TTM sentence."""

    kind: MessageKind = field(default=MessageKind.TRACKED_TARGET, init=False)

    target_number: int = 0          # 1-50
    distance: float = 0.0           # nautical miles, 0.0-32.0
    bearing: float = 0.0            # degrees, 0.0-359.9
    course: float = 0.0             # degrees, 0.0-359.9
    speed: float = 0.0              # knots, 0.0-90.0
    status: TargetStatus = TargetStatus.UNRELIABLE_DATA
    iff: IFF = IFF.UNKNOWN
    type: TargetType = TargetType.UNKNOWN

    # Receipt time at decode; the sentence itself carries none
    msg_time: int = field(default=0, compare=False)  # epoch milliseconds
    msg_rec_time: datetime | None = field(default=None, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "target_number": self.target_number,
            "distance": self.distance,
            "bearing": self.bearing,
            "course": self.course,
            "speed": self.speed,
            "status": self.status.value,
            "iff": self.iff.value,
            "type": self.type.value,
            "msg_time": self.msg_time,
            "msg_rec_time": self.msg_rec_time.isoformat() if self.msg_rec_time else None,
        }


@dataclass(frozen=True)
class RadarSystemDataMessage:
    """Radar configuration/state report decoded from an RSD sentence."""

    kind: MessageKind = field(default=MessageKind.RADAR_SYSTEM_DATA, init=False)

    initial_distance: float = 0.0
    initial_bearing: float = 0.0
    moving_circle_of_distance: float = 0.0
    bearing: float = 0.0
    distance_from_ship: float = 0.0
    bearing2: float = 0.0
    distance_scale: float = 0.0
    distance_unit: str = ""
    display_orientation: str = ""
    working_mode: str = ""

    msg_rec_time: datetime | None = field(default=None, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "initial_distance": self.initial_distance,
            "initial_bearing": self.initial_bearing,
            "moving_circle_of_distance": self.moving_circle_of_distance,
            "bearing": self.bearing,
            "distance_from_ship": self.distance_from_ship,
            "bearing2": self.bearing2,
            "distance_scale": self.distance_scale,
            "distance_unit": self.distance_unit,
            "display_orientation": self.display_orientation,
            "working_mode": self.working_mode,
            "msg_rec_time": self.msg_rec_time.isoformat() if self.msg_rec_time else None,
        }


@dataclass(frozen=True)
class InvalidMessage:
    """Well-formed sentence whose values failed domain validation."""

    kind: MessageKind = field(default=MessageKind.INVALID, init=False)
    info_msg: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "info_msg": self.info_msg}


StationMessage = Union[TrackedTargetMessage, RadarSystemDataMessage, InvalidMessage]

"""Core enumerations for decoded MR-231-3 radar messages."""

from __future__ import annotations

import enum


class SentenceType(enum.Enum):
    """NMEA-0183 sentence types understood by the MR-231-3 converter."""

    TTM = "TTM"  # Tracked Target Message
    RSD = "RSD"  # Radar System Data


class MessageKind(enum.Enum):
    """Discriminator carried by every decoded record."""

    TRACKED_TARGET = "tracked_target"
    RADAR_SYSTEM_DATA = "radar_system_data"
    INVALID = "invalid"


class TargetStatus(enum.Enum):
    LOST = "lost"
    UNRELIABLE_DATA = "unreliable_data"
    TRACKED = "tracked"


class IFF(enum.Enum):
    """Identification Friend or Foe classification."""

    FRIEND = "friend"
    FOE = "foe"
    UNKNOWN = "unknown"


class TargetType(enum.Enum):
    """Target classification.

    The MR-231-3 TTM sentence carries no usable type code, so decoded
    targets are always UNKNOWN.
    """

    UNKNOWN = "unknown"

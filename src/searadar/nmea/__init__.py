"""MR-231-3 NMEA-0183 sentence decoding.

Decodes TTM (Tracked Target Message) and RSD (Radar System Data)
sentences into typed station messages with range validation.
"""

from searadar.nmea.config import ConverterConfig
from searadar.nmea.converter import Mr231_3Converter
from searadar.nmea.messages import (
    InvalidMessage,
    RadarSystemDataMessage,
    StationMessage,
    TrackedTargetMessage,
)
from searadar.nmea.sentence import (
    RSDFields,
    SentenceFieldError,
    SentenceFormatError,
    SentenceFramingError,
    TTMFields,
    extract_fields,
    peek_sentence_type,
)
from searadar.nmea.station import Mr231_3StationType
from searadar.nmea.validator import MessageValidator

__all__ = [
    "ConverterConfig",
    "InvalidMessage",
    "MessageValidator",
    "Mr231_3Converter",
    "Mr231_3StationType",
    "RSDFields",
    "RadarSystemDataMessage",
    "SentenceFieldError",
    "SentenceFormatError",
    "SentenceFramingError",
    "StationMessage",
    "TTMFields",
    "TrackedTargetMessage",
    "extract_fields",
    "peek_sentence_type",
]

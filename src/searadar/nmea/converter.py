"""Mr231_3Converter — TTM/RSD sentence decoder for the MR-231-3 radar.

Turns one framed NMEA-0183 line into a list of station messages:

    $RATTM,23,13.88,137.2,T,63.8,094.3,T,9.2,79.4,N,b,T,,783344,X*42
    $RARSD,36.5,331.4,8.4,320.6,,,,,11.6,185.3,96.0,N,N,S*33

Well-formed sentences that fail range validation come back as an
InvalidMessage. Malformed framing raises SentenceFormatError. Other
sentence types produce an empty list. The checksum is not verified.
"""

from __future__ import annotations

import logging
from datetime import datetime

from searadar.core.clock import Clock, SystemClock
from searadar.core.types import IFF, SentenceType, TargetStatus, TargetType
from searadar.nmea.config import ConverterConfig
from searadar.nmea.messages import (
    RadarSystemDataMessage,
    StationMessage,
    TrackedTargetMessage,
)
from searadar.nmea.sentence import (
    RSDFields,
    SentenceFormatError,
    SentenceFramingError,
    TTMFields,
    extract_fields,
)
from searadar.nmea.validator import MessageValidator

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[str, TargetStatus] = {
    "L": TargetStatus.LOST,
    "Q": TargetStatus.UNRELIABLE_DATA,
    "T": TargetStatus.TRACKED,
}

_IFF_CODES: dict[str, IFF] = {
    "b": IFF.FRIEND,
    "p": IFF.FOE,
    "d": IFF.UNKNOWN,
}


class Mr231_3Converter:
    """Stateless TTM/RSD converter.

    Only configuration and the clock are stored on the instance, so one
    converter can be shared across threads.

    Args:
        config: Converter configuration. Defaults to ``ConverterConfig()``.
        clock: Receipt-time source, read once per sentence. Defaults to
            ``SystemClock()``.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config or ConverterConfig()
        self._clock = clock if clock is not None else SystemClock()

    # ------------------------------------------------------------------

    def convert(self, sentence: str | bytes) -> list[StationMessage]:
        """Decode one sentence into zero or one station messages.

        Raises:
            SentenceFramingError: If the sentence is shorter than 3
                characters, has no ``*`` delimiter, or is bytes that do
                not decode with the configured encoding.
            SentenceFieldError: If a required TTM/RSD field is missing or
                not a number.
        """
        try:
            if isinstance(sentence, (bytes, bytearray)):
                try:
                    sentence = bytes(sentence).decode(self._config.encoding)
                except UnicodeDecodeError as exc:
                    raise SentenceFramingError(
                        f"Sentence is not valid {self._config.encoding}: {exc}"
                    ) from exc

            fields = extract_fields(sentence)
            msg_type = fields[0]

            if msg_type == SentenceType.TTM.value:
                msg: StationMessage = self._build_ttm(TTMFields.from_fields(fields))
            elif msg_type == SentenceType.RSD.value:
                msg = self._build_rsd(RSDFields.from_fields(fields))
            else:
                logger.debug("Ignoring unsupported sentence type %r", msg_type)
                return []
        except SentenceFormatError as exc:
            logger.debug("Malformed sentence: %s", exc)
            raise

        invalid = MessageValidator.validate(msg)
        if invalid is not None:
            level = logging.WARNING if self._config.log_invalid else logging.DEBUG
            logger.log(level, "%s", invalid.info_msg)
            return [invalid]
        return [msg]

    # ------------------------------------------------------------------

    def _build_ttm(self, f: TTMFields) -> TrackedTargetMessage:
        now = self._clock.now()
        return TrackedTargetMessage(
            target_number=f.target_number,
            distance=f.distance,
            bearing=f.bearing,
            course=f.course,
            speed=f.speed,
            status=_STATUS_CODES.get(f.status_code, TargetStatus.UNRELIABLE_DATA),
            iff=_IFF_CODES.get(f.iff_code, IFF.UNKNOWN),
            type=TargetType.UNKNOWN,
            msg_time=int(now * 1000),
            msg_rec_time=datetime.fromtimestamp(now),
        )

    def _build_rsd(self, f: RSDFields) -> RadarSystemDataMessage:
        return RadarSystemDataMessage(
            initial_distance=f.initial_distance,
            initial_bearing=f.initial_bearing,
            moving_circle_of_distance=f.moving_circle_of_distance,
            bearing=f.bearing,
            distance_from_ship=f.distance_from_ship,
            bearing2=f.bearing2,
            distance_scale=f.distance_scale,
            distance_unit=f.distance_unit,
            display_orientation=f.display_orientation,
            working_mode=f.working_mode,
            msg_rec_time=datetime.fromtimestamp(self._clock.now()),
        )

    # ------------------------------------------------------------------

    @property
    def config(self) -> ConverterConfig:
        return self._config

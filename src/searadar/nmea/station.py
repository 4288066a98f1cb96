"""MR-231-3 station type: identification constants and converter factory."""

from __future__ import annotations

from typing import Any

from searadar.nmea.config import ConverterConfig
from searadar.nmea.converter import Mr231_3Converter


class Mr231_3StationType:
    """Station type for the MR-231-3 navigation radar.

    Sentences arrive as text lines terminated by either delimiter in
    ``LINE_DELIMITERS``; splitting the byte stream is left to the host.
    """

    STATION_TYPE = "МР-231-3"
    CODEC_NAME = "mr231-3"
    LINE_DELIMITERS: tuple[str, ...] = ("\n", "\r\n")

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config or ConverterConfig(
            station_type=self.STATION_TYPE,
            codec_name=self.CODEC_NAME,
        )

    def create_converter(self) -> Mr231_3Converter:
        return Mr231_3Converter(self._config)

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @classmethod
    def from_config(cls, cfg: Any) -> Mr231_3StationType:
        """Build from OmegaConf or dict (the ``converter`` section)."""
        return cls(ConverterConfig.from_omegaconf(cfg))

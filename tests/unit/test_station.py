"""Tests for ConverterConfig and Mr231_3StationType."""

from __future__ import annotations

from omegaconf import OmegaConf

from searadar.nmea.config import ConverterConfig
from searadar.nmea.converter import Mr231_3Converter
from searadar.nmea.messages import TrackedTargetMessage
from searadar.nmea.station import Mr231_3StationType


# ===========================================================================
# ConverterConfig
# ===========================================================================


class TestConverterConfigDefaults:
    def test_defaults(self):
        cfg = ConverterConfig()
        assert cfg.station_type == "МР-231-3"
        assert cfg.codec_name == "mr231-3"
        assert cfg.encoding == "utf-8"
        assert cfg.log_invalid is False


class TestConverterConfigFromOmegaconf:
    def test_from_none(self):
        assert ConverterConfig.from_omegaconf(None) == ConverterConfig()

    def test_from_empty_dict(self):
        cfg = ConverterConfig.from_omegaconf({})
        assert cfg.encoding == "utf-8"

    def test_from_plain_dict(self):
        cfg = ConverterConfig.from_omegaconf({"encoding": "cp1251", "log_invalid": True})
        assert cfg.encoding == "cp1251"
        assert cfg.log_invalid is True
        assert cfg.codec_name == "mr231-3"

    def test_from_dictconfig(self):
        raw = OmegaConf.create({
            "station_type": "MR-231-3 bridge",
            "codec_name": "custom",
            "encoding": "latin-1",
            "log_invalid": True,
        })
        cfg = ConverterConfig.from_omegaconf(raw)
        assert cfg.station_type == "MR-231-3 bridge"
        assert cfg.codec_name == "custom"
        assert cfg.encoding == "latin-1"
        assert cfg.log_invalid is True

    def test_from_default_yaml(self, default_config):
        cfg = ConverterConfig.from_omegaconf(default_config.searadar.converter)
        assert cfg == ConverterConfig()


# ===========================================================================
# Mr231_3StationType
# ===========================================================================


class TestStationType:
    def test_constants(self):
        assert Mr231_3StationType.STATION_TYPE == "МР-231-3"
        assert Mr231_3StationType.CODEC_NAME == "mr231-3"
        assert Mr231_3StationType.LINE_DELIMITERS == ("\n", "\r\n")

    def test_create_converter(self, correct_ttm):
        conv = Mr231_3StationType().create_converter()
        assert isinstance(conv, Mr231_3Converter)
        assert isinstance(conv.convert(correct_ttm)[0], TrackedTargetMessage)

    def test_converters_are_independent(self):
        station = Mr231_3StationType()
        assert station.create_converter() is not station.create_converter()

    def test_default_config(self):
        station = Mr231_3StationType()
        assert station.config.station_type == Mr231_3StationType.STATION_TYPE
        assert station.config.codec_name == Mr231_3StationType.CODEC_NAME

    def test_from_config(self):
        station = Mr231_3StationType.from_config(OmegaConf.create({"log_invalid": True}))
        conv = station.create_converter()
        assert conv.config.log_invalid is True

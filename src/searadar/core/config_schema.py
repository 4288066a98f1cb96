"""Pydantic schema for configuration validation.

Mirrors the YAML structure in config/default.yaml. Used when
``validate=True`` is passed to ``SearadarConfig.load()``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SystemConfig(BaseModel):
    name: str = "SEARADAR"
    version: str = "0.1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    validate_config: bool = False
    log_file: str | None = None
    log_json: bool = False


class ConverterSectionConfig(BaseModel):
    station_type: str = "МР-231-3"
    codec_name: str = Field(default="mr231-3", min_length=1)
    encoding: str = Field(default="utf-8", min_length=1)
    log_invalid: bool = False


class SearadarRootConfig(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    converter: ConverterSectionConfig = Field(default_factory=ConverterSectionConfig)

    model_config = {"extra": "allow"}


class SearadarConfigSchema(BaseModel):
    """Top-level wrapper matching YAML root key ``searadar:``."""

    searadar: SearadarRootConfig

    model_config = {"extra": "allow"}


def validate_config(cfg_dict: dict) -> SearadarConfigSchema:
    """Validate a raw config dict (e.g. from OmegaConf) against the schema.

    Raises ``pydantic.ValidationError`` on invalid config.
    """
    return SearadarConfigSchema.model_validate(cfg_dict)

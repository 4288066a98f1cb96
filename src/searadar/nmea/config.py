"""Sentence converter configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from omegaconf import OmegaConf


@dataclass
class ConverterConfig:
    """MR-231-3 converter configuration."""

    station_type: str = "МР-231-3"
    codec_name: str = "mr231-3"
    encoding: str = "utf-8"
    log_invalid: bool = False

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> ConverterConfig:
        """Build from OmegaConf dict or plain dict."""
        if cfg is None:
            return cls()

        if OmegaConf.is_config(cfg):
            cfg = OmegaConf.to_container(cfg, resolve=True)

        if not isinstance(cfg, dict):
            cfg = dict(cfg)

        return cls(
            station_type=str(cfg.get("station_type", "МР-231-3")),
            codec_name=str(cfg.get("codec_name", "mr231-3")),
            encoding=str(cfg.get("encoding", "utf-8")),
            log_invalid=bool(cfg.get("log_invalid", False)),
        )

"""YAML configuration for the decoder's host application.

The file has a single ``searadar:`` root with ``system`` (logging) and
``converter`` sections. Values missing from the file fall back to the
pydantic schema defaults, and ``key=value`` dot-list overrides (as a host
would collect them from its own command line) are merged last.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

from searadar.core.config_schema import SearadarConfigSchema, validate_config
from searadar.nmea.config import ConverterConfig


class SearadarConfig:
    """Layered config: schema defaults, then the YAML file, then overrides."""

    def __init__(
        self,
        config_path: str | Path = "config/default.yaml",
        overrides: Sequence[str] = (),
    ):
        self._config_path = Path(config_path)
        self._overrides = list(overrides)
        self._config: DictConfig | None = None

    def load(self, validate: bool = False) -> DictConfig:
        """Read the YAML file and merge it over the schema defaults.

        Args:
            validate: Check the merged result against the pydantic schema
                and raise ``pydantic.ValidationError`` on bad values. Also
                enabled by ``searadar.system.validate_config`` in the file.
        """
        if not self._config_path.exists():
            raise FileNotFoundError(f"Config not found: {self._config_path}")

        defaults = OmegaConf.create(
            SearadarConfigSchema.model_validate({"searadar": {}}).model_dump()
        )
        merged = OmegaConf.merge(
            defaults,
            OmegaConf.load(self._config_path),
            OmegaConf.from_dotlist(self._overrides),
        )
        assert isinstance(merged, DictConfig)

        if validate or merged.searadar.system.validate_config:
            validate_config(OmegaConf.to_container(merged, resolve=True))

        self._config = merged
        return merged

    def override(self, dotpath: str, value: Any) -> None:
        """Set one value after loading, e.g. ``("searadar.converter.encoding", "cp1251")``."""
        OmegaConf.update(self.cfg, dotpath, value)

    def converter_config(self) -> ConverterConfig:
        """The ``searadar.converter`` section as a :class:`ConverterConfig`."""
        return ConverterConfig.from_omegaconf(self.cfg.searadar.converter)

    @property
    def cfg(self) -> DictConfig:
        if self._config is None:
            raise RuntimeError("Config not loaded yet. Call load() first.")
        return self._config

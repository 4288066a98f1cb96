"""Shared pytest fixtures for the MR-231-3 converter tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from searadar.core.clock import SimClock
from searadar.nmea.converter import Mr231_3Converter

# 2023-11-14T22:13:20Z
FIXED_EPOCH = 1_700_000_000.0

CORRECT_TTM = "$RATTM,23,13.88,137.2,T,63.8,094.3,T,9.2,79.4,N,b,T,,783344,А*42"
CORRECT_RSD = "$RARSD,36.5,331.4,8.4,320.6,,,,,11.6,185.3,96.0,N,N,S*33"


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return project_root / "config" / "default.yaml"


@pytest.fixture
def default_config(config_path: Path):
    return OmegaConf.load(config_path)


@pytest.fixture
def converter() -> Mr231_3Converter:
    """Converter with a frozen clock."""
    return Mr231_3Converter(clock=SimClock(start_epoch=FIXED_EPOCH))


@pytest.fixture
def correct_ttm() -> str:
    return CORRECT_TTM


@pytest.fixture
def correct_rsd() -> str:
    return CORRECT_RSD


def make_ttm(
    target_number: str = "23",
    distance: str = "13.88",
    bearing: str = "137.2",
    speed: str = "63.8",
    course: str = "094.3",
    iff: str = "b",
    status: str = "T",
) -> str:
    """Build a TTM sentence with selected fields replaced."""
    return (
        f"$RATTM,{target_number},{distance},{bearing},T,{speed},{course},T,"
        f"9.2,79.4,N,{iff},{status},,783344,А*42"
    )


def make_rsd(distance_scale: str = "96.0", working_mode: str = "S") -> str:
    """Build an RSD sentence with selected fields replaced."""
    return (
        f"$RARSD,36.5,331.4,8.4,320.6,,,,,11.6,185.3,{distance_scale},N,N,"
        f"{working_mode}*33"
    )


@pytest.fixture
def ttm_sentence():
    """Factory for TTM sentences, see :func:`make_ttm`."""
    return make_ttm


@pytest.fixture
def rsd_sentence():
    """Factory for RSD sentences, see :func:`make_rsd`."""
    return make_rsd


@pytest.fixture
def fixed_epoch() -> float:
    return FIXED_EPOCH

"""Tests for decoded station message dataclasses."""

from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from searadar.core.types import IFF, MessageKind, TargetStatus, TargetType
from searadar.nmea.messages import (
    InvalidMessage,
    RadarSystemDataMessage,
    TrackedTargetMessage,
)


class TestTrackedTargetMessage:
    def test_defaults(self):
        msg = TrackedTargetMessage()
        assert msg.kind is MessageKind.TRACKED_TARGET
        assert msg.status is TargetStatus.UNRELIABLE_DATA
        assert msg.iff is IFF.UNKNOWN
        assert msg.type is TargetType.UNKNOWN
        assert msg.msg_rec_time is None

    def test_frozen(self):
        msg = TrackedTargetMessage(target_number=5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.target_number = 6  # type: ignore[misc]

    def test_kind_not_settable(self):
        with pytest.raises(TypeError):
            TrackedTargetMessage(kind=MessageKind.INVALID)  # type: ignore[call-arg]

    def test_equality_ignores_timestamps(self):
        a = TrackedTargetMessage(target_number=1, msg_time=1, msg_rec_time=datetime(2020, 1, 1))
        b = TrackedTargetMessage(target_number=1, msg_time=2, msg_rec_time=datetime(2024, 1, 1))
        assert a == b

    def test_equality_compares_values(self):
        assert TrackedTargetMessage(speed=1.0) != TrackedTargetMessage(speed=2.0)

    def test_to_dict(self):
        ts = datetime(2024, 5, 1, 12, 0, 0)
        d = TrackedTargetMessage(
            target_number=23,
            distance=13.88,
            status=TargetStatus.TRACKED,
            iff=IFF.FOE,
            msg_time=1000,
            msg_rec_time=ts,
        ).to_dict()
        assert d["kind"] == "tracked_target"
        assert d["target_number"] == 23
        assert d["distance"] == 13.88
        assert d["status"] == "tracked"
        assert d["iff"] == "foe"
        assert d["type"] == "unknown"
        assert d["msg_time"] == 1000
        assert d["msg_rec_time"] == "2024-05-01T12:00:00"

    def test_to_dict_without_timestamp(self):
        assert TrackedTargetMessage().to_dict()["msg_rec_time"] is None


class TestRadarSystemDataMessage:
    def test_kind(self):
        assert RadarSystemDataMessage().kind is MessageKind.RADAR_SYSTEM_DATA

    def test_to_dict(self):
        d = RadarSystemDataMessage(
            distance_scale=96.0,
            distance_unit="N",
            working_mode="S",
        ).to_dict()
        assert d["kind"] == "radar_system_data"
        assert d["distance_scale"] == 96.0
        assert d["distance_unit"] == "N"
        assert d["working_mode"] == "S"
        assert d["msg_rec_time"] is None

    def test_not_equal_to_other_kinds(self):
        assert RadarSystemDataMessage() != TrackedTargetMessage()


class TestInvalidMessage:
    def test_to_dict(self):
        msg = InvalidMessage(info_msg="RSD message. Wrong distance scale value: 95.0")
        assert msg.to_dict() == {
            "kind": "invalid",
            "info_msg": "RSD message. Wrong distance scale value: 95.0",
        }

    def test_equality(self):
        assert InvalidMessage(info_msg="a") == InvalidMessage(info_msg="a")
        assert InvalidMessage(info_msg="a") != InvalidMessage(info_msg="b")

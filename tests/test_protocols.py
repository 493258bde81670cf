"""Tests for the preset preparation protocols."""

import pytest

from presets import list_presets
from protocols import PREPARATION_PROTOCOLS, get_preparation_protocol


def test_every_preset_has_a_protocol() -> None:
    assert list(PREPARATION_PROTOCOLS) == list_presets()


def test_unknown_key() -> None:
    assert get_preparation_protocol("chocolate-ganache") is None


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        PREPARATION_PROTOCOLS["new"] = PREPARATION_PROTOCOLS["dulce-caramel"]


@pytest.mark.parametrize("key", list_presets())
def test_steps_are_numbered_in_order(key) -> None:
    protocol = get_preparation_protocol(key)
    assert protocol.key == key
    assert protocol.total_time
    assert protocol.difficulty in ("سهل", "متوسط", "متقدم")
    assert [step.number for step in protocol.steps] == list(
        range(1, len(protocol.steps) + 1)
    )
    assert all(step.actions for step in protocol.steps)


def test_sour_cream_needs_overnight_straining() -> None:
    protocol = get_preparation_protocol("classic-sour-cream")
    before = protocol.pre_preparation
    assert before.critical is True
    assert before.duration == "6-8 ساعات"
    assert before.tasks[0].temperature == "4°C طوال فترة التصفية"
    assert len(protocol.steps) == 4
    assert len(protocol.troubleshooting) == 4


def test_gelatin_melting_limits() -> None:
    step = get_preparation_protocol("cream-cheese-honey").steps[0]
    melt = step.actions[2]
    assert melt.temperature == "50-55°C"
    assert melt.warnings == ("لا تتجاوز 60°C أبداً!",)
    assert step.note


def test_warnings_follow_step_order() -> None:
    protocol = get_preparation_protocol("ahmed-shawky-caramel")
    assert protocol.pre_preparation is None
    assert protocol.warnings == ["كراميل بارد = كتل صلبة"]


def test_short_protocol_without_extras() -> None:
    protocol = get_preparation_protocol("ahmed-shawky-sugar")
    assert protocol.yield_text == ""
    assert protocol.troubleshooting == ()
    assert protocol.steps[0].actions[0].duration == "4-5 دقائق"


def test_snapshot() -> None:
    data = get_preparation_protocol("ahmed-abdelsalam").to_dict()
    assert data["totalTime"] == "30 دقيقة"
    assert data["prePreparation"]["critical"] is True
    assert data["steps"][0]["actions"][0]["rpm"] == 200
    assert data["troubleshooting"][0]["causes"] == ["اختلاف حرارة المكونات"]

"""Tests for baking predictions and schedules."""

import pytest

from analysis import analyze_recipe
from baking import get_baking_schedule, simulate_baking
from conftest import make_dough
from models.recipe import AnalysisFailure


class TestSimulateBaking:
    """Tests for simulate_baking()."""

    def test_no_heat_no_time_means_no_browning(self, default_analysis) -> None:
        result = simulate_baking(default_analysis, 150, 0)
        assert result.browning_index == 0
        assert result.moisture_loss == 0
        assert result.color == "باهت جداً"
        assert result.texture == "طري وهش"
        assert result.recommendations == ("ارفع الحرارة 10°C أو زد الوقت دقيقة",)

    def test_hotter_and_longer_browns_more(self, default_analysis) -> None:
        mild = simulate_baking(default_analysis, 180, 7)
        hot = simulate_baking(default_analysis, 210, 7)
        long = simulate_baking(default_analysis, 180, 12)
        assert hot.browning_index > mild.browning_index
        assert long.browning_index > mild.browning_index

    def test_very_hot_oven_dries_layer(self, default_analysis) -> None:
        result = simulate_baking(default_analysis, 260, 15)
        assert result.browning_index > 90
        assert result.texture == "قاسي وجاف"
        assert result.recommendations[-1] == "قلل الوقت أو الحرارة"

    def test_parameters_reported(self, default_analysis) -> None:
        result = simulate_baking(default_analysis, 180, 7)
        assert result.parameters["thickness_mm"] == 3
        assert result.parameters["honey_share_pct"] == 33
        assert result.parameters["butter_protection_pct"] == 6

    def test_thicker_layer_browns_less(self, default_analysis) -> None:
        thin = simulate_baking(default_analysis, 190, 8, thickness_mm=2)
        thick = simulate_baking(default_analysis, 190, 8, thickness_mm=5)
        assert thick.browning_index < thin.browning_index

    def test_sensory_keys(self, default_analysis) -> None:
        sensory = simulate_baking(default_analysis, 180, 7).sensory_predictions
        assert set(sensory) == {"visual", "aroma", "texture"}

    def test_unusable_analysis(self) -> None:
        assert simulate_baking(None, 180, 7) is None
        assert simulate_baking(AnalysisFailure("bad"), 180, 7) is None


class TestBakingSchedule:
    """Tests for get_baking_schedule()."""

    @pytest.mark.parametrize(
        ("temp", "expected"),
        [(160, 10), (180, 7), (200, 5), (220, 4)],
    )
    def test_time_by_oven_band(self, default_analysis, temp, expected) -> None:
        schedule = get_baking_schedule(default_analysis, temp)
        assert schedule.recommended_time == expected
        assert schedule.min_time >= 4
        assert schedule.max_time == schedule.recommended_time + 2

    def test_defaults(self, default_analysis) -> None:
        schedule = get_baking_schedule(default_analysis)
        assert schedule.temp == 180
        assert schedule.thickness_mm == 3

    def test_thick_layer_cue(self, default_analysis) -> None:
        schedule = get_baking_schedule(default_analysis, 180, 5)
        assert schedule.cues[-1] == "اختبر بعود خشبي في المركز"

    def test_honey_heavy_cue(self) -> None:
        analysis = analyze_recipe(make_dough(sugar=0, honey=300))
        schedule = get_baking_schedule(analysis)
        assert schedule.cues[0] == "راقب اللون بعناية - العسل يحترق سريعاً"

    def test_unusable(self) -> None:
        assert get_baking_schedule(None) is None

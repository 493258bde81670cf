"""Tests for the chemistry estimates and the cake/filling compatibility score."""

import pytest

from chemistry import (
    build_compatibility_report,
    compare_to_preset_targets,
    compute_baking_effects,
    estimate_brix,
    estimate_cake_chemistry,
    estimate_filling_chemistry,
    estimate_ph,
    estimate_viscosity,
)
from models.recipe import BakingParams
from presets import get_preset


class TestEstimates:
    """Brix, pH and viscosity on their own."""

    def test_filling_brix(self, sour_cream_filling) -> None:
        brix = estimate_brix(sour_cream_filling, is_dough=False)
        assert brix.value == 12.4
        assert brix.level == "غير محلى"

    def test_dough_brix(self, default_dough) -> None:
        brix = estimate_brix(default_dough, is_dough=True)
        assert brix.value == 28.2
        assert brix.level == "مثالي"

    def test_empty_brix(self) -> None:
        brix = estimate_brix({}, is_dough=True)
        assert brix.value == 0
        assert brix.level == "غير معروف"

    def test_ph_shift(self, sour_cream_filling, default_dough) -> None:
        filling = estimate_ph(sour_cream_filling, is_dough=False)
        assert filling.value == 6.56
        assert filling.safety == "safe"
        dough = estimate_ph(default_dough, is_dough=True)
        assert dough.value == 6.98
        assert dough.level == "محايد"

    def test_alkaline_filling_is_dangerous(self) -> None:
        ph = estimate_ph({"sour-cream": 100, "soda": 100}, is_dough=False)
        assert ph.value == 7.85
        assert ph.safety == "danger"

    def test_ph_clamped(self) -> None:
        assert estimate_ph({"lemon-juice": 100}, is_dough=False).value == 4.8
        assert estimate_ph({"soda": 100}, is_dough=True).value == 9.0

    def test_empty_ph_is_neutral(self) -> None:
        ph = estimate_ph({}, is_dough=False)
        assert ph.value == 7.0
        assert ph.safety == "safe"

    def test_viscosity_drops_with_heat(self, sour_cream_filling) -> None:
        cold = estimate_viscosity(sour_cream_filling, 10, is_dough=False)
        warm = estimate_viscosity(sour_cream_filling, 20, is_dough=False)
        assert cold.value == pytest.approx(11581, abs=1)
        assert cold.level == "متوسطة"
        assert cold.workability == "good"
        assert warm.value < cold.value
        assert warm.temperature == 20

    def test_empty_viscosity(self) -> None:
        viscosity = estimate_viscosity({}, 10, is_dough=False)
        assert viscosity.value == 0
        assert viscosity.workability == "poor"


class TestBakingEffects:
    """Tests for compute_baking_effects()."""

    def test_default_dough_at_180(self, default_dough) -> None:
        cake = estimate_cake_chemistry(default_dough, BakingParams(temp=180, time=7))
        effects = cake.baking_effects
        assert effects.moisture_loss == 10.5
        assert effects.brix_after == 31.2
        assert effects.ph_change == -0.14
        assert effects.water_activity == pytest.approx(0.745, abs=0.006)
        assert effects.maturation_time == "36-48 ساعة"

    def test_moisture_loss_capped(self, default_dough) -> None:
        brix = estimate_brix(default_dough, is_dough=True)
        ph = estimate_ph(default_dough, is_dough=True)
        effects = compute_baking_effects(brix, ph, 250, 20)
        assert effects.moisture_loss == 15
        assert effects.water_activity == 0.7

    def test_missing_params_use_defaults(self, default_dough) -> None:
        brix = estimate_brix(default_dough, is_dough=True)
        ph = estimate_ph(default_dough, is_dough=True)
        effects = compute_baking_effects(brix, ph)
        assert (effects.temp, effects.time) == (180, 7)


class TestCakeChemistry:
    """Tests for estimate_cake_chemistry()."""

    def test_without_baking(self, default_dough) -> None:
        cake = estimate_cake_chemistry(default_dough)
        assert cake.baking_effects is None
        assert cake.viscosity.temperature == 40
        assert cake.viscosity.level == "سائل"
        assert cake.workability.ready is False

    def test_snapshot_keeps_nested_records(self, default_dough) -> None:
        data = estimate_cake_chemistry(default_dough).to_dict()
        assert data["brix"]["value"] == 28.2
        assert data["bakingEffects"] is None
        assert "sweetnessIndex" in data


class TestFillingChemistry:
    """Tests for estimate_filling_chemistry()."""

    def test_sour_cream(self, sour_cream_filling) -> None:
        filling = estimate_filling_chemistry(sour_cream_filling)
        assert filling.viscosity.temperature == 10
        assert filling.water_activity.value == pytest.approx(0.99, abs=0.001)
        assert filling.stability.score == 48
        assert [(d.ingredient, d.contribution) for d in filling.stability.details] == [
            ("heavy-cream-35", -1.5)
        ]

    def test_preset_recipe(self) -> None:
        filling = estimate_filling_chemistry(get_preset("dulce-caramel").base_recipe)
        assert filling.brix.value > 0
        assert 0 < filling.water_activity.value <= 0.99


class TestCompatibility:
    """Tests for build_compatibility_report()."""

    def test_baked_layer_with_sour_cream(self, default_dough, sour_cream_filling) -> None:
        cake = estimate_cake_chemistry(default_dough, BakingParams(temp=180, time=7))
        report = build_compatibility_report(
            cake, estimate_filling_chemistry(sour_cream_filling)
        )
        assert report.score == 65
        assert report.rating == "مقبول"
        assert len(report.issues) == 2
        assert report.recommendations[0].startswith("الحشوة أقل حلاوة")
        assert report.estimated_maturation == "12-24 ساعة"

    def test_unbaked_dough_skips_water_activity(
        self, default_dough, sour_cream_filling
    ) -> None:
        report = build_compatibility_report(
            estimate_cake_chemistry(default_dough),
            estimate_filling_chemistry(sour_cream_filling),
        )
        assert report.score == 80
        assert report.rating == "جيد جداً"
        assert len(report.issues) == 1

    def test_dangerous_filling(self, default_dough) -> None:
        report = build_compatibility_report(
            estimate_cake_chemistry(default_dough),
            estimate_filling_chemistry({"sour-cream": 100, "soda": 100}),
        )
        assert "درجة حموضة الحشوة خطيرة" in report.issues

    def test_missing_side(self, default_dough) -> None:
        assert build_compatibility_report(None, None) is None
        assert build_compatibility_report(estimate_cake_chemistry(default_dough), None) is None


class TestPresetComparison:
    """Tests for compare_to_preset_targets()."""

    def test_classic_preset(self, sour_cream_filling) -> None:
        preset = get_preset("classic-sour-cream")
        comparison = compare_to_preset_targets(
            estimate_filling_chemistry(sour_cream_filling), preset
        )
        assert set(comparison) == {"brix", "pH", "viscosity", "waterActivity"}
        assert comparison["brix"]["within"] is False
        assert comparison["pH"]["target"] == {"min": 4.3, "max": 4.5}
        assert comparison["waterActivity"]["within"] is True

"""Tests for pan geometry and the four scaling modes."""

import math

import pytest

from constants import AVERAGE_DOUGH_DENSITY, SCIENTIFIC_RANGES
from scaling import (
    calculate_advanced,
    calculate_effective_density,
    calculate_filling,
    calculate_normal,
    calculate_reverse,
    get_pan_area,
)


class TestPanArea:
    """Tests for get_pan_area()."""

    def test_round(self) -> None:
        assert get_pan_area("round", 24) == pytest.approx(math.pi * 144)

    def test_rectangle(self) -> None:
        assert get_pan_area("rectangle", 30, 20) == 600

    def test_rectangle_without_width_is_zero(self) -> None:
        assert get_pan_area("rectangle", 30) == 0.0

    def test_unknown_shape_is_zero(self) -> None:
        assert get_pan_area("hexagon", 30, 20) == 0.0


class TestEffectiveDensity:
    """Tests for calculate_effective_density()."""

    def test_empty_recipe_uses_average(self) -> None:
        assert calculate_effective_density({}) == AVERAGE_DOUGH_DENSITY

    def test_unknown_ingredients_only_uses_average(self) -> None:
        assert calculate_effective_density({"vanilla": 10}) == AVERAGE_DOUGH_DENSITY

    def test_air_lowers_density(self, default_dough) -> None:
        dense = calculate_effective_density(default_dough, air_factor=0)
        airy = calculate_effective_density(default_dough, air_factor=0.1)
        assert airy == pytest.approx(dense * 0.9)


class TestCalculateNormal:
    """Tests for calculate_normal()."""

    def test_layers_cover_recipe(self, default_analysis) -> None:
        plan = calculate_normal(default_analysis, "round", 24, None, 3)
        assert plan.num_layers == math.floor(
            default_analysis.total_weight / plan.single_layer_weight
        )
        assert plan.total_coverage + plan.remainder == pytest.approx(
            default_analysis.total_weight
        )
        assert 0 <= plan.remainder < plan.single_layer_weight

    def test_zero_area(self, default_analysis) -> None:
        assert calculate_normal(default_analysis, "rectangle", 24, None, 3) is None

    def test_zero_thickness(self, default_analysis) -> None:
        assert calculate_normal(default_analysis, "round", 24, None, 0) is None

    def test_unusable_analysis(self) -> None:
        assert calculate_normal(None, "round", 24, None, 3) is None


class TestCalculateAdvanced:
    """Tests for calculate_advanced()."""

    def test_scales_uniformly(self, default_analysis) -> None:
        scaled = calculate_advanced(default_analysis, 150, 8, extra=10)
        assert scaled.total_weight == pytest.approx(1320)
        assert scaled.per_layer_weight == 150
        assert scaled.scaling_factor == pytest.approx(1320 / 1020.5)
        assert sum(scaled.new_recipe.values()) == pytest.approx(1320)
        assert scaled.new_recipe["flour"] == pytest.approx(500 * 1320 / 1020.5)

    def test_current_weight_gives_same_recipe(self, default_analysis) -> None:
        """W/N per layer over N layers reproduces the analysed recipe."""
        scaled = calculate_advanced(default_analysis, 1020.5 / 8, 8, 0)
        assert scaled.scaling_factor == pytest.approx(1)
        assert scaled.total_weight == pytest.approx(1020.5)
        assert scaled.new_recipe == pytest.approx(default_analysis.recipe)

    def test_unusable(self) -> None:
        assert calculate_advanced(None, 150, 8) is None


class TestCalculateReverse:
    """Tests for calculate_reverse()."""

    def test_ideal_ratios(self) -> None:
        scaled = calculate_reverse("round", 24, None, 8, 3)
        single = math.pi * 144 * 0.3 * AVERAGE_DOUGH_DENSITY
        assert scaled.per_layer_weight == pytest.approx(single)
        assert scaled.total_weight == pytest.approx(single * 8)
        assert scaled.new_recipe["sugar"] == pytest.approx(scaled.new_recipe["honey"])
        ideal_total = sum(bounds["ideal"] for bounds in SCIENTIFIC_RANGES.values())
        assert scaled.new_recipe["flour"] / scaled.total_weight == pytest.approx(
            50 / ideal_total
        )
        assert scaled.scaling_factor is None

    def test_zero_area(self) -> None:
        assert calculate_reverse("rectangle", 30, None, 8, 3) is None


class TestCalculateFilling:
    """Tests for calculate_filling()."""

    def test_filling_between_layers(self, sour_cream_filling) -> None:
        requirement = calculate_filling(sour_cream_filling, "round", 24, None, 8, 5)
        expected = math.pi * 144 * 0.5 * 7 * 1.1
        assert requirement.filling_layers == 7
        assert requirement.required_weight == pytest.approx(expected)
        assert requirement.per_layer_amount == pytest.approx(expected / 7)
        assert sum(requirement.scaled_recipe.values()) == pytest.approx(expected)

    def test_single_layer_still_gets_filling(self, sour_cream_filling) -> None:
        requirement = calculate_filling(sour_cream_filling, "round", 24, None, 1, 5)
        assert requirement.filling_layers == 1

    def test_preset_style_entries(self) -> None:
        requirement = calculate_filling(
            {"sour-cream": {"amount": 300}, "sugar": 100}, "rectangle", 30, 20, 5, 5
        )
        assert requirement.scaled_recipe["sour-cream"] == pytest.approx(
            requirement.required_weight * 0.75
        )

    def test_empty_base(self) -> None:
        assert calculate_filling({"sugar": 0}, "round", 24, None, 8, 5) is None

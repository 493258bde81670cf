"""Tests for input validators."""

import math

from conftest import make_dough
from validation import (
    is_positive_number,
    validate_filling_recipe,
    validate_pan_dimensions,
    validate_recipe,
    validate_tempering_inputs,
)


class TestIsPositiveNumber:
    """Tests for is_positive_number()."""

    def test_accepts_numeric_strings(self) -> None:
        assert is_positive_number("12.5")

    def test_rejects_non_numbers(self) -> None:
        assert not is_positive_number("abc")
        assert not is_positive_number(None)
        assert not is_positive_number(math.nan)
        assert not is_positive_number(math.inf)

    def test_bounds_are_inclusive(self) -> None:
        assert is_positive_number(10, 10, 100)
        assert is_positive_number(100, 10, 100)
        assert not is_positive_number(100.1, 10, 100)


class TestValidateRecipe:
    """Tests for validate_recipe()."""

    def test_starter_recipe_is_valid(self) -> None:
        result = validate_recipe(make_dough())
        assert result.valid
        assert result.errors == ()

    def test_all_zero_recipe_is_valid(self) -> None:
        """Zero masses are in bounds; emptiness is the analyser's concern."""
        result = validate_recipe({key: 0 for key in make_dough()})
        assert result.valid

    def test_negative_and_oversized_values_collected(self) -> None:
        result = validate_recipe(make_dough(flour=-1, soda=150))
        assert not result.valid
        assert len(result.errors) == 2
        assert result.errors[0].startswith("دقيق")

    def test_soda_ratio_warning_blocks_validity(self) -> None:
        """Soda above 2 % of flour is reported and makes the recipe invalid."""
        result = validate_recipe(make_dough(flour=100, soda=5))
        assert not result.valid
        assert "5.0%" in result.errors[-1]

    def test_unknown_keys_ignored(self) -> None:
        result = validate_recipe(make_dough(vanilla=-5))
        assert result.valid


class TestValidatePanDimensions:
    """Tests for validate_pan_dimensions()."""

    def test_round_pan_ignores_dim2(self) -> None:
        assert validate_pan_dimensions("round", 24) == []

    def test_rectangle_requires_dim2(self) -> None:
        errors = validate_pan_dimensions("rectangle", 30, None)
        assert errors == ["البعد الثاني غير صالح"]

    def test_out_of_range(self) -> None:
        assert len(validate_pan_dimensions("rectangle", 5, 200)) == 2


class TestValidateFillingRecipe:
    """Tests for validate_filling_recipe()."""

    def test_preset_style_entries_accepted(self) -> None:
        result = validate_filling_recipe({"sour-cream": {"amount": 400}, "sugar": 50})
        assert result.valid

    def test_zero_total_rejected(self) -> None:
        result = validate_filling_recipe({"sour-cream": 0})
        assert not result.valid

    def test_negative_amount_rejected(self) -> None:
        result = validate_filling_recipe({"sour-cream": 400, "sugar": -10})
        assert not result.valid


def test_tempering_inputs_ranges() -> None:
    assert validate_tempering_inputs(200, 20, 800, 85, 5).valid
    result = validate_tempering_inputs(200, 40, 800, 50, 1)
    assert not result.valid
    assert len(result.errors) == 3

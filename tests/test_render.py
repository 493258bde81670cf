"""Tests for plain-text result rendering."""

from analysis import (
    analyze_recipe,
    compute_recipe_adjustment,
    get_advisor_report,
    predict_dough_texture,
)
from baking import get_baking_schedule, simulate_baking
from chemistry import (
    build_compatibility_report,
    compare_to_preset_targets,
    estimate_cake_chemistry,
    estimate_filling_chemistry,
)
from conftest import make_dough
from interface.render import (
    display_adjustment,
    display_advice,
    display_analysis,
    display_baking,
    display_cake_chemistry,
    display_comparisons,
    display_compatibility,
    display_errors,
    display_filling_chemistry,
    display_preparation_protocol,
    display_preset,
    display_preset_comparison,
    display_preset_list,
    display_saved_recipes,
    display_tempering,
    display_tempering_limits,
)
from models.recipe import BakingParams
from presets import FILLING_PRESETS, get_preset
from protocols import get_preparation_protocol
from tempering import calculate_optimal_batches


class TestDoughRendering:
    """Analysis, advice and baking output."""

    def test_display_analysis(self, default_analysis, capsys) -> None:
        display_analysis(default_analysis, predict_dough_texture(default_analysis))
        output = capsys.readouterr().out
        assert "========== RECIPE ANALYSIS ==========" in output
        assert "Total weight: 1020.5 g" in output
        assert "Quality score: 100/100" in output
        assert "Texture:" in output

    def test_display_advice_empty(self, capsys) -> None:
        display_advice([])
        assert "Nothing to fix." in capsys.readouterr().out

    def test_display_advice_cards(self, capsys) -> None:
        cards = get_advisor_report(analyze_recipe(make_dough(butter=200)))
        display_advice(cards)
        output = capsys.readouterr().out
        assert "18.2%" in output
        assert "(ideal 10-14%)" in output

    def test_display_adjustment(self, capsys) -> None:
        display_adjustment(compute_recipe_adjustment(analyze_recipe(make_dough(butter=200))))
        output = capsys.readouterr().out
        assert "+28 g" in output
        assert "-46 g" in output

    def test_display_adjustment_empty(self, capsys) -> None:
        display_adjustment({})
        assert "No adjustment needed." in capsys.readouterr().out

    def test_display_baking_with_schedule(self, default_analysis, capsys) -> None:
        display_baking(
            simulate_baking(default_analysis, 180, 7),
            get_baking_schedule(default_analysis, 180),
        )
        output = capsys.readouterr().out
        assert "Schedule at 180°C: 7 min (5-9)" in output

    def test_display_cake_chemistry(self, default_dough, capsys) -> None:
        display_cake_chemistry(
            estimate_cake_chemistry(default_dough, BakingParams(temp=180, time=7))
        )
        output = capsys.readouterr().out
        assert "Brix 28.2 → 31.2" in output
        assert "After baking at 180°C for 7 min:" in output

    def test_display_errors(self, capsys) -> None:
        display_errors(["first", "second"])
        assert capsys.readouterr().out == "Error: first\nError: second\n"


class TestTemperingRendering:
    """Tempering table and remedial limits."""

    def test_display_tempering(self, capsys) -> None:
        display_tempering(calculate_optimal_batches(200, 20, 800, 85, 5))
        output = capsys.readouterr().out
        assert "[WARNING]" in output
        assert "peak 65.9°C (batch 5)" in output

    def test_display_limits_skips_unreachable(self, capsys) -> None:
        display_tempering_limits(60, float("inf"), 70.0, 0.0)
        output = capsys.readouterr().out
        assert "pour at most" not in output
        assert "cool the liquid to 70.0°C" in output
        assert "more eggs" not in output


class TestFillingRendering:
    """Filling chemistry, compatibility and presets."""

    def test_display_filling_chemistry(self, sour_cream_filling, capsys) -> None:
        display_filling_chemistry(estimate_filling_chemistry(sour_cream_filling))
        output = capsys.readouterr().out
        assert "Stability: 48/100" in output
        assert "heavy-cream-35: -1.5" in output

    def test_display_compatibility(self, default_dough, sour_cream_filling, capsys) -> None:
        report = build_compatibility_report(
            estimate_cake_chemistry(default_dough),
            estimate_filling_chemistry(sour_cream_filling),
        )
        display_compatibility(report)
        output = capsys.readouterr().out
        assert "Score: 80/100" in output
        assert "  ! " in output

    def test_display_preset_comparison(self, sour_cream_filling, capsys) -> None:
        comparison = compare_to_preset_targets(
            estimate_filling_chemistry(sour_cream_filling),
            get_preset("classic-sour-cream"),
        )
        display_preset_comparison(comparison)
        output = capsys.readouterr().out
        assert "(target 28-30)" in output
        assert "(target 0.96)" in output

    def test_display_preset_list(self, capsys) -> None:
        display_preset_list(list(FILLING_PRESETS.values()))
        output = capsys.readouterr().out
        for key in FILLING_PRESETS:
            assert key in output

    def test_display_preset(self, capsys) -> None:
        display_preset(get_preset("custard-butter"))
        output = capsys.readouterr().out
        assert "needs cooking" in output or "no cooking" in output
        assert "Critical control points:" in output
        assert "unsalted-butter" in output

    def test_display_preparation_protocol(self, capsys) -> None:
        display_preparation_protocol(get_preparation_protocol("classic-sour-cream"))
        output = capsys.readouterr().out
        assert "========== PREPARATION ==========" in output
        assert "Before you start (required): " in output
        assert "Step 4: التبريد والتخزين" in output
        assert "[0:00 - 0:30 | 150 rpm]" in output
        assert "Troubleshooting:" in output

    def test_display_short_protocol(self, capsys) -> None:
        display_preparation_protocol(get_preparation_protocol("ahmed-shawky-sugar"))
        output = capsys.readouterr().out
        assert "Before you start" not in output
        assert "Troubleshooting:" not in output
        assert "Step 2: طي السور كريم\n" in output
        assert "    ! لا تخفق - ستفقد الهواء" in output


class TestStoredRecordRendering:
    """Saved recipe and comparison listings."""

    def test_empty_lists(self, capsys) -> None:
        display_saved_recipes([])
        display_comparisons([])
        output = capsys.readouterr().out
        assert "No saved recipes." in output
        assert "No saved comparisons." in output

    def test_saved_recipe_row(self, capsys) -> None:
        display_saved_recipes(
            [{"id": 7, "name": "Sunday", "analysis": {"qualityScore": 80}, "createdAt": "x"}]
        )
        output = capsys.readouterr().out
        assert "7  Sunday  score 80" in output

    def test_comparison_row_with_notes(self, capsys) -> None:
        display_comparisons(
            [
                {
                    "id": 3,
                    "date": "2024-01-01",
                    "compatibility": {"score": 65, "rating": "مقبول"},
                    "notes": "too sweet",
                }
            ]
        )
        output = capsys.readouterr().out
        assert "65/100 مقبول" in output
        assert "too sweet" in output

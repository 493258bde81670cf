"""Tests for dough analysis, texture, advice and adjustments."""

import pytest

from analysis import (
    analyze_recipe,
    compute_recipe_adjustment,
    get_advisor_report,
    is_usable,
    predict_dough_texture,
)
from conftest import make_dough
from models.recipe import AnalysisFailure, RecipeAnalysis


def _analysis_at(
    hydration: float,
) -> RecipeAnalysis:
    return RecipeAnalysis(
        recipe={},
        total_weight=1.0,
        percentages={},
        checks={},
        quality_score=100,
        hydration=hydration,
        liquid_weight=0.0,
    )


class TestAnalyzeRecipe:
    """Tests for analyze_recipe()."""

    def test_ideal_recipe(self, ideal_dough) -> None:
        """Every component in range scores 100."""
        analysis = analyze_recipe(ideal_dough)
        assert isinstance(analysis, RecipeAnalysis)
        assert analysis.total_weight == pytest.approx(1025.5)
        assert analysis.quality_score == 100
        assert set(analysis.checks.values()) == {"optimal"}
        assert analysis.hydration == pytest.approx(23.49, abs=0.01)

    def test_percentages_include_combined_sugars(self, default_analysis) -> None:
        percentages = default_analysis.percentages
        assert list(percentages) == [
            "flour",
            "butter",
            "sugar",
            "honey",
            "sugars",
            "eggs",
            "soda",
        ]
        assert percentages["sugars"] == pytest.approx(
            percentages["sugar"] + percentages["honey"]
        )
        assert sum(percentages.values()) - percentages["sugars"] == pytest.approx(100)

    def test_hydration_from_eggs_honey_butter(self, default_analysis) -> None:
        assert default_analysis.liquid_weight == pytest.approx(108.45)
        assert default_analysis.hydration == pytest.approx(21.69)

    def test_each_miss_costs_twenty(self) -> None:
        analysis = analyze_recipe(make_dough(butter=200))
        assert analysis.checks["butter"] == "high"
        assert analysis.checks["flour"] == "low"
        assert analysis.checks["sugars"] == "low"
        assert analysis.quality_score == 40

    def test_invalid_recipe_returns_failure(self) -> None:
        result = analyze_recipe(make_dough(flour=-10, eggs=-1))
        assert isinstance(result, AnalysisFailure)
        assert len(result.error.split("\n")) == 2
        assert not is_usable(result)

    def test_zero_recipe_returns_none(self) -> None:
        assert analyze_recipe({key: 0 for key in make_dough()}) is None

    def test_no_flour_means_zero_hydration(self) -> None:
        analysis = analyze_recipe({"butter": 100, "eggs": 50})
        assert analysis.hydration == 0.0

    def test_input_is_copied(self, default_dough) -> None:
        analysis = analyze_recipe(default_dough)
        default_dough["flour"] = 1
        assert analysis.recipe["flour"] == 500

    def test_repeated_calls_agree(self, default_dough) -> None:
        first = analyze_recipe(default_dough)
        second = analyze_recipe(default_dough)
        assert first == second
        assert first is not second
        assert default_dough == make_dough()

    def test_snapshot_uses_camel_case(self, default_analysis) -> None:
        data = default_analysis.to_dict()
        assert data["qualityScore"] == 100
        assert RecipeAnalysis.from_dict(data) == default_analysis


class TestPredictDoughTexture:
    """Tests for predict_dough_texture()."""

    @pytest.mark.parametrize(
        ("eggs", "band"),
        [
            (95, "ideal"),
            (150, "soft"),
            (220, "critical"),
            (10, "dry"),
        ],
    )
    def test_bands(self, eggs, band) -> None:
        analysis = analyze_recipe(make_dough(eggs=eggs, soda=0))
        assert predict_dough_texture(analysis).band == band

    def test_unusable_analysis(self) -> None:
        assert predict_dough_texture(None) is None
        assert predict_dough_texture(AnalysisFailure("x")) is None

    @pytest.mark.parametrize(
        ("hydration", "band"),
        [
            (19.99, "dry"),
            (20.0, "ideal"),
            (26.0, "ideal"),
            (32.0, "soft"),
            (32.0001, "critical"),
        ],
    )
    def test_band_edges(self, hydration, band) -> None:
        """20 and 26 are ideal, 32 is still soft."""
        texture = predict_dough_texture(_analysis_at(hydration))
        assert texture.band == band
        assert texture.hydration == hydration

    def test_carries_hydration(self, default_analysis) -> None:
        texture = predict_dough_texture(default_analysis)
        assert texture.hydration == default_analysis.hydration
        assert texture.to_dict()["hydration"] == default_analysis.hydration

    def test_results_are_independent(self, default_analysis) -> None:
        """Editing one result leaves later results untouched."""
        first = predict_dough_texture(default_analysis)
        touch = first.sensory["touch"]
        first.sensory["touch"] = "changed"
        first.techniques.clear()

        second = predict_dough_texture(default_analysis)
        assert second is not first
        assert second.sensory["touch"] == touch
        assert "immediate" in second.techniques


class TestAdvisorReport:
    """Tests for get_advisor_report()."""

    def test_optimal_recipe_has_no_cards(self, default_analysis) -> None:
        assert get_advisor_report(default_analysis) == []

    def test_cards_follow_check_order(self) -> None:
        analysis = analyze_recipe(make_dough(butter=200))
        cards = get_advisor_report(analysis)
        assert [card.component for card in cards] == ["flour", "butter", "sugars"]
        butter = cards[1]
        assert butter.status == "high"
        assert butter.ideal_range == "10-14%"
        assert butter.current_value == "18.2%"

    def test_unusable(self) -> None:
        assert get_advisor_report(None) is None


class TestRecipeAdjustment:
    """Tests for compute_recipe_adjustment()."""

    def test_moves_components_to_nearest_bound(self) -> None:
        """Low sugars get no suggestion."""
        analysis = analyze_recipe(make_dough(butter=200))
        assert compute_recipe_adjustment(analysis) == {"flour": 28, "butter": -46}

    def test_optimal_recipe_needs_nothing(self, default_analysis) -> None:
        assert compute_recipe_adjustment(default_analysis) == {}

    def test_excess_sugars_taken_from_sugar_first(self) -> None:
        analysis = analyze_recipe(make_dough(sugar=300, honey=100))
        adjustment = compute_recipe_adjustment(analysis)
        assert adjustment["sugar"] < 0
        assert "honey" not in adjustment

    def test_unusable(self) -> None:
        assert compute_recipe_adjustment(None) == {}

"""Integration tests for the command-line workflows.

Each test drives `main()` with an explicit argv, as the shell would, and
checks the exit status and printed output. Storage goes to tmp files via
the ``storage_config`` fixture.
"""

import pytest

from interface.persistence import load_comparisons, load_saved_recipes
from main import main


class TestDoughCommands:
    """analyze, bake and scale."""

    def test_no_subcommand_prints_help(self, capsys) -> None:
        assert main([]) == 0
        assert "usage: medovik" in capsys.readouterr().out

    def test_analyze_starter_recipe(self, capsys) -> None:
        assert main(["analyze", "--advice", "--adjust"]) == 0
        output = capsys.readouterr().out
        assert "Quality score: 100/100" in output
        assert "Nothing to fix." in output
        assert "No adjustment needed." in output

    def test_analyze_out_of_range(self, capsys) -> None:
        assert main(["analyze", "--butter", "200", "--advice"]) == 0
        output = capsys.readouterr().out
        assert "Quality score: 40/100" in output
        assert "========== ADVISOR ==========" in output

    def test_analyze_invalid_recipe(self, capsys) -> None:
        assert main(["analyze", "--flour", "-5"]) == 1
        assert capsys.readouterr().out.startswith("Error: ")

    def test_analyze_empty_recipe(self, capsys) -> None:
        argv = ["analyze"]
        for key in ("flour", "butter", "sugar", "honey", "eggs", "soda"):
            argv += [f"--{key}", "0"]
        assert main(argv) == 1
        assert "Error: recipe is empty" in capsys.readouterr().out

    def test_bake_uses_config_defaults(self, capsys) -> None:
        assert main(["bake", "--chemistry"]) == 0
        output = capsys.readouterr().out
        assert "Schedule at 180°C: 7 min" in output
        assert "After baking at 180°C for 7 min:" in output

    def test_scale_normal(self, capsys) -> None:
        assert main(["scale", "normal", "--dim1", "24"]) == 0
        assert "Layers:" in capsys.readouterr().out

    def test_scale_normal_negative_thickness(self, capsys) -> None:
        assert main(["scale", "normal", "--dim1", "24", "--thickness", "-3"]) == 1
        assert "layer thickness must be positive" in capsys.readouterr().out

    def test_scale_advanced_range_check(self, capsys) -> None:
        code = main(["scale", "advanced", "--layer-weight", "20", "--layers", "8"])
        assert code == 1
        assert "Error: invalid layer weight (50-300 g)" in capsys.readouterr().out

    def test_scale_reverse(self, capsys) -> None:
        assert main(["scale", "reverse", "--layers", "8"]) == 0
        assert "========== SCALED RECIPE ==========" in capsys.readouterr().out

    def test_scale_reverse_bad_pan(self, capsys) -> None:
        code = main(["scale", "reverse", "--layers", "8", "--shape", "rectangle"])
        assert code == 1
        assert "Error: " in capsys.readouterr().out


class TestTemperCommand:
    """temper."""

    def test_warning_shows_limits(self, capsys) -> None:
        code = main(
            [
                "temper",
                "--egg-mass",
                "200",
                "--liquid-mass",
                "800",
                "--liquid-temp",
                "85",
            ]
        )
        assert code == 0
        output = capsys.readouterr().out
        assert "[WARNING]" in output
        assert "To stay at or below 60°C:" in output

    def test_invalid_inputs(self, capsys) -> None:
        code = main(
            [
                "temper",
                "--egg-mass",
                "0",
                "--liquid-mass",
                "800",
                "--liquid-temp",
                "85",
            ]
        )
        assert code == 1
        assert "Error: " in capsys.readouterr().out


class TestFillingCommands:
    """filling and presets."""

    def test_presets_list_and_show(self, capsys) -> None:
        assert main(["presets"]) == 0
        assert "classic-sour-cream" in capsys.readouterr().out
        assert main(["presets", "dulce-caramel"]) == 0
        output = capsys.readouterr().out
        assert "Critical control points:" in output
        assert "========== PREPARATION ==========" in output
        assert "Step 3: الإضافات النهائية" in output

    def test_unknown_preset(self, capsys) -> None:
        assert main(["presets", "nope"]) == 1
        assert main(["filling", "--preset", "nope"]) == 1

    def test_preset_filling_with_pan_and_comparison(self, capsys) -> None:
        code = main(
            [
                "filling",
                "--preset",
                "classic-sour-cream",
                "--layers",
                "8",
                "--compare",
            ]
        )
        assert code == 0
        output = capsys.readouterr().out
        assert "========== FILLING NEEDED ==========" in output
        assert "Against preset targets:" in output
        assert "Score: 65/100" in output

    def test_ingredient_filling_scaled(self, capsys) -> None:
        code = main(
            [
                "filling",
                "--ingredient",
                "condensed-milk=400",
                "--ingredient",
                "butter=100",
                "--target-weight",
                "500",
                "--reduce-sweetness",
                "20",
            ]
        )
        assert code == 0
        output = capsys.readouterr().out
        assert "sugar reduced 20.0%" in output
        assert "Against preset targets:" not in output

    def test_reduction_out_of_range(self, capsys) -> None:
        code = main(
            ["filling", "--ingredient", "sugar=100", "--reduce-sweetness", "150"]
        )
        assert code == 1

    def test_zero_filling_rejected(self, capsys) -> None:
        assert main(["filling", "--ingredient", "sugar=0"]) == 1

    def test_save_comparison(self, storage_config, capsys) -> None:
        code = main(
            [
                "filling",
                "--preset",
                "ahmed-shawky-sugar",
                "--save",
                "--notes",
                "party",
            ]
        )
        assert code == 0
        assert "Comparison saved (id " in capsys.readouterr().out
        records = load_comparisons()
        assert len(records) == 1
        assert records[0]["notes"] == "party"
        assert records[0]["bakingParams"] == {"temp": 180, "time": 7, "thicknessMm": 3}
        assert "score" in records[0]["compatibility"]


class TestStorageCommands:
    """save, saved and delete."""

    def test_save_list_delete(self, storage_config, capsys) -> None:
        assert main(["save", "--name", "Sunday"]) == 0
        assert "Recipe 'Sunday' saved" in capsys.readouterr().out

        assert main(["saved"]) == 0
        assert "Sunday  score 100" in capsys.readouterr().out

        record_id = load_saved_recipes()[0]["id"]
        assert main(["delete", str(record_id)]) == 0
        assert "Deleted." in capsys.readouterr().out
        assert load_saved_recipes() == []

    def test_delete_missing(self, storage_config, capsys) -> None:
        assert main(["delete", "123", "--comparison"]) == 1
        assert "Error: no record with id 123" in capsys.readouterr().out

    def test_empty_listings(self, storage_config, capsys) -> None:
        assert main(["saved"]) == 0
        assert main(["saved", "--comparisons"]) == 0
        output = capsys.readouterr().out
        assert "No saved recipes." in output
        assert "No saved comparisons." in output

    def test_invalid_recipe_not_saved(self, storage_config, capsys) -> None:
        assert main(["save", "--name", "bad", "--eggs", "-1"]) == 1
        assert load_saved_recipes() == []


def test_config_flag_applies_to_programmatic_calls(tmp_path, capsys) -> None:
    config_file = tmp_path / "config.yml"
    config_file.write_text("baking:\n  temp: 190\n", encoding="utf-8")
    try:
        assert main(["--config", str(config_file), "bake"]) == 0
        assert "Schedule at 190°C" in capsys.readouterr().out
    finally:
        from config import set_config_path

        set_config_path(None)


def test_bad_config_fails_loudly(tmp_path) -> None:
    config_file = tmp_path / "config.yml"
    config_file.write_text("tempering:\n  batch_count: 12\n", encoding="utf-8")
    try:
        with pytest.raises(ValueError, match="Config validation failed"):
            main(["--config", str(config_file), "bake"])
    finally:
        from config import set_config_path

        set_config_path(None)

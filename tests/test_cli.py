"""Tests for CLI argument parser."""

import argparse

import pytest

from constants import DEFAULT_DOUGH
from interface.cli import build_parser, dough_from_args, parse_ingredient


class TestBuildParser:
    """Tests for build_parser() argument parsing."""

    def test_analyze_defaults_to_starter_dough(self) -> None:
        """analyze with no options uses the starter recipe."""
        args = build_parser().parse_args(["analyze"])
        assert args.cmd == "analyze"
        assert dough_from_args(args) == dict(DEFAULT_DOUGH)
        assert args.advice is False
        assert args.adjust is False

    def test_dough_overrides(self) -> None:
        args = build_parser().parse_args(["bake", "--butter", "150", "--temp", "190"])
        assert dough_from_args(args)["butter"] == 150
        assert args.temp == 190
        assert args.time is None
        assert args.chemistry is False

    def test_temper_requires_masses(self) -> None:
        """temper without --egg-mass fails."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["temper", "--liquid-mass", "800", "--liquid-temp", "85"]
            )

    def test_temper_defaults(self) -> None:
        args = build_parser().parse_args(
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
        assert args.egg_temp == 20.0
        assert args.batches is None
        assert args.hot_butter == 0.0

    def test_scale_mode_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["scale"])

    def test_scale_reverse(self) -> None:
        args = build_parser().parse_args(
            ["scale", "reverse", "--layers", "8", "--shape", "rectangle", "--dim1", "30"]
        )
        assert args.mode == "reverse"
        assert args.layers == 8
        assert args.shape == "rectangle"
        assert args.dim1 == 30
        assert args.dim2 is None

    def test_filling_needs_one_source(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["filling"])
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["filling", "--preset", "dulce-caramel", "--ingredient", "sugar=10"]
            )

    def test_filling_ingredients_accumulate(self) -> None:
        args = build_parser().parse_args(
            ["filling", "--ingredient", "sour-cream=400", "--ingredient", "sugar=60"]
        )
        assert args.ingredient == [("sour-cream", 400.0), ("sugar", 60.0)]
        assert args.preset is None
        assert args.reduce_sweetness == 0.0
        assert args.notes == ""

    def test_presets_key_optional(self) -> None:
        assert build_parser().parse_args(["presets"]).key is None
        assert build_parser().parse_args(["presets", "dulce-caramel"]).key == "dulce-caramel"

    def test_delete_flags(self) -> None:
        args = build_parser().parse_args(["delete", "42", "--comparison"])
        assert args.id == 42
        assert args.comparison is True

    def test_verbose_counting(self) -> None:
        """-v = 1, -vv = 2."""
        args_v = build_parser().parse_args(["-v", "presets"])
        assert args_v.verbose == 1

        args_vv = build_parser().parse_args(["-vv", "presets"])
        assert args_vv.verbose == 2

    def test_config_flag(self) -> None:
        """--config path.yml captured."""
        args = build_parser().parse_args(["--config", "my_config.yml", "presets"])
        assert args.config == "my_config.yml"

    def test_no_subcommand_defaults_none(self) -> None:
        """No subcommand → cmd=None."""
        args = build_parser().parse_args([])
        assert args.cmd is None


class TestParseIngredient:
    """Tests for parse_ingredient()."""

    def test_valid(self) -> None:
        assert parse_ingredient("sour-cream=400") == ("sour-cream", 400.0)
        assert parse_ingredient(" honey = 12.5") == ("honey", 12.5)

    @pytest.mark.parametrize("text", ["sour-cream", "=400", "sugar=lots"])
    def test_invalid(self, text) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_ingredient(text)

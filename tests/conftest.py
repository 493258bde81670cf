import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # pyright: ignore[reportMissingImports]
import yaml

from analysis import analyze_recipe
from config import set_config_path


def make_dough(**overrides) -> dict[str, float]:
    """Starter dough (every component in range) with optional overrides."""
    recipe = {
        "flour": 500,
        "butter": 120,
        "sugar": 200,
        "honey": 100,
        "eggs": 95,
        "soda": 5.5,
    }
    recipe.update(overrides)
    return recipe


@pytest.fixture
def ideal_dough():
    """1025.5 g dough, hydration 23.49 %."""
    return make_dough(sugar=155, honey=150)


@pytest.fixture
def default_dough():
    return make_dough()


@pytest.fixture
def default_analysis(default_dough):
    return analyze_recipe(default_dough)


@pytest.fixture
def sour_cream_filling():
    return {
        "sour-cream-30": 800,
        "heavy-cream-35": 400,
        "powdered-sugar-fine": 120,
        "vanilla-extract": 5,
    }


@pytest.fixture
def storage_config(tmp_path):
    """Point the storage section at tmp files for the duration of a test."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump(
            {
                "storage": {
                    "recipes_path": str(tmp_path / "recipes.json"),
                    "comparisons_path": str(tmp_path / "comparisons.json"),
                }
            }
        ),
        encoding="utf-8",
    )
    set_config_path(config_file)
    try:
        yield tmp_path
    finally:
        set_config_path(None)

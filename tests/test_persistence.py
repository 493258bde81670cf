"""Tests for saved recipe and comparison storage."""

import json

from analysis import analyze_recipe
from conftest import make_dough
from interface.persistence import (
    add_comparison,
    add_saved_recipe,
    delete_comparison,
    delete_saved_recipe,
    load_comparisons,
    load_saved_recipes,
    save_saved_recipes,
)


class TestLoadRecords:
    """Reading the JSON stores."""

    def test_missing_file_is_empty(self, tmp_path) -> None:
        assert load_saved_recipes(tmp_path / "missing.json") == []
        assert load_comparisons(tmp_path / "missing.json") == []

    def test_corrupt_json_returns_empty(self, tmp_path, capsys) -> None:
        """Corrupt file returns [] and reports the problem."""
        path = tmp_path / "bad.json"
        path.write_text("{not valid json!!!", encoding="utf-8")

        assert load_saved_recipes(path) == []
        assert "[ERROR] Failed to read saved recipes" in capsys.readouterr().out

    def test_non_list_returns_empty(self, tmp_path, capsys) -> None:
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"id": 1}), encoding="utf-8")

        assert load_comparisons(path) == []
        assert "expected a JSON list" in capsys.readouterr().out

    def test_round_trip_keeps_arabic_text(self, tmp_path) -> None:
        path = tmp_path / "recipes.json"
        save_saved_recipes([{"id": 1, "name": "ميدوفيك"}], path)

        assert "ميدوفيك" in path.read_text(encoding="utf-8")
        assert load_saved_recipes(path) == [{"id": 1, "name": "ميدوفيك"}]


class TestSavedRecipes:
    """add_saved_recipe() and delete_saved_recipe()."""

    def test_add_prepends(self, tmp_path) -> None:
        path = tmp_path / "recipes.json"
        analysis = analyze_recipe(make_dough()).to_dict()

        first = add_saved_recipe("first", analysis, path)
        second = add_saved_recipe("second", analysis, path)

        records = load_saved_recipes(path)
        assert [record["name"] for record in records] == ["second", "first"]
        assert set(first) == {"id", "name", "analysis", "createdAt"}
        assert second["id"] != first["id"]
        assert records[1]["analysis"]["qualityScore"] == 100

    def test_delete(self, tmp_path) -> None:
        path = tmp_path / "recipes.json"
        record = add_saved_recipe("only", {}, path)

        assert delete_saved_recipe(record["id"], path) is True
        assert load_saved_recipes(path) == []

    def test_delete_unknown_id(self, tmp_path) -> None:
        path = tmp_path / "recipes.json"
        add_saved_recipe("only", {}, path)

        assert delete_saved_recipe(-1, path) is False
        assert len(load_saved_recipes(path)) == 1

    def test_default_path_from_config(self, storage_config) -> None:
        add_saved_recipe("configured", {})
        assert (storage_config / "recipes.json").exists()
        assert load_saved_recipes()[0]["name"] == "configured"


class TestComparisons:
    """add_comparison() and delete_comparison()."""

    def test_add_record_shape(self, tmp_path) -> None:
        path = tmp_path / "comparisons.json"
        record = add_comparison(
            {"flour": 500},
            {"temp": 180, "time": 7, "thicknessMm": 3},
            {"brix": {"value": 28.2}},
            {"brix": {"value": 12.4}},
            None,
            notes="first try",
            path=path,
        )
        assert list(record) == [
            "id",
            "date",
            "recipe",
            "bakingParams",
            "doughChemistry",
            "fillingChemistry",
            "compatibility",
            "notes",
        ]
        assert load_comparisons(path) == [record]

    def test_delete(self, storage_config) -> None:
        record = add_comparison({}, None, {}, {}, None)

        assert delete_comparison(record["id"]) is True
        assert delete_comparison(record["id"]) is False
        assert load_comparisons() == []

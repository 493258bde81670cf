"""JSON storage for saved recipes and cake/filling comparisons.

Records are kept newest-first in two UTF-8 JSON files whose paths come
from the ``storage`` config section.

Exports
-------
load_saved_recipes
save_saved_recipes
add_saved_recipe
delete_saved_recipe
load_comparisons
save_comparisons
add_comparison
delete_comparison

Notes
-----
Reads fail soft: a missing file is an empty store, and an unreadable one
is reported and treated as empty so the CLI can continue. Record ids are
millisecond creation timestamps.
"""

import json
import logging
import time
from datetime import (
    datetime,
    timezone,
)
from pathlib import (
    Path,
)

from config import (
    get_cached_config,
)

logger = logging.getLogger(__name__)


def _recipes_path() -> Path:
    return Path(get_cached_config().storage.recipes_path)


def _comparisons_path() -> Path:
    return Path(get_cached_config().storage.comparisons_path)


def _read_records(
    path,
    label: str,
) -> list[dict]:
    """Load a list of records from ``path``.

    Parameters
    ----------
    path : str | os.PathLike
        JSON file holding a list of objects.
    label : str
        What the file holds, for error messages.

    Returns
    -------
    list[dict]
        Records, or an empty list when the file is missing or unreadable.
    """
    path = Path(path)
    if not path.exists():
        return []
    # fail soft (print + return []) so the CLI can continue
    try:
        with open(
            path,
            "r",
            encoding="utf-8",
        ) as in_file:
            data = json.load(in_file)
        if not isinstance(data, list):
            raise ValueError("expected a JSON list")
        return data
    except Exception as exc:
        logger.error("Could not read %s from %s: %s", label, path, exc)
        print(f"[ERROR] Failed to read {label}: {exc}")
        return []


def _write_records(
    records: list[dict],
    path,
) -> None:
    with open(
        path,
        "w",
        encoding="utf-8",
    ) as out_file:
        json.dump(
            records,
            out_file,
            ensure_ascii=False,
            indent=2,
        )


def _new_id(records: list[dict]) -> int:
    """Millisecond timestamp, bumped past any id already in use."""
    record_id = int(time.time() * 1000)
    taken = {record.get("id") for record in records}
    while record_id in taken:
        record_id += 1
    return record_id


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# --- Saved recipes --------------------------------------------------------------


def load_saved_recipes(
    path=None,
) -> list[dict]:
    """Saved recipes, newest first."""
    return _read_records(path or _recipes_path(), "saved recipes")


def save_saved_recipes(
    recipes: list[dict],
    path=None,
) -> None:
    _write_records(recipes, path or _recipes_path())


def add_saved_recipe(
    name: str,
    analysis: dict,
    path=None,
) -> dict:
    """Store a named recipe analysis and return the new record.

    Parameters
    ----------
    name : str
        Display name chosen by the user.
    analysis : dict
        ``RecipeAnalysis.to_dict()`` output.
    path : str | os.PathLike | None, optional
        Store file; defaults to ``storage.recipes_path``.

    Returns
    -------
    dict
        ``{id, name, analysis, createdAt}``.
    """
    recipes = load_saved_recipes(path)
    record = {
        "id": _new_id(recipes),
        "name": name,
        "analysis": analysis,
        "createdAt": _now_iso(),
    }
    recipes.insert(0, record)
    save_saved_recipes(recipes, path)
    logger.info("Saved recipe %r as %d", name, record["id"])
    return record


def delete_saved_recipe(
    record_id: int,
    path=None,
) -> bool:
    """Remove a saved recipe; ``False`` if no record had that id."""
    recipes = load_saved_recipes(path)
    kept = [record for record in recipes if record.get("id") != record_id]
    if len(kept) == len(recipes):
        return False
    save_saved_recipes(kept, path)
    logger.info("Deleted saved recipe %d", record_id)
    return True


# --- Comparisons ----------------------------------------------------------------


def load_comparisons(
    path=None,
) -> list[dict]:
    """Saved cake/filling comparisons, newest first."""
    return _read_records(path or _comparisons_path(), "comparisons")


def save_comparisons(
    comparisons: list[dict],
    path=None,
) -> None:
    _write_records(comparisons, path or _comparisons_path())


def add_comparison(
    recipe: dict,
    baking_params: dict | None,
    dough_chemistry: dict,
    filling_chemistry: dict,
    compatibility: dict | None,
    notes: str = "",
    path=None,
) -> dict:
    """Store a cake/filling pairing snapshot and return the new record."""
    comparisons = load_comparisons(path)
    record = {
        "id": _new_id(comparisons),
        "date": _now_iso(),
        "recipe": recipe,
        "bakingParams": baking_params,
        "doughChemistry": dough_chemistry,
        "fillingChemistry": filling_chemistry,
        "compatibility": compatibility,
        "notes": notes,
    }
    comparisons.insert(0, record)
    save_comparisons(comparisons, path)
    logger.info("Saved comparison %d", record["id"])
    return record


def delete_comparison(
    record_id: int,
    path=None,
) -> bool:
    """Remove a comparison; ``False`` if no record had that id."""
    comparisons = load_comparisons(path)
    kept = [record for record in comparisons if record.get("id") != record_id]
    if len(kept) == len(comparisons):
        return False
    save_comparisons(kept, path)
    logger.info("Deleted comparison %d", record_id)
    return True

"""Snapshot helpers shared by the result records.

Result records are frozen dataclasses with snake_case fields. Storage and
the JSON front end expect camelCase keys, so every record exposes
``to_dict()`` through `SnapshotMixin`.

Exports
-------
SnapshotMixin
to_snapshot
camel_case
"""

from collections.abc import (
    Mapping,
)
from dataclasses import (
    fields,
    is_dataclass,
)
from typing import Any


def camel_case(name: str) -> str:
    """Convert a snake_case field name to camelCase (``total_weight`` → ``totalWeight``)."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_snapshot(value: Any) -> Any:
    """Recursively convert records into JSON-ready builtins.

    Dataclass field names are camel-cased; mapping keys (ingredient names)
    are kept verbatim. Tuples become lists.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {
            camel_case(f.name): to_snapshot(getattr(value, f.name))
            for f in fields(value)
        }
    if isinstance(value, Mapping):
        return {key: to_snapshot(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_snapshot(item) for item in value]
    return value


class SnapshotMixin:
    """Adds ``to_dict()`` to a dataclass record."""

    def to_dict(self) -> dict[str, Any]:
        return to_snapshot(self)

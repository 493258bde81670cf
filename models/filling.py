"""Filling records: sweetness, water activity, stability, scaling and presets.

Exports
-------
SweetnessIndex
WaterActivity
StabilityContribution
StabilityReport
FillingScaleResult
CriticalControlPoint
FailureIndicator
FillingPreset
"""

from collections.abc import (
    Mapping,
)
from dataclasses import (
    dataclass,
    field,
)
from types import (
    MappingProxyType,
)
from typing import Any

from models.base import (
    SnapshotMixin,
)


@dataclass(frozen=True)
class SweetnessIndex(SnapshotMixin):
    """Perceived sweetness of a filling relative to plain sucrose.

    Attributes
    ----------
    index : float
        ``Σ(mass·sugar_fraction·power) / Σ(mass)``.
    level : str
        One of six qualitative levels.
    percentage : str
        ``index`` formatted to one decimal (``"0"`` for an empty map).
    color : str
        Hex colour code for the level.
    total_sugar : float
        Grams of sugar across all ingredients.
    total_weight : float
        Grams across all ingredients.
    breakdown : dict[str, float]
        Sweetness points contributed per sugar type.
    """

    index: float
    level: str
    percentage: str
    color: str
    total_sugar: float = 0.0
    total_weight: float = 0.0
    breakdown: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class WaterActivity(SnapshotMixin):
    """Estimated water activity with its descriptor ladder."""

    value: float
    moisture_transfer_rate: str
    maturation_time: str
    stability: str
    microbial_safety: str
    total_water: float = 0.0
    total_solutes: float = 0.0


@dataclass(frozen=True)
class StabilityContribution(SnapshotMixin):
    """One ingredient's effect on the stability score (``|contribution| > 1``)."""

    ingredient: str
    contribution: float
    reason: str


@dataclass(frozen=True)
class StabilityReport(SnapshotMixin):
    """Clamped 0..100 stability score with level and advice."""

    score: int
    level: str
    recommendation: str
    details: tuple[StabilityContribution, ...] = ()


@dataclass(frozen=True)
class FillingScaleResult(SnapshotMixin):
    """Scaled filling with the sweetness before and after adjustment.

    Attributes
    ----------
    recipe : dict[str, float]
        New ingredient masses, g.
    original_sweetness : SweetnessIndex
        Sweetness of the base recipe.
    new_sweetness : SweetnessIndex
        Sweetness of ``recipe``.
    reduction_applied : float
        Effective reduction of sweet ingredients, percent.
    """

    recipe: dict[str, float]
    original_sweetness: SweetnessIndex
    new_sweetness: SweetnessIndex
    reduction_applied: float


@dataclass(frozen=True)
class CriticalControlPoint(SnapshotMixin):
    step: str
    hazard: str
    corrective_action: str


@dataclass(frozen=True)
class FailureIndicator(SnapshotMixin):
    sign: str
    cause: str
    rescue: str


def _read_only(value):
    if isinstance(value, Mapping):
        return MappingProxyType({key: _read_only(item) for key, item in value.items()})
    return value


@dataclass(frozen=True)
class FillingPreset(SnapshotMixin):
    """Static catalog entry for a named filling.

    Attributes
    ----------
    key : str
        Catalog key (e.g. ``'classic-sour-cream'``).
    name : str
        Display name.
    name_en : str
        English name.
    base_recipe : Mapping[str, float]
        Ingredient masses, g.
    target_properties : Mapping[str, Any]
        Density, viscosity/pH/brix ranges (``{'min', 'max'}``), water
        activity and other reference values; display only.
    sensory_targets : Mapping[str, str]
        Expected look, sweetness and aroma.
    required_equipment : tuple[str, ...]
        Essential equipment.
    critical_control_points : tuple[CriticalControlPoint, ...]
        Process steps that decide success.
    failure_indicators : Mapping[str, FailureIndicator]
        Known failure modes and rescues.
    default_thickness : float
        Layer thickness, mm.
    needs_cooking : bool
        Whether any component is cooked.
    difficulty_level : int
        1..10.
    yield_amount : float
        Expected yield, g.

    Notes
    -----
    The mapping fields are stored as read-only views, nested ranges
    included. Callers that need an editable recipe copy it first.
    """

    key: str
    name: str
    name_en: str
    base_recipe: Mapping[str, float]
    target_properties: Mapping[str, Any]
    sensory_targets: Mapping[str, str]
    required_equipment: tuple[str, ...]
    critical_control_points: tuple[CriticalControlPoint, ...]
    failure_indicators: Mapping[str, FailureIndicator]
    default_thickness: float
    needs_cooking: bool
    difficulty_level: int
    yield_amount: float

    def __post_init__(self) -> None:
        for name in (
            "base_recipe",
            "target_properties",
            "sensory_targets",
            "failure_indicators",
        ):
            object.__setattr__(self, name, _read_only(getattr(self, name)))

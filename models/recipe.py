"""Dough records: validation, analysis, texture, advice and baking results.

Exports
-------
ValidationResult
AnalysisFailure
RecipeAnalysis
BakingParams
PanGeometry
DoughTexture
AdviceCard
BakingResult
BakingSchedule

Notes
-----
All records are frozen; engines build a fresh record per call and never
mutate one after creation.
"""

import math
from dataclasses import (
    dataclass,
    field,
)
from typing import Any

from constants import (
    DEFAULT_BAKING_TEMP,
    DEFAULT_BAKING_TIME,
    DEFAULT_LAYER_THICKNESS_MM,
)
from models.base import (
    SnapshotMixin,
)


@dataclass(frozen=True)
class ValidationResult(SnapshotMixin):
    """Outcome of a bounds check.

    Attributes
    ----------
    valid : bool
        ``True`` when ``errors`` is empty.
    errors : tuple[str, ...]
        One human-readable message per violation, in detection order.
    """

    valid: bool
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisFailure(SnapshotMixin):
    """Analysis of a recipe that failed validation; carries only the message."""

    error: str


@dataclass(frozen=True)
class RecipeAnalysis(SnapshotMixin):
    """Immutable snapshot of a dough analysis.

    Attributes
    ----------
    recipe : dict[str, float]
        The ingredient masses analysed (a private copy).
    total_weight : float
        Sum of all masses, g.
    percentages : dict[str, float]
        Share of total for flour, butter, sugar, honey, sugars
        (sugar + honey), eggs and soda.
    checks : dict[str, str]
        ``'low'``, ``'optimal'`` or ``'high'`` per ranged component, in the
        order flour, butter, sugars, eggs, soda.
    quality_score : int
        0..100; 100 minus 20 per non-optimal component.
    hydration : float
        Water from eggs, honey and butter as percent of flour.
    liquid_weight : float
        That water in grams.
    """

    recipe: dict[str, float]
    total_weight: float
    percentages: dict[str, float]
    checks: dict[str, str]
    quality_score: int
    hydration: float
    liquid_weight: float

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
    ) -> "RecipeAnalysis":
        """Rebuild an analysis from its ``to_dict()`` snapshot."""
        return cls(
            recipe=dict(data["recipe"]),
            total_weight=float(data["totalWeight"]),
            percentages=dict(data["percentages"]),
            checks=dict(data["checks"]),
            quality_score=int(data["qualityScore"]),
            hydration=float(data["hydration"]),
            liquid_weight=float(data["liquidWeight"]),
        )


@dataclass(frozen=True)
class BakingParams(SnapshotMixin):
    """Oven settings for one layer."""

    temp: float = DEFAULT_BAKING_TEMP
    time: float = DEFAULT_BAKING_TIME
    thickness_mm: float = DEFAULT_LAYER_THICKNESS_MM


@dataclass(frozen=True)
class PanGeometry(SnapshotMixin):
    """Pan shape and dimensions in cm.

    ``dim1`` is the diameter of a round pan or the length of a rectangle;
    ``dim2`` is the rectangle's width and is ignored for round pans.
    """

    shape: str
    dim1: float
    dim2: float | None = None

    @property
    def area(self) -> float:
        """Base area in cm²; 0 for an unknown shape or a rectangle without width."""
        if self.shape == "round":
            return math.pi * (self.dim1 / 2) ** 2
        if self.shape == "rectangle" and self.dim2:
            return self.dim1 * self.dim2
        return 0.0


@dataclass(frozen=True)
class DoughTexture(SnapshotMixin):
    """Qualitative dough profile for one hydration band.

    Attributes
    ----------
    band : str
        ``'critical'``, ``'soft'``, ``'ideal'`` or ``'dry'``.
    hydration : float
        Hydration percentage the band was chosen from.
    texture : str
        Short description of the dough.
    sensory : dict[str, str]
        ``touch``, ``appearance``, ``sound`` and ``aroma`` lines.
    techniques : dict[str, str]
        ``immediate`` and ``working`` plus ``correction`` (or ``tip`` for the
        ideal band).
    visual_indicator : str
        Status glyph and label.
    troubleshooting : str
        One-line diagnosis.
    """

    band: str
    hydration: float
    texture: str
    sensory: dict[str, str]
    techniques: dict[str, str]
    visual_indicator: str
    troubleshooting: str


@dataclass(frozen=True)
class AdviceCard(SnapshotMixin):
    """Improvement advice for one out-of-range component."""

    component: str
    component_name: str
    status: str
    current_value: str
    ideal_range: str
    impact: str
    solution: str
    science: str


@dataclass(frozen=True)
class BakingResult(SnapshotMixin):
    """Predicted outcome of baking one layer.

    Attributes
    ----------
    color : str
        Colour band label.
    texture : str
        Texture band label.
    browning_index : int
        Rounded Maillard-like browning index.
    moisture_loss : float
        Rounded to one decimal.
    texture_score : int
        Rounded texture score.
    recommendations : tuple[str, ...]
        Colour recommendation first, then texture if any.
    sensory_predictions : dict
        ``visual`` (top/edges), ``aroma`` (expected) and ``texture`` (bite).
    parameters : dict
        Thickness, honey share and butter protection used.
    """

    color: str
    texture: str
    browning_index: int
    moisture_loss: float
    texture_score: int
    recommendations: tuple[str, ...]
    sensory_predictions: dict[str, Any]
    parameters: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class BakingSchedule(SnapshotMixin):
    """Recommended bake time with a window and visual doneness cues."""

    temp: float
    thickness_mm: float
    recommended_time: int
    min_time: int
    max_time: int
    cues: tuple[str, ...]

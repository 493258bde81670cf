"""Chemistry estimate records for dough, filling and their pairing.

Exports
-------
BrixEstimate
PhEstimate
ViscosityEstimate
Workability
BakingEffects
CakeChemistry
FillingChemistry
CompatibilityReport
"""

from dataclasses import (
    dataclass,
)

from models.base import (
    SnapshotMixin,
)
from models.filling import (
    StabilityReport,
    SweetnessIndex,
    WaterActivity,
)


@dataclass(frozen=True)
class BrixEstimate(SnapshotMixin):
    value: float
    level: str
    description: str


@dataclass(frozen=True)
class PhEstimate(SnapshotMixin):
    value: float
    level: str
    description: str
    safety: str


@dataclass(frozen=True)
class ViscosityEstimate(SnapshotMixin):
    """Viscosity in cP at ``temperature`` °C with a workability tag."""

    value: int
    level: str
    description: str
    workability: str
    temperature: float


@dataclass(frozen=True)
class Workability(SnapshotMixin):
    ready: bool
    message: str
    color: str


@dataclass(frozen=True)
class BakingEffects(SnapshotMixin):
    """Dough chemistry shift after baking.

    Attributes
    ----------
    temp, time : float
        Oven settings used.
    brix_before, brix_after, brix_change : float
        Sugar concentration before/after moisture loss.
    ph_before, ph_after, ph_change : float
        Acidity drift from Maillard reactions.
    water_activity : float
        Estimated aw of the baked layer.
    moisture_loss : float
        Percent of mass lost.
    maturation_time : str
        Expected resting time for the assembled cake.
    """

    temp: float
    time: float
    brix_before: float
    brix_after: float
    brix_change: float
    ph_before: float
    ph_after: float
    ph_change: float
    water_activity: float
    moisture_loss: float
    maturation_time: str


@dataclass(frozen=True)
class CakeChemistry(SnapshotMixin):
    brix: BrixEstimate
    ph: PhEstimate
    viscosity: ViscosityEstimate
    workability: Workability
    sweetness_index: SweetnessIndex
    baking_effects: BakingEffects | None = None


@dataclass(frozen=True)
class FillingChemistry(SnapshotMixin):
    brix: BrixEstimate
    ph: PhEstimate
    viscosity: ViscosityEstimate
    water_activity: WaterActivity
    stability: StabilityReport
    sweetness_index: SweetnessIndex


@dataclass(frozen=True)
class CompatibilityReport(SnapshotMixin):
    """How well a baked layer and a filling pair up (0..100)."""

    score: int
    rating: str
    rating_color: str
    issues: tuple[str, ...]
    recommendations: tuple[str, ...]
    estimated_maturation: str
    summary: str
